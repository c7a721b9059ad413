"""Domain apps of the ADM Travels backend."""
