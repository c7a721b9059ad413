"""Core app package: service-level endpoints shared by the whole API."""
