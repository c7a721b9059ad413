"""
Shared Kernel

Base classes and value objects shared by the booking, checkout and
currency apps.
"""
