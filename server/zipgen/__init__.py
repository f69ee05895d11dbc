"""Project-template zip generator service."""

__version__ = "0.1.0"
