"""Data-access layer for departments and their sellers."""

__version__ = "1.0.0"
