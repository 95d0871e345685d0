"""Repositories and use cases for the Bubbme back office, plus task records."""

__version__ = "0.1.0"