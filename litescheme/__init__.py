"""Discover the schema of an SQLite database and write it back out as SQL."""

__version__ = "0.1.0"