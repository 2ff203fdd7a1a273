"""Errors raised while discovering the schema of an SQLite database."""

from __future__ import annotations


class SqliteDiscoveryError(Exception):
    """Base class for every error raised during schema discovery."""

    default_message = "SQLite Discovery Error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ParseIntegerError(SqliteDiscoveryError, ValueError):
    """A value reported by SQLite could not be read as an integer."""

    default_message = "Parse Integer Error"


class ParseFloatError(SqliteDiscoveryError, ValueError):
    """A value reported by SQLite could not be read as a float."""

    default_message = "Parse Float Error Error"


class DatabaseError(SqliteDiscoveryError):
    """The database driver failed; the original exception is kept as ``cause``."""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__(f"Database Error: {cause!r}")


class NoIndexesFound(SqliteDiscoveryError):
    """Index discovery was requested for a table that has no indexes."""

    default_message = "No Indexes Found Error"