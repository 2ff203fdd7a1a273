"""Queries that probe an SQLite database for tables and columns."""

from __future__ import annotations

from typing import Any


def query_tables() -> tuple[str, tuple[Any, ...]]:
    """A query listing user tables in a column named ``table_name``."""
    sql = (
        'SELECT "name" AS "table_name" FROM "sqlite_master" '
        'WHERE "type" = ? AND "name" <> ?'
    )
    return sql, ("table", "sqlite_sequence")


def has_column(table: str, column: str) -> tuple[str, tuple[Any, ...]]:
    """A query yielding one row whose ``has_column`` value is 1 if the column exists."""
    sql = (
        'SELECT COUNT(*) > 0 AS "has_column" FROM pragma_table_info(?) '
        'WHERE "name" = ?'
    )
    return sql, (table, column)