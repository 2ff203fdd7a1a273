"""Discovery of the full schema of an SQLite database."""

from __future__ import annotations

import sqlite3

from .column import IndexInfo
from .executor import Executor
from .table import Schema, TableDef

_TABLES_SQL = "SELECT name FROM sqlite_master WHERE type = ? AND name <> ?"
_TABLES_PARAMS = ("table", "sqlite_sequence")


class SchemaDiscovery:
    """Reads tables, columns, foreign keys and indexes from a connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.executor = Executor(connection)

    def _tables(self) -> list[TableDef]:
        rows = self.executor.fetch_all(_TABLES_SQL, _TABLES_PARAMS)
        return [TableDef.from_row(row) for row in rows]

    def discover(self) -> Schema:
        """Every table with its autoincrement flag, foreign keys and columns."""
        tables = self._tables()
        for table in tables:
            table.pk_is_autoincrement(self.executor)
            table.get_foreign_keys(self.executor)
            table.get_column_info(self.executor)
        return Schema(tables=tables)

    def discover_indexes(self) -> list[IndexInfo]:
        """Every index of every table, primary key indexes excepted."""
        return [
            index
            for table in self._tables()
            for index in table.get_indexes(self.executor)
        ]