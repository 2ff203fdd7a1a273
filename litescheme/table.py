"""Tables of an SQLite database and the schema that holds them."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from .column import ColumnInfo, ForeignKeysInfo, IndexedColumns, IndexInfo, PartialIndexInfo
from .executor import Executor


def _quote(identifier: str) -> str:
    return '"' + identifier.replace('"', '""') + '"'


def _pragma(name: str, table: str) -> str:
    return f"PRAGMA {name}('" + table.replace("'", "''") + "')"


@dataclass
class TableDef:
    """A table with its columns, foreign keys and autoincrement flag."""

    name: str = ""
    foreign_keys: list[ForeignKeysInfo] = field(default_factory=list)
    columns: list[ColumnInfo] = field(default_factory=list)
    auto_increment: bool = False

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> TableDef:
        """Build an empty definition from a row whose first value is the table name."""
        return cls(name=row[0])

    def pk_is_autoincrement(self, executor: Executor) -> TableDef:
        """Mark the table as autoincrementing if its SQL mentions AUTOINCREMENT."""
        rows = executor.fetch_all(
            "SELECT 1 FROM sqlite_master WHERE type = ? AND name = ? AND sql LIKE ?",
            ("table", self.name, "%AUTOINCREMENT%"),
        )
        if rows:
            self.auto_increment = True
        return self

    def get_indexes(self, executor: Executor) -> list[IndexInfo]:
        """Every index of the table except the one backing its primary key."""
        partial_indexes = [
            info
            for info in map(
                PartialIndexInfo.from_row,
                executor.fetch_all_raw(_pragma("index_list", self.name)),
            )
            if info.origin != "pk"
        ]
        indexes = []
        for partial in partial_indexes:
            indexed = self._single_index_info(executor, partial.name)
            indexes.append(
                IndexInfo(
                    type=indexed.type,
                    index_name=indexed.name,
                    table_name=indexed.table,
                    unique=partial.unique,
                    origin=partial.origin,
                    partial=partial.partial,
                    columns=indexed.indexed_columns,
                )
            )
        return indexes

    def get_foreign_keys(self, executor: Executor) -> TableDef:
        """Append the table's foreign keys."""
        rows = executor.fetch_all_raw(_pragma("foreign_key_list", self.name))
        self.foreign_keys.extend(ForeignKeysInfo.from_row(row) for row in rows)
        return self

    def get_column_info(self, executor: Executor) -> TableDef:
        """Append the table's columns; raises ParseIntegerError on a malformed type."""
        rows = executor.fetch_all_raw(_pragma("table_info", self.name))
        self.columns.extend(ColumnInfo.from_row(row) for row in rows)
        return self

    @staticmethod
    def _single_index_info(executor: Executor, index_name: str) -> IndexedColumns:
        row = executor.fetch_one("SELECT * FROM sqlite_master WHERE name = ?", (index_name,))
        return IndexedColumns.from_row(row)

    def write(self) -> str:
        """The CREATE TABLE statement that recreates this table."""
        definitions = []
        primary_keys = []
        for column in self.columns:
            parts = [_quote(column.name), column.type.sql_type()]
            if column.not_null:
                parts.append("NOT NULL")
            if self.auto_increment and column.primary_key:
                parts.append("PRIMARY KEY AUTOINCREMENT")
            elif column.primary_key:
                primary_keys.append(column.name)
            default = column.default_value.sql_literal()
            if default is not None:
                parts.append(f"DEFAULT {default}")
            definitions.append(" ".join(parts))

        if primary_keys:
            keys = ", ".join(_quote(key) for key in primary_keys)
            definitions.append(f"PRIMARY KEY ({keys})")

        for foreign_key in self.foreign_keys:
            definitions.append(
                f"FOREIGN KEY ({_quote(foreign_key.from_column)}) "
                f"REFERENCES {_quote(foreign_key.table)} ({_quote(foreign_key.to_column)}) "
                f"ON DELETE {foreign_key.on_delete.value} "
                f"ON UPDATE {foreign_key.on_update.value}"
            )

        return f"CREATE TABLE {_quote(self.name)} ( " + ", ".join(definitions) + " )"


@dataclass
class Schema:
    """Every discovered table of a database."""

    tables: list[TableDef] = field(default_factory=list)