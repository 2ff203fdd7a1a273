"""Columns, indexes and foreign keys as reported by SQLite pragmas."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .types import DefaultType, Type


def _quote(identifier: str) -> str:
    return '"' + identifier.replace('"', '""') + '"'


@dataclass
class ColumnInfo:
    """One row of ``PRAGMA table_info``."""

    cid: int
    name: str
    type: Type
    not_null: bool
    default_value: DefaultType
    primary_key: bool

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> ColumnInfo:
        """Build from a ``PRAGMA table_info`` row; raises ParseIntegerError on bad types."""
        return cls(
            cid=row[0],
            name=row[1],
            type=Type.parse(row[2]),
            not_null=row[3] != 0,
            default_value=DefaultType.parse(row[4] or ""),
            primary_key=row[5] != 0,
        )


@dataclass
class IndexInfo:
    """An index together with the columns it covers."""

    type: str = ""
    index_name: str = ""
    table_name: str = ""
    unique: bool = False
    origin: str = ""
    partial: int = 0
    columns: list[str] = field(default_factory=list)

    def write(self) -> str:
        """The CREATE INDEX statement that recreates this index."""
        unique = "UNIQUE " if self.unique else ""
        columns = ", ".join(_quote(column) for column in self.columns)
        return (
            f"CREATE {unique}INDEX {_quote(self.index_name)} "
            f"ON {_quote(self.table_name)} ({columns})"
        )


@dataclass
class PartialIndexInfo:
    """One row of ``PRAGMA index_list``."""

    seq: int = 0
    name: str = ""
    unique: bool = False
    origin: str = ""
    partial: int = 0

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> PartialIndexInfo:
        return cls(
            seq=row[0],
            name=row[1],
            unique=row[2] != 0,
            origin=row[3],
            partial=row[4],
        )


@dataclass
class IndexedColumns:
    """An index's ``sqlite_master`` row with the column names taken from its SQL."""

    type: str = ""
    name: str = ""
    table: str = ""
    root_page: int = 0
    indexed_columns: list[str] = field(default_factory=list)

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> IndexedColumns:
        sql = row[4] or ""
        try:
            after_on = sql.split("ON")[1].strip()
            column_list = after_on.split("(")[1]
        except IndexError as exc:
            raise ValueError(f"cannot read indexed columns from {sql!r}") from exc
        columns = [
            column.strip().replace("`", "").replace('"', "")
            for column in column_list.replace(")", "").split(",")
        ]
        return cls(
            type=row[0],
            name=row[1],
            table=row[2],
            root_page=row[3],
            indexed_columns=columns,
        )


class ForeignKeyAction(Enum):
    """Actions taken on update or delete of a referenced row."""

    NO_ACTION = "NO ACTION"
    RESTRICT = "RESTRICT"
    SET_NULL = "SET NULL"
    SET_DEFAULT = "SET DEFAULT"
    CASCADE = "CASCADE"

    @classmethod
    def from_str(cls, action: str) -> ForeignKeyAction:
        """Read an action name; anything unknown is NO ACTION."""
        try:
            return cls(action)
        except ValueError:
            return cls.NO_ACTION


class MatchAction(Enum):
    """The ``MATCH`` clause of a foreign key."""

    SIMPLE = "MATCH SIMPLE"
    PARTIAL = "MATCH PARTIAL"
    FULL = "MATCH FULL"
    NONE = "MATCH NONE"

    @classmethod
    def from_str(cls, action: str) -> MatchAction:
        """Read a match clause; anything unknown is MATCH NONE."""
        try:
            return cls(action)
        except ValueError:
            return cls.NONE


@dataclass
class ForeignKeysInfo:
    """One row of ``PRAGMA foreign_key_list``."""

    id: int = 0
    seq: int = 0
    table: str = ""
    from_column: str = ""
    to_column: str = ""
    on_update: ForeignKeyAction = ForeignKeyAction.NO_ACTION
    on_delete: ForeignKeyAction = ForeignKeyAction.NO_ACTION
    match: MatchAction = MatchAction.NONE

    @classmethod
    def from_row(cls, row: Sequence[Any]) -> ForeignKeysInfo:
        return cls(
            id=row[0],
            seq=row[1],
            table=row[2],
            from_column=row[3],
            to_column=row[4],
            on_update=ForeignKeyAction.from_str(row[5]),
            on_delete=ForeignKeyAction.from_str(row[6]),
            match=MatchAction.from_str(row[7]),
        )