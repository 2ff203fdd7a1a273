"""Column types and default values as reported by SQLite."""

from __future__ import annotations

import math
import re
import string
from dataclasses import dataclass
from enum import Enum

from .errors import ParseIntegerError


class TypeKind(Enum):
    """The SQLite type names that are recognised; values are the declared names."""

    INT = "INT"
    INTEGER = "INTEGER"
    TINY_INT = "TINY INT"
    SMALL_INT = "SMALL INT"
    MEDIUM_INT = "MEDIUM INT"
    BIG_INT = "BIG INT"
    UNSIGNED_BIG_INT = "UNSIGNED INT"
    INT2 = "INT2"
    INT8 = "INT8"
    CHARACTER = "CHARACTER"
    VAR_CHAR = "VARCHAR"
    VARYING_CHARACTER = "VARYING CHARACTER"
    NCHAR = "NCHAR"
    NATIVE_CHARACTER = "NATIVE CHARACTER"
    NVARCHAR = "NVARCHAR"
    TEXT = "TEXT"
    CLOB = "CLOB"
    BLOB = "BLOB"
    REAL = "REAL"
    DOUBLE = "DOUBLE"
    DOUBLE_PRECISION = "DOUBLE PRECISION"
    FLOAT = "FLOAT"
    NUMERIC = "NUMERIC"
    DECIMAL = "DECIMAL"
    BOOLEAN = "BOOLEAN"
    DATE = "DATE"
    DATETIME = "DATETIME"
    TIMESTAMP = "TIMESTAMP"


_SIZED_KINDS = frozenset(
    {
        TypeKind.CHARACTER,
        TypeKind.VAR_CHAR,
        TypeKind.VARYING_CHARACTER,
        TypeKind.NCHAR,
        TypeKind.NATIVE_CHARACTER,
        TypeKind.NVARCHAR,
    }
)

# Declared lengths of character types are not retained; every one gets this.
_DEFAULT_LENGTH = 255

_SQL_NAMES = {
    TypeKind.INT: "INTEGER",
    TypeKind.INTEGER: "INTEGER",
    TypeKind.MEDIUM_INT: "INTEGER",
    TypeKind.INT2: "INTEGER",
    TypeKind.INT8: "INTEGER",
    TypeKind.TINY_INT: "TINYINT",
    TypeKind.SMALL_INT: "SMALLINT",
    TypeKind.BIG_INT: "BIGINT",
    TypeKind.UNSIGNED_BIG_INT: "BIGINT",
    TypeKind.CHARACTER: "TEXT",
    TypeKind.VAR_CHAR: "TEXT",
    TypeKind.VARYING_CHARACTER: "TEXT",
    TypeKind.NCHAR: "TEXT",
    TypeKind.NATIVE_CHARACTER: "TEXT",
    TypeKind.NVARCHAR: "TEXT",
    TypeKind.TEXT: "TEXT",
    TypeKind.CLOB: "TEXT",
    TypeKind.BLOB: "BLOB",
    TypeKind.REAL: "DECIMAL",
    TypeKind.DOUBLE: "DECIMAL",
    TypeKind.DOUBLE_PRECISION: "DECIMAL",
    TypeKind.FLOAT: "DECIMAL",
    TypeKind.NUMERIC: "DECIMAL",
    TypeKind.BOOLEAN: "BOOLEAN",
    TypeKind.DATE: "DATE",
    TypeKind.DATETIME: "DATETIME",
    TypeKind.TIMESTAMP: "TIMESTAMP",
}


def _digit(char: str) -> int:
    if char not in string.digits:
        raise ParseIntegerError(f"invalid digit {char!r}")
    return int(char)


@dataclass(frozen=True)
class Type:
    """A column type; ``length`` is set for character types, the precision for DECIMAL."""

    kind: TypeKind
    length: int | None = None
    integral: int | None = None
    fractional: int | None = None

    @classmethod
    def parse(cls, data_type: str) -> Type:
        """Read a declared column type such as ``VARCHAR(20)`` or ``DECIMAL(5,2)``."""
        head, *rest = data_type.upper().split("(")
        try:
            kind = TypeKind(head)
        except ValueError:
            return cls(TypeKind.BLOB)
        if kind is TypeKind.DECIMAL:
            return cls._decimal(rest)
        if kind in _SIZED_KINDS:
            return cls(kind, length=_DEFAULT_LENGTH)
        return cls(kind)

    @classmethod
    def _decimal(cls, rest: list[str]) -> Type:
        if not rest:
            raise ParseIntegerError("DECIMAL without precision")
        precision = rest[0]
        try:
            integral = _digit(precision[0])
            fractional = _digit(precision[2])
        except IndexError as exc:
            raise ParseIntegerError(f"malformed DECIMAL precision {precision!r}") from exc
        return cls(TypeKind.DECIMAL, integral=integral, fractional=fractional)

    def sql_type(self) -> str:
        """The type name used when writing a column definition."""
        if self.kind is TypeKind.DECIMAL:
            return f"DECIMAL({self.integral}, {self.fractional})"
        return _SQL_NAMES[self.kind]


class DefaultKind(Enum):
    """The forms an SQLite ``dflt_value`` can take."""

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    NULL = "null"
    UNSPECIFIED = "unspecified"


_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1


@dataclass(frozen=True)
class DefaultType:
    """The default value of a column."""

    kind: DefaultKind
    value: int | float | str | None = None

    @classmethod
    def parse(cls, text: str) -> DefaultType:
        """Read the ``dflt_value`` reported by ``PRAGMA table_info``."""
        if text == "NULL":
            return cls(DefaultKind.NULL)
        if not text:
            return cls(DefaultKind.UNSPECIFIED)
        value = text.replace("'", "")
        if _INTEGER_RE.fullmatch(value):
            number = int(value)
            if _I32_MIN <= number <= _I32_MAX:
                return cls(DefaultKind.INTEGER, number)
        if _FLOAT_RE.fullmatch(value):
            return cls(DefaultKind.FLOAT, float(value))
        return cls(DefaultKind.STRING, value)

    def sql_literal(self) -> str | None:
        """The SQL literal for a DEFAULT clause, or None when none is written."""
        if self.kind is DefaultKind.INTEGER:
            return str(self.value)
        if self.kind is DefaultKind.FLOAT:
            number = float(self.value)
            if math.isnan(number):
                return "NULL"
            if math.isinf(number):
                return "9e999" if number > 0 else "-9e999"
            return repr(number)
        if self.kind is DefaultKind.STRING:
            return "'" + str(self.value).replace("'", "''") + "'"
        return None