import sqlite3

import pytest

from litescheme.errors import ParseIntegerError
from litescheme.types import DefaultKind, DefaultType, Type, TypeKind


@pytest.mark.parametrize(
    "declared, kind",
    [
        ("int", TypeKind.INT),
        ("INTEGER", TypeKind.INTEGER),
        ("tiny int", TypeKind.TINY_INT),
        ("SMALL INT", TypeKind.SMALL_INT),
        ("medium int", TypeKind.MEDIUM_INT),
        ("big int", TypeKind.BIG_INT),
        ("unsigned int", TypeKind.UNSIGNED_BIG_INT),
        ("int2", TypeKind.INT2),
        ("Int8", TypeKind.INT8),
        ("text", TypeKind.TEXT),
        ("clob", TypeKind.CLOB),
        ("blob", TypeKind.BLOB),
        ("real", TypeKind.REAL),
        ("double", TypeKind.DOUBLE),
        ("double precision", TypeKind.DOUBLE_PRECISION),
        ("float", TypeKind.FLOAT),
        ("numeric", TypeKind.NUMERIC),
        ("boolean", TypeKind.BOOLEAN),
        ("date", TypeKind.DATE),
        ("datetime", TypeKind.DATETIME),
        ("timestamp", TypeKind.TIMESTAMP),
    ],
)
def test_parse_fixed_types(declared, kind):
    assert Type.parse(declared) == Type(kind)


@pytest.mark.parametrize(
    "declared, kind",
    [
        ("VARCHAR(10)", TypeKind.VAR_CHAR),
        ("character(20)", TypeKind.CHARACTER),
        ("varying character", TypeKind.VARYING_CHARACTER),
        ("nchar(55)", TypeKind.NCHAR),
        ("native character(70)", TypeKind.NATIVE_CHARACTER),
        ("nvarchar(100)", TypeKind.NVARCHAR),
    ],
)
def test_parse_sized_types_use_default_length(declared, kind):
    parsed = Type.parse(declared)
    assert parsed.kind is kind
    assert parsed.length == 255


@pytest.mark.parametrize("declared", ["JSON", "", "VARCHAR (10)", "UUID(16)"])
def test_unknown_types_become_blob(declared):
    assert Type.parse(declared) == Type(TypeKind.BLOB)


def test_parse_decimal():
    assert Type.parse("decimal(5,2)") == Type(TypeKind.DECIMAL, integral=5, fractional=2)


@pytest.mark.parametrize("declared", ["DECIMAL", "DECIMAL(5)", "DECIMAL(x,2)", "DECIMAL(10,2)"])
def test_parse_decimal_errors(declared):
    with pytest.raises(ParseIntegerError):
        Type.parse(declared)


def test_decimal_sql_type():
    assert Type.parse("DECIMAL(5,2)").sql_type() == "DECIMAL(5, 2)"


@pytest.mark.parametrize(
    "group",
    [
        ["INT", "INTEGER", "MEDIUM INT", "INT2", "INT8"],
        ["BIG INT", "UNSIGNED INT"],
        ["VARCHAR(3)", "CHARACTER", "NCHAR", "NVARCHAR", "TEXT", "CLOB"],
        ["REAL", "DOUBLE", "DOUBLE PRECISION", "FLOAT", "NUMERIC"],
    ],
)
def test_aliases_share_sql_type(group):
    assert len({Type.parse(name).sql_type() for name in group}) == 1


def test_every_kind_has_sql_type_accepted_by_sqlite():
    connection = sqlite3.connect(":memory:")
    for index, kind in enumerate(TypeKind):
        column_type = Type(kind, integral=5, fractional=2)
        declared = column_type.sql_type()
        connection.execute(f'CREATE TABLE t{index} ("c" {declared})')
        reported = connection.execute(f"PRAGMA table_info('t{index}')").fetchone()[2]
        assert reported == declared
    connection.close()


def test_default_null_and_unspecified():
    assert DefaultType.parse("NULL") == DefaultType(DefaultKind.NULL)
    assert DefaultType.parse("") == DefaultType(DefaultKind.UNSPECIFIED)
    assert DefaultType(DefaultKind.NULL).sql_literal() is None
    assert DefaultType(DefaultKind.UNSPECIFIED).sql_literal() is None


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", DefaultType(DefaultKind.INTEGER, 42)),
        ("'7'", DefaultType(DefaultKind.INTEGER, 7)),
        ("-13", DefaultType(DefaultKind.INTEGER, -13)),
        ("3.5", DefaultType(DefaultKind.FLOAT, 3.5)),
        ("'4.99'", DefaultType(DefaultKind.FLOAT, 4.99)),
        ("2147483648", DefaultType(DefaultKind.FLOAT, 2147483648.0)),
        ("'abc'", DefaultType(DefaultKind.STRING, "abc")),
        ("1_000", DefaultType(DefaultKind.STRING, "1_000")),
        (" 5", DefaultType(DefaultKind.STRING, " 5")),
        ("CURRENT_TIMESTAMP", DefaultType(DefaultKind.STRING, "CURRENT_TIMESTAMP")),
    ],
)
def test_default_parse(text, expected):
    assert DefaultType.parse(text) == expected


@pytest.mark.parametrize(
    "default",
    [
        DefaultType(DefaultKind.INTEGER, 42),
        DefaultType(DefaultKind.FLOAT, 19.99),
        DefaultType(DefaultKind.STRING, "it's"),
        DefaultType(DefaultKind.STRING, ""),
    ],
)
def test_sql_literal_round_trips_through_sqlite(default):
    connection = sqlite3.connect(":memory:")
    (value,) = connection.execute(f"SELECT {default.sql_literal()}").fetchone()
    connection.close()
    assert value == default.value