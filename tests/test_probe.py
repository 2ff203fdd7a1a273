import sqlite3

import pytest

from litescheme.probe import has_column, query_tables


@pytest.fixture
def connection():
    connection = sqlite3.connect(":memory:")
    connection.execute("CREATE TABLE counter (id INTEGER PRIMARY KEY AUTOINCREMENT, hits INTEGER)")
    connection.execute("CREATE TABLE note (body TEXT)")
    yield connection
    connection.close()


def test_query_tables_excludes_sequence(connection):
    sql, params = query_tables()
    cursor = connection.execute(sql, params)
    assert cursor.description[0][0] == "table_name"
    assert {row[0] for row in cursor.fetchall()} == {"counter", "note"}


def test_has_column_present(connection):
    sql, params = has_column("counter", "hits")
    cursor = connection.execute(sql, params)
    assert cursor.description[0][0] == "has_column"
    assert cursor.fetchone()[0] == 1


def test_has_column_absent(connection):
    sql, params = has_column("note", "hits")
    assert connection.execute(sql, params).fetchone()[0] == 0


def test_has_column_binds_arguments():
    _, params = has_column("note", "body")
    assert params == ("note", "body")