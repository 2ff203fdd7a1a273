# litescheme

Read the schema of an SQLite database and turn it back into `CREATE TABLE` and `CREATE INDEX` statements. The schema covers tables, columns, types, defaults, primary keys, foreign keys and indexes.

The package uses only the standard library's `sqlite3` module.

## Installing

```
pip install litescheme
```

## Discovering a schema

```python
import sqlite3

from litescheme.discovery import SchemaDiscovery

connection = sqlite3.connect("shop.db")
discovery = SchemaDiscovery(connection)

schema = discovery.discover()
for table in schema.tables:
    print(table.name, [column.name for column in table.columns])
    print(table.write())

for index in discovery.discover_indexes():
    print(index.write())
```

`SchemaDiscovery` takes an open `sqlite3.Connection`. It wraps the connection in a `litescheme.executor.Executor`, which you can reach as `discovery.executor`.

`discover()` returns a `litescheme.table.Schema` whose `tables` are `TableDef` objects. It covers every table in `sqlite_master` except `sqlite_sequence`. Each table holds:

- `columns`: `ColumnInfo` records, one for each row of `PRAGMA table_info`. Each has a parsed `Type` and `DefaultType`.
- `foreign_keys`: `ForeignKeysInfo` records. Each has a `ForeignKeyAction` for `on_update` and `on_delete`, and a `MatchAction`.
- `auto_increment`: true when the table's SQL contains `AUTOINCREMENT`.

`TableDef.write()` returns a `CREATE TABLE` statement as a string.

- When the table autoincrements, primary key columns are written inline as `PRIMARY KEY AUTOINCREMENT`.
- Otherwise they are collected into a `PRIMARY KEY (...)` clause.
- Each foreign key becomes a `FOREIGN KEY ... REFERENCES ... ON DELETE ... ON UPDATE ...` clause.

`discover_indexes()` returns `IndexInfo` records for every index that `PRAGMA index_list` does not mark with the origin `pk`. The column names are read from the index's SQL in `sqlite_master`. `IndexInfo.write()` returns the matching `CREATE [UNIQUE] INDEX` statement.

## Column types and defaults

`litescheme.types.Type.parse` reads a declared type such as `VARCHAR(45)` or `DECIMAL(5,2)`. Names are matched without regard to case.

- Unrecognised type names become `TypeKind.BLOB`.
- Character types (`CHARACTER`, `VARCHAR`, `NCHAR` and the like) always get a `length` of 255. The declared length is not kept.
- `DECIMAL` reads a single digit for each of the integral and fractional parts.

`Type.sql_type()` gives the type name used when writing a column.

`DefaultType.parse` reads a `dflt_value`:

| `dflt_value` | Result |
|---|---|
| `NULL` | `DefaultKind.NULL` |
| empty | `DefaultKind.UNSPECIFIED` |
| any other value | quotes are removed, then it is read as a 32-bit integer, a float, or a string, in that order |

`sql_literal()` returns the literal for a `DEFAULT` clause. It returns `None` for `NULL` and unspecified defaults, which are not written.

```python
from litescheme.types import Type, DefaultType

Type.parse("integer").sql_type()           # 'INTEGER'
DefaultType.parse("'hello'").sql_literal() # "'hello'"
```

## Probing queries

`litescheme.probe` builds small queries as `(sql, params)` pairs:

- `query_tables()` lists user tables in a column named `table_name`.
- `has_column(table, column)` yields one row whose `has_column` value is 1 when the column exists and 0 when it does not.

```python
from litescheme.probe import has_column

sql, params = has_column("customer", "email")
(found,) = connection.execute(sql, params).fetchone()
```

## Errors

The errors live in `litescheme.errors` and derive from `SqliteDiscoveryError`:

- `ParseIntegerError` is raised for a `DECIMAL` declaration whose precision cannot be read.
- `DatabaseError` is raised for any `sqlite3.Error` during a query, and when `Executor.fetch_one` finds no row. The original exception is kept as `cause`.
- `ParseFloatError` and `NoIndexesFound` are defined for callers to use. Nothing in the package currently raises them.

`IndexedColumns.from_row` raises a plain `ValueError` when it cannot find the column list in an index's SQL.

## What it does not do

- There is no command-line tool.
- The package only reads a schema and produces SQL text. It does not run the statements it writes, compare schemas, or migrate a database.

## Running the tests

```
pip install -e ".[test]"
pytest
```