"""Runs queries against an SQLite connection for schema discovery."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Sequence
from typing import Any

from .errors import DatabaseError

_log = logging.getLogger(__name__)


class Executor:
    """Runs queries on a connection and turns driver failures into DatabaseError."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def _execute(self, sql: str, params: Sequence[Any]) -> sqlite3.Cursor:
        _log.debug("%s, %r", sql, params)
        try:
            return self.connection.execute(sql, tuple(params))
        except sqlite3.Error as exc:
            raise DatabaseError(exc) from exc

    def fetch_all(self, sql: str, params: Sequence[Any] = ()) -> list[tuple[Any, ...]]:
        """Run a parameterised query and return every row."""
        cursor = self._execute(sql, params)
        try:
            return cursor.fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(exc) from exc
        finally:
            cursor.close()

    def fetch_one(self, sql: str, params: Sequence[Any] = ()) -> tuple[Any, ...]:
        """Run a parameterised query and return its first row; no row is an error."""
        cursor = self._execute(sql, params)
        try:
            row = cursor.fetchone()
        except sqlite3.Error as exc:
            raise DatabaseError(exc) from exc
        finally:
            cursor.close()
        if row is None:
            raise DatabaseError(LookupError("query returned no rows"))
        return row

    def fetch_all_raw(self, sql: str) -> list[tuple[Any, ...]]:
        """Run a statement without parameters and return every row."""
        return self.fetch_all(sql)