"""Connection to the server's SQLite database."""

from __future__ import annotations

import re
import sqlite3
from typing import Any, Optional, Union

from .column_cache import ColumnCache
from .errors import DatabaseNotFoundError, ParameterBindError
from .statement import PreparedStatement, ResultCode, error_code
from .statement_cache import StatementCache

_SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS user(
    email TEXT PRIMARY KEY,
    display_name TEXT,
    password TEXT
);

INSERT OR IGNORE INTO user(email, display_name, password)
VALUES ('root@example.com', 'Sidequest Root User', '');
"""

_LEADING_INTEGER = re.compile(r"\s*([+-]?\d+)")


def _to_int(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bytes):
        value = value.decode("utf-8", "replace")
    if isinstance(value, str):
        match = _LEADING_INTEGER.match(value)
        value = int(match.group(1)) if match else 0
    number = int(value)
    return (number + 2**31) % 2**32 - 2**31


class Database:
    """An open SQLite database with statement and column caches."""

    def __init__(self, filepath_of_database: str) -> None:
        self._connection: Optional[sqlite3.Connection] = None
        self._open(filepath_of_database)
        self.statement_cache = StatementCache(self)
        self.column_cache = ColumnCache(self)

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._connection is None:
            raise sqlite3.ProgrammingError("Cannot operate on a closed database.")
        return self._connection

    def prepare(self, statement_sql: str) -> PreparedStatement:
        """Return the compiled statement for ``statement_sql``, compiling it once."""
        statement = self.statement_cache.get_statement(statement_sql)
        if statement is None:
            statement = self.statement_cache.add_statement(statement_sql)
        return statement

    def bind(
        self,
        prepared_statement: PreparedStatement,
        parameter_index: int,
        value: Union[str, int],
    ) -> None:
        """Bind ``value`` to a parameter of ``prepared_statement``."""
        try:
            prepared_statement.bind(parameter_index, value)
        except ParameterBindError as exc:
            raise ParameterBindError(
                f"error binding parameter {parameter_index} to {value}", exc.error_code
            ) from exc

    def execute(self, target: Union[PreparedStatement, str]) -> int:
        """Step a prepared statement, or run an SQL script; return the result code."""
        if isinstance(target, PreparedStatement):
            try:
                return target.step()
            except sqlite3.Error as exc:
                return error_code(exc)
        try:
            self.connection.executescript(target)
        except sqlite3.Error as exc:
            return error_code(exc)
        return ResultCode.OK

    def reset_statement(self, prepared_statement: PreparedStatement) -> None:
        prepared_statement.reset()

    def read_int_value(self, prepared_statement: PreparedStatement, column_name: str) -> int:
        """Return the named column of the current row as an integer."""
        index = self.column_cache.get_column_index(prepared_statement, column_name)
        return _to_int(prepared_statement.column(index))

    def read_text_value(self, prepared_statement: PreparedStatement, column_name: str) -> str:
        """Return the named column of the current row as text."""
        index = self.column_cache.get_column_index(prepared_statement, column_name)
        value = prepared_statement.column(index)
        if value is None:
            raise ValueError(f"column {column_name} holds no text")
        if isinstance(value, bytes):
            return value.decode("utf-8", "replace")
        return str(value)

    def initialize_schema(self) -> None:
        """Create the user table and the root user if they are missing."""
        try:
            self.connection.executescript(_SCHEMA_SQL)
        except sqlite3.Error as exc:
            raise RuntimeError("Failed to execute schema SQL") from exc

    def close(self) -> None:
        if self._connection is not None:
            self._connection.close()
            self._connection = None

    def _open(self, url: str) -> None:
        try:
            self._connection = sqlite3.connect(url, isolation_level=None)
        except sqlite3.Error as exc:
            raise DatabaseNotFoundError(f"database not found: {url}") from exc