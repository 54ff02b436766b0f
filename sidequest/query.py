"""Convenience wrapper for running one SQL statement against a database."""

from __future__ import annotations

import sqlite3
from typing import TYPE_CHECKING, Optional, Union

from .errors import ParameterBindError
from .statement import PreparedStatement, ResultCode

if TYPE_CHECKING:
    from .database import Database


class Query:
    """A single SQL statement: bind parameters, step through rows, read columns."""

    def __init__(self, database: Database, sql: str) -> None:
        self.database = database
        self.column_cache = database.column_cache
        self._statement: Optional[PreparedStatement] = database.prepare(sql)
        self._statement.reset()
        self.is_done = False

    def __enter__(self) -> Query:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.finalize()

    @property
    def statement(self) -> PreparedStatement:
        """The compiled statement this query runs."""
        if self._statement is None:
            raise RuntimeError("query has been finalized")
        return self._statement

    def finalize(self) -> None:
        """Release the statement; the query cannot be used afterwards."""
        if self._statement is not None:
            self._statement.reset()
            self._statement = None

    def bind(self, index: int, value: Union[str, int]) -> None:
        """Bind a text or integer value to the 1-based parameter ``index``."""
        kind = "string" if isinstance(value, str) else "int"
        try:
            self.statement.bind(index, value)
        except ParameterBindError as exc:
            raise RuntimeError(f"error binding {kind}") from exc

    def step(self) -> bool:
        """Advance to the next row; return False once no rows remain."""
        try:
            code = self.statement.step()
        except sqlite3.Error as exc:
            raise RuntimeError("error executing step()") from exc
        if code == ResultCode.ROW:
            return True
        if code == ResultCode.DONE:
            self.is_done = True
            return False
        raise RuntimeError("error executing step()")

    def step_done(self) -> bool:
        """Run the statement one step; return True only if it finished."""
        try:
            code = self.statement.step()
        except sqlite3.Error:
            return False
        if code == ResultCode.DONE:
            self.is_done = True
            return True
        return False

    def get_text(self, column_name: str) -> str:
        """Return the named column of the current row as text; NULL gives ''."""
        index = self.column_cache.get_column_index(self.statement, column_name)
        value = self.statement.column(index)
        if value is None:
            return ""
        if isinstance(value, bytes):
            return value.decode("utf-8", "replace")
        return str(value)

    def get_int(self, column_name: str) -> int:
        """Return the named column of the current row as an integer."""
        return self.database.read_int_value(self.statement, column_name)

    def reset(self) -> None:
        """Rewind the statement so it can run again."""
        self.statement.reset()
        self.is_done = False