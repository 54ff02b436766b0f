"""Compiled SQL statements that are stepped row by row."""

from __future__ import annotations

import enum
import sqlite3
from typing import Any, List, Optional, Tuple, Union

from .errors import ParameterBindError

_MAX_PARAMETERS = 32766


class ResultCode(enum.IntEnum):
    """Result codes of the SQLite engine used by the storage layer."""

    OK = 0
    ERROR = 1
    CONSTRAINT = 19
    MISUSE = 21
    RANGE = 25
    ROW = 100
    DONE = 101


def error_code(exc: BaseException) -> int:
    """Return the primary SQLite result code carried by an sqlite3 exception."""
    code = getattr(exc, "sqlite_errorcode", None)
    if code is None:
        return ResultCode.ERROR
    primary = code & 0xFF
    try:
        return ResultCode(primary)
    except ValueError:
        return primary


def _parameter_count(connection: sqlite3.Connection, sql: str) -> int:
    """Compile ``sql`` without running it and return how many parameters it takes."""
    probe = "EXPLAIN " + sql
    for count in range(_MAX_PARAMETERS + 1):
        try:
            connection.execute(probe, (None,) * count).close()
        except sqlite3.ProgrammingError as exc:
            if "bindings" in str(exc):
                continue
            raise
        return count
    raise sqlite3.ProgrammingError("too many parameters in statement")


class PreparedStatement:
    """A compiled statement with bound parameters and a current row."""

    def __init__(self, connection: sqlite3.Connection, sql: str) -> None:
        self.sql = sql
        self._connection = connection
        self.parameter_count = _parameter_count(connection, sql)
        self._parameters: List[Any] = [None] * self.parameter_count
        self._cursor: Optional[sqlite3.Cursor] = None
        self._row: Optional[Tuple[Any, ...]] = None
        self._halted = False
        self._names: Tuple[str, ...] = ()

    def bind(self, index: int, value: Union[str, int]) -> None:
        """Bind ``value`` to the 1-based parameter ``index``."""
        if not isinstance(value, (str, int)):
            raise TypeError(f"cannot bind value of type {type(value).__name__}")
        if self._cursor is not None or self._halted:
            raise ParameterBindError(
                f"cannot bind parameter {index} of a running statement", ResultCode.MISUSE
            )
        if not 1 <= index <= self.parameter_count:
            raise ParameterBindError(f"parameter index {index} out of range", ResultCode.RANGE)
        self._parameters[index - 1] = value

    def step(self) -> ResultCode:
        """Advance to the next row; return ROW while rows remain, DONE afterwards."""
        if self._cursor is None:
            self._halted = False
            self._cursor = self._connection.execute(self.sql, self._parameters)
            if self._cursor.description:
                self._names = tuple(column[0] for column in self._cursor.description)
        try:
            row = self._cursor.fetchone()
        except sqlite3.Error:
            self._discard()
            raise
        if row is None:
            self._discard()
            self._halted = True
            return ResultCode.DONE
        self._row = tuple(row)
        return ResultCode.ROW

    def reset(self) -> None:
        """Rewind the statement so it can run again; bindings are kept."""
        self._discard()
        self._halted = False

    def column(self, index: int) -> Any:
        """Return the value of column ``index`` in the current row, or None."""
        if self._row is None or not 0 <= index < len(self._row):
            return None
        return self._row[index]

    def column_names(self) -> Tuple[str, ...]:
        """Return the result column names, known once the statement has run."""
        return self._names

    def _discard(self) -> None:
        if self._cursor is not None:
            self._cursor.close()
        self._cursor = None
        self._row = None