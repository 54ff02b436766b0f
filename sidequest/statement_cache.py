"""Cache of compiled statements keyed by their SQL text."""

from __future__ import annotations

import sqlite3
from typing import TYPE_CHECKING, Dict, Optional

from .errors import ParameterBindError
from .statement import PreparedStatement, error_code

if TYPE_CHECKING:
    from .database import Database


class StatementCache:
    """Compiles each SQL text once and hands out the same statement afterwards."""

    def __init__(self, database: Database) -> None:
        self.database = database
        self.prepared_statements: Dict[str, PreparedStatement] = {}

    def get_statement(self, statement_sql: str) -> Optional[PreparedStatement]:
        """Return the cached statement for ``statement_sql``, or None."""
        return self.prepared_statements.get(statement_sql)

    def add_statement(self, statement_sql: str) -> PreparedStatement:
        """Compile ``statement_sql``, cache it and return it."""
        try:
            statement = PreparedStatement(self.database.connection, statement_sql)
        except sqlite3.Error as exc:
            raise ParameterBindError(statement_sql, error_code(exc)) from exc
        except sqlite3.Warning as exc:
            raise ParameterBindError(statement_sql, error_code(exc)) from exc
        self.prepared_statements[statement_sql] = statement
        return statement