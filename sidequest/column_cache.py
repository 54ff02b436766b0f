"""Cache of result column positions per statement."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict

from .statement import PreparedStatement

if TYPE_CHECKING:
    from .database import Database

ColumnMap = Dict[str, int]


class ColumnCache:
    """Maps column names to their positions, remembered per statement."""

    def __init__(self, database: Database) -> None:
        self.database = database
        self.columns_by_statement: Dict[PreparedStatement, ColumnMap] = {}

    def get_column_index(self, statement: PreparedStatement, column_name: str) -> int:
        """Return the position of ``column_name``; unknown names give 0."""
        return self.get_columns_of_statement(statement).get(column_name, 0)

    def get_columns_of_statement(self, statement: PreparedStatement) -> ColumnMap:
        """Return the cached column map, building it on first use."""
        columns = self.columns_by_statement.get(statement)
        if columns is None:
            columns = self.add_columns_of_statement(statement)
        return columns

    def add_columns_of_statement(self, statement: PreparedStatement) -> ColumnMap:
        """Build and cache the column map of ``statement``."""
        columns = {name: index for index, name in enumerate(statement.column_names()) if name}
        self.columns_by_statement[statement] = columns
        return columns