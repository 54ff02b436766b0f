"""Base class of persistent domain objects on the server."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .database import Database


class Persistable(ABC):
    """An object that can be created, read, updated and deleted in a database."""

    def __init__(self, database: Database) -> None:
        self.database = database

    @abstractmethod
    def create_on_database(self) -> None:
        """Insert this object into the database."""

    @abstractmethod
    def read_on_database(self) -> None:
        """Load this object's fields from the database."""

    @abstractmethod
    def update_on_database(self) -> None:
        """Write this object's fields back to the database."""

    @abstractmethod
    def delete_on_database(self) -> None:
        """Remove this object from the database."""

    @abstractmethod
    def class_id(self) -> str:
        """Return the identifier of this object's kind."""