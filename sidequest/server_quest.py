"""Quests stored in the server database."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .errors import (
    UnableToCreateObjectError,
    UnableToDeleteObjectError,
    UnableToReadObjectError,
    UnableToUpdateObjectError,
)
from .model import Quest
from .persistable import Persistable
from .query import Query

if TYPE_CHECKING:
    from .database import Database


class ServerQuest(Quest, Persistable):
    """A quest that can be created, read, updated and deleted in the ``quest`` table."""

    def __init__(
        self,
        database: Database,
        id: int = 0,
        caption: str = "",
        parent: Optional[Quest] = None,
    ) -> None:
        Quest.__init__(self, id=id, caption=caption, parent=parent)
        Persistable.__init__(self, database)

    def _parent_id(self) -> int:
        return self.parent.id if self.parent is not None else 0

    def create_on_database(self) -> None:
        """Insert this quest; raise UnableToCreateObjectError on failure."""
        with Query(self.database, "INSERT INTO quest(caption, parent_id) VALUES (?, ?);") as query:
            query.bind(1, self.caption)
            query.bind(2, self._parent_id())
            if not query.step_done():
                raise UnableToCreateObjectError(self.caption)

    def read_on_database(self) -> None:
        """Load caption and parent of the quest with this id."""
        with Query(self.database, "SELECT * FROM quest WHERE id = ?;") as query:
            query.bind(1, self.id)
            if not query.step():
                raise UnableToReadObjectError(str(self.id))
            self.caption = query.get_text("caption")
            parent_id = query.get_int("parent_id")
        if parent_id != 0:
            self.parent = Quest(id=parent_id)

    def update_on_database(self) -> None:
        """Write caption and parent of this quest back to its row."""
        sql = "UPDATE quest SET caption = ?, parent_id = ? WHERE id = ?;"
        with Query(self.database, sql) as query:
            query.bind(1, self.caption)
            query.bind(2, self._parent_id())
            query.bind(3, self.id)
            if not query.step_done():
                raise UnableToUpdateObjectError(str(self.id))

    def delete_on_database(self) -> None:
        """Remove the row of this quest."""
        with Query(self.database, "DELETE FROM quest WHERE id = ?;") as query:
            query.bind(1, self.id)
            if not query.step_done():
                raise UnableToDeleteObjectError(str(self.id))

    def class_id(self) -> str:
        return "quest"