import pytest

from sidequest.database import Database
from sidequest.errors import UnableToCreateObjectError, UnableToReadObjectError
from sidequest.persistable import Persistable
from sidequest.statement import ResultCode


class _Note(Persistable):
    def __init__(self, database, key, text=""):
        super().__init__(database)
        self.key = key
        self.text = text

    def create_on_database(self):
        statement = self.database.prepare("INSERT INTO note(key, text) VALUES (?, ?);")
        self.database.reset_statement(statement)
        self.database.bind(statement, 1, self.key)
        self.database.bind(statement, 2, self.text)
        if self.database.execute(statement) != ResultCode.DONE:
            raise UnableToCreateObjectError(self.key)

    def read_on_database(self):
        statement = self.database.prepare("SELECT text FROM note WHERE key = ?;")
        self.database.reset_statement(statement)
        self.database.bind(statement, 1, self.key)
        if self.database.execute(statement) != ResultCode.ROW:
            raise UnableToReadObjectError(self.key)
        self.text = self.database.read_text_value(statement, "text")

    def update_on_database(self):
        statement = self.database.prepare("UPDATE note SET text = ? WHERE key = ?;")
        self.database.reset_statement(statement)
        self.database.bind(statement, 1, self.text)
        self.database.bind(statement, 2, self.key)
        self.database.execute(statement)

    def delete_on_database(self):
        statement = self.database.prepare("DELETE FROM note WHERE key = ?;")
        self.database.reset_statement(statement)
        self.database.bind(statement, 1, self.key)
        self.database.execute(statement)

    def class_id(self):
        return "note"


@pytest.fixture
def database():
    db = Database(":memory:")
    db.execute("create table note(key text primary key, text text);")
    yield db
    db.close()


def test_persistable_is_abstract(database):
    with pytest.raises(TypeError):
        Persistable(database)


def test_database_is_kept(database):
    note = _Note(database, "k")
    assert note.database is database
    assert note.class_id() == "note"


def test_crud_cycle(database):
    _Note(database, "k", "first").create_on_database()
    note = _Note(database, "k")
    note.read_on_database()
    assert note.text == "first"

    note.text = "changed"
    note.update_on_database()
    again = _Note(database, "k")
    again.read_on_database()
    assert again.text == "changed"

    again.delete_on_database()
    with pytest.raises(UnableToReadObjectError):
        _Note(database, "k").read_on_database()


def test_double_create_fails(database):
    _Note(database, "k", "first").create_on_database()
    with pytest.raises(UnableToCreateObjectError) as info:
        _Note(database, "k", "second").create_on_database()
    assert str(info.value) == "UnableToCreateObject: k"

    stored = _Note(database, "k")
    stored.read_on_database()
    assert stored.text == "first"