# sidequest

The storage layer of the Sidequest server: a small wrapper around Python's
`sqlite3` with cached prepared statements and cached column lookups, the
`Quest` and `User` domain models, and `ServerQuest`, a quest that can be
created, read, updated and deleted in a `quest` table.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## The `sidequest-server` command

```
sidequest-server
```

This prints the line `Sidequest Server ` and exits with status 0. Extra
arguments are accepted and ignored.

## Using the storage layer

```python
from sidequest.database import Database
from sidequest.query import Query
from sidequest.server_quest import ServerQuest

with Database(":memory:") as database:
    database.execute(
        "CREATE TABLE quest(id INTEGER PRIMARY KEY, caption TEXT, parent_id INTEGER);"
    )

    quest = ServerQuest(database, caption="Find the lost key")
    quest.create_on_database()

    with Query(database, "SELECT * FROM quest WHERE caption = ?;") as query:
        query.bind(1, "Find the lost key")
        while query.step():
            print(query.get_int("id"), query.get_text("caption"))

    stored = ServerQuest(database, id=1)
    stored.read_on_database()
    print(stored.caption)  # Find the lost key
```

### Modules

- `sidequest.model` – the dataclasses `Quest` (`id`, `caption`, `parent`,
  `subquests`) and `User` (`email`, `display_name`, `password`,
  `main_quests`).
- `sidequest.database` – `Database` opens an SQLite file (or `":memory:"`)
  and can be used as a context manager. `prepare` compiles a statement once
  through its `StatementCache`; `bind`, `reset_statement`, `read_int_value`
  and `read_text_value` work on a prepared statement, looking up column
  positions through its `ColumnCache`. `execute` takes either a prepared
  statement (it steps it once) or an SQL script, and returns a result code.
  `initialize_schema` creates a `user` table and a root user with the
  address `root@example.com` if they are missing; it is not called when a
  database is opened.
- `sidequest.statement` – `PreparedStatement`, a compiled statement with
  1-based `bind`, `step` (returning `ResultCode.ROW` or `ResultCode.DONE`),
  `reset`, `column` and `column_names`.
- `sidequest.statement_cache` – `StatementCache`, compiled statements keyed
  by SQL text.
- `sidequest.column_cache` – `ColumnCache`, column name to position maps kept
  per statement; an unknown column name gives position 0.
- `sidequest.query` – `Query` binds text or integer parameters, steps through
  rows (`step`, `step_done`), reads values by column name (`get_text`,
  `get_int`) and can be `reset` and `finalize`d; it is also a context manager.
- `sidequest.persistable` – `Persistable`, the abstract base with
  `create_on_database`, `read_on_database`, `update_on_database`,
  `delete_on_database` and `class_id`.
- `sidequest.server_quest` – `ServerQuest`, a `Quest` and a `Persistable`
  whose `class_id` is `"quest"`. The `quest` table it uses must be created by
  the caller.
- `sidequest.errors` – `DatabaseNotFoundError`, `ParameterBindError` (with an
  `error_code`), `UnableToCreateObjectError`, `UnableToReadObjectError`,
  `UnableToUpdateObjectError` and `UnableToDeleteObjectError`.

## What this package does not do

- `sidequest-server` does not listen for connections or serve anything; it
  only prints its banner.
- Users are plain `User` objects: there is no class that stores them in the
  database, even though `initialize_schema` creates a `user` table.
- No schema for the `quest` table is created; create it yourself before using
  `ServerQuest`.