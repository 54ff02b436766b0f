"""Exceptions raised by the storage layer."""

from __future__ import annotations


class DatabaseNotFoundError(RuntimeError):
    """The database file could not be opened."""


class ParameterBindError(RuntimeError):
    """A statement could not be prepared or a parameter could not be bound."""

    def __init__(self, message: str, error_code: int) -> None:
        super().__init__(message)
        self.error_code = error_code


class _ObjectError(RuntimeError):
    _prefix = ""

    def __init__(self, key: str) -> None:
        super().__init__(self._prefix + key)
        self.key = key


class UnableToCreateObjectError(_ObjectError):
    """A persistent object could not be created."""

    _prefix = "UnableToCreateObject: "


class UnableToReadObjectError(_ObjectError):
    """A persistent object could not be read."""

    _prefix = "UnableToReadObjectException: "


class UnableToUpdateObjectError(_ObjectError):
    """A persistent object could not be updated."""

    _prefix = "UnableToUpdateObjectException: "


class UnableToDeleteObjectError(_ObjectError):
    """A persistent object could not be deleted."""

    _prefix = "UnableToDeleteObjectException: "