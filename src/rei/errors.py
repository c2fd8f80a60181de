# src/rei/errors.py

"""
User-facing error taxonomy.

Every error carries a single-line message that can be shown to the user as is.
Connectors are the only place these are caught.
"""

from __future__ import annotations


class ReiError(Exception):
    """Base class for recoverable, user-facing errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ParseError(ReiError):
    """The input line could not be turned into a command."""


class InvalidIndexError(ReiError):
    """A task number is outside the current list."""

    def __init__(self, message: str = "OOPS!!! That task number is invalid.") -> None:
        super().__init__(message)


class EmptyListError(ReiError):
    def __init__(self, message: str = "OOPS!!! The task list is empty.") -> None:
        super().__init__(message)


class CorruptDataError(ReiError):
    """The task file contains a line that cannot be decoded."""


class StorageError(ReiError):
    """The task file could not be created, read or written."""
