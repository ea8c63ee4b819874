"""Error kinds raised by the task operations and the store.

None of these end the program: the interactive loop catches TodoError,
shows the message and redraws the menu.
"""
from __future__ import annotations
from pathlib import Path
from typing import Any, Optional


class TodoError(Exception):
    """Base class for every error the CLI reports inline."""


class ValidationError(TodoError):
    pass


class EmptyDescriptionError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Description cannot be empty.")


class InvalidIndexError(ValidationError):
    """Position is non-numeric, zero, negative or past the end of the list."""

    def __init__(self, position: Any) -> None:
        self.position = position
        super().__init__("Invalid ID. Try again.")


class StoreError(TodoError):
    pass


class StoreWriteError(StoreError):
    def __init__(self, path: Path, cause: Optional[OSError] = None) -> None:
        self.path = path
        self.cause = cause
        reason = cause.strerror if cause is not None and cause.strerror else str(cause)
        super().__init__(f"Error saving tasks to {path}: {reason}")
