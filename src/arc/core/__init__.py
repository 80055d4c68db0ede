"""Functional core - pure business logic with no I/O."""

from .errors import (
    ArcError,
    EmptyTitleError,
    InvalidArgumentError,
    InvalidCommandError,
    InvalidDateFormatError,
)
from .tasks import Task, TaskKind, TaskList
from .notes import Note, NoteList
from .validation import RecordKind, validate_date, validate_index

__all__ = [
    # Errors
    "ArcError",
    "EmptyTitleError",
    "InvalidArgumentError",
    "InvalidCommandError",
    "InvalidDateFormatError",
    # Tasks
    "Task",
    "TaskKind",
    "TaskList",
    # Notes
    "Note",
    "NoteList",
    # Validation
    "RecordKind",
    "validate_date",
    "validate_index",
]
