"""Storage interface."""

from typing import Protocol

from arc.core.notes import NoteList
from arc.core.tasks import TaskList


class Storage(Protocol):
    """Interface for persisting the task and note collections."""

    def save(self, collection: TaskList | NoteList) -> None:
        """Persist the whole collection, replacing what was stored before."""
        ...

    def load_tasks(self) -> TaskList:
        """Load stored tasks. Returns an empty list if nothing is stored."""
        ...

    def load_notes(self) -> NoteList:
        """Load stored notes. Returns an empty list if nothing is stored."""
        ...
