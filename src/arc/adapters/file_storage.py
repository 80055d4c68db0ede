"""File-based task and note storage adapter."""

import json
import logging
import os
import tempfile
from pathlib import Path

from arc.core.notes import Note, NoteList
from arc.core.tasks import Task, TaskList

logger = logging.getLogger(__name__)

TASKS_FILE = "tasks.json"
NOTES_FILE = "notes.json"


class FileStorage:
    """
    JSON file storage.

    Implements Storage protocol. Each collection lives in its own file
    inside `data_dir` and is rewritten in full on every save.
    """

    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir).expanduser()
        self.data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def tasks_path(self) -> Path:
        return self.data_dir / TASKS_FILE

    @property
    def notes_path(self) -> Path:
        return self.data_dir / NOTES_FILE

    def save(self, collection: TaskList | NoteList) -> None:
        """Persist a task or note collection."""
        if isinstance(collection, TaskList):
            path, records = self.tasks_path, [t.to_dict() for t in collection]
        elif isinstance(collection, NoteList):
            path, records = self.notes_path, [n.to_dict() for n in collection]
        else:
            raise TypeError(f"Cannot save {type(collection).__name__}")

        self._write_json(path, records)
        logger.debug(f"Saved {len(records)} records to {path}")

    def load_tasks(self) -> TaskList:
        """Load tasks. Missing or unreadable data gives an empty list."""
        return TaskList.of(self._load(self.tasks_path, Task.from_dict))

    def load_notes(self) -> NoteList:
        """Load notes. Missing or unreadable data gives an empty list."""
        return NoteList.of(self._load(self.notes_path, Note.from_dict))

    def _load(self, path: Path, from_dict) -> list:
        """
        Read and decode every record in `path`.

        A file that cannot be decoded is moved aside to `<name>.corrupt`
        so the next save cannot overwrite the user's data.
        """
        if not path.exists():
            return []
        try:
            data = json.loads(path.read_text())
            if not isinstance(data, list):
                raise ValueError(f"expected a JSON list, got {type(data).__name__}")
            return [from_dict(r) for r in data]
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            backup = path.with_name(f"{path.name}.corrupt")
            os.replace(path, backup)
            logger.warning(f"Failed to load {path} ({e}); moved it to {backup}")
            return []

    def _write_json(self, path: Path, records: list[dict]) -> None:
        fd, tmp_name = tempfile.mkstemp(dir=self.data_dir, prefix=f".{path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(records, f, indent=2)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
