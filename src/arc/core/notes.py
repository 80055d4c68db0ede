"""Pure note domain logic - no I/O dependencies."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from .tasks import pluralize


@dataclass
class Note:
    """A free-form note. Unlike a task it has no done state."""

    title: str
    description: str = ""

    def render(self) -> str:
        if self.description:
            return f"{self.title}: {self.description}"
        return self.title

    def to_dict(self) -> dict:
        return {"title": self.title, "description": self.description}

    @classmethod
    def from_dict(cls, data: dict) -> "Note":
        title = data.get("title")
        description = data.get("description", "")
        if not isinstance(title, str) or not title or not isinstance(description, str):
            raise ValueError(f"Invalid note: {data!r}")
        return cls(title=title, description=description)


@dataclass
class NoteList:
    """Ordered notes, addressed from 1 by users."""

    notes: list[Note] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.notes)

    def __iter__(self) -> Iterator[Note]:
        return iter(self.notes)

    @classmethod
    def of(cls, notes: Iterable[Note]) -> "NoteList":
        return cls(list(notes))

    def num_notes(self) -> int:
        return len(self.notes)

    def get_note(self, index: int) -> Note:
        return self.notes[index]

    def add_note(self, note: Note) -> str:
        self.notes.append(note)
        return (
            f"Got it. I've added this note:\n\t{note.render()}\n"
            f"Now you have {pluralize(len(self.notes), 'note')} in the list."
        )

    def delete_note(self, index: int) -> str:
        note = self.notes.pop(index)
        return (
            f"Noted. I've removed this note:\n\t{note.render()}\n"
            f"Now you have {pluralize(len(self.notes), 'note')} in the list."
        )

    def list_notes(self) -> str:
        if not self.notes:
            return "There are no notes in your list!"
        lines = ["Here are the notes in your list:"]
        lines.extend(f"{i}.{n.render()}" for i, n in enumerate(self.notes, start=1))
        return "\n".join(lines)
