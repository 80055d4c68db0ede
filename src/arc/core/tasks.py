"""Pure task domain logic - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Iterable, Iterator

from .errors import EmptyTitleError

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class TaskKind(Enum):
    """Task variants."""

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"


@dataclass
class Task:
    """
    A todo, deadline or event.

    One record type for all variants; `kind` decides which of `due_date`
    and `schedule` is meaningful.
    """

    title: str
    kind: TaskKind = TaskKind.TODO
    is_done: bool = False
    due_date: date | None = None
    schedule: str = ""

    def __post_init__(self):
        if not self.title:
            raise EmptyTitleError()
        if self.kind == TaskKind.DEADLINE and self.due_date is None:
            raise ValueError("A deadline needs a due date")

    @classmethod
    def todo(cls, title: str) -> "Task":
        return cls(title=title)

    @classmethod
    def deadline(cls, title: str, due_date: date) -> "Task":
        return cls(title=title, kind=TaskKind.DEADLINE, due_date=due_date)

    @classmethod
    def event(cls, title: str, schedule: str) -> "Task":
        return cls(title=title, kind=TaskKind.EVENT, schedule=schedule)

    def mark(self) -> str:
        """Mark as done and return the confirmation."""
        self.is_done = True
        return f"Nice! I've marked this task as done:\n\t{self.render()}"

    def unmark(self) -> str:
        """Mark as not done and return the confirmation."""
        self.is_done = False
        return f"OK, I've marked this task as not done yet:\n\t{self.render()}"

    def render(self) -> str:
        """Format for display, e.g. `[X] submit report (by: Dec 31 2024)`."""
        check = "X" if self.is_done else " "
        base = f"[{check}] {self.title}"

        match self.kind:
            case TaskKind.DEADLINE:
                return f"{base} (by: {format_due_date(self.due_date)})"
            case TaskKind.EVENT:
                return f"{base} (at: {self.schedule})"
            case _:
                return base

    def to_dict(self) -> dict:
        data = {"kind": self.kind.value, "title": self.title, "is_done": self.is_done}
        if self.kind == TaskKind.DEADLINE:
            data["due_date"] = self.due_date.isoformat()
        elif self.kind == TaskKind.EVENT:
            data["schedule"] = self.schedule
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        """Create Task from its stored form. Raises ValueError if malformed."""
        kind = TaskKind(data.get("kind", TaskKind.TODO.value))
        title = data.get("title") or ""
        if not isinstance(title, str) or not title:
            raise ValueError(f"Invalid task title: {title!r}")

        is_done = data.get("is_done", False)
        if not isinstance(is_done, bool):
            raise ValueError(f"Invalid is_done flag: {is_done!r}")

        due = None
        if kind == TaskKind.DEADLINE:
            due = date.fromisoformat(data["due_date"])

        return cls(
            title=title,
            kind=kind,
            is_done=is_done,
            due_date=due,
            schedule=data.get("schedule", "") if kind == TaskKind.EVENT else "",
        )


def format_due_date(due: date) -> str:
    """`Dec 31 2024`, independent of the locale."""
    return f"{MONTH_ABBREVIATIONS[due.month - 1]} {due.day:02d} {due.year}"


def pluralize(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


@dataclass
class TaskList:
    """Ordered tasks. Users address them from 1, the list from 0."""

    tasks: list[Task] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    @classmethod
    def of(cls, tasks: Iterable[Task]) -> "TaskList":
        return cls(list(tasks))

    def num_tasks(self) -> int:
        return len(self.tasks)

    def get_task(self, index: int) -> Task:
        """0-indexed lookup. Callers validate the index first."""
        return self.tasks[index]

    def add_task(self, task: Task) -> str:
        self.tasks.append(task)
        return (
            f"Got it. I've added this task:\n\t{task.render()}\n"
            f"Now you have {pluralize(len(self.tasks), 'task')} in the list."
        )

    def delete_task(self, index: int) -> str:
        task = self.tasks.pop(index)
        return (
            f"Noted. I've removed this task:\n\t{task.render()}\n"
            f"Now you have {pluralize(len(self.tasks), 'task')} in the list."
        )

    def list_tasks(self, keyword: str = "") -> str:
        """
        Render tasks with their 1-based positions.

        With a keyword, only titles containing it (case-sensitive) are shown,
        each keeping its position in the full list.
        """
        matches = [
            (i, t) for i, t in enumerate(self.tasks, start=1) if not keyword or keyword in t.title
        ]

        if not matches:
            if keyword:
                return "There are no matching tasks in your list!"
            return "There are no tasks in your list!"

        header = "Here are the matching tasks in your list:" if keyword else "Here are the tasks in your list:"
        lines = [header]
        lines.extend(f"{i}.{t.render()}" for i, t in matches)
        return "\n".join(lines)
