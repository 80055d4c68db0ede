"""Command dispatcher between the text front end and the core.

`Parser.parse` takes one raw input line, validates it, applies it to the
task or note list and persists whatever changed. The returned string is
what the user should see; failures surface as ArcError subclasses.
"""

import logging

from .core.errors import EmptyTitleError, InvalidArgumentError, InvalidCommandError
from .core.notes import Note, NoteList
from .core.tasks import Task, TaskList
from .core.validation import RecordKind, validate_date, validate_index
from .ports.storage import Storage
from .ui import farewell

logger = logging.getLogger(__name__)

EXIT_COMMAND = "bye"


def tokenize(line: str) -> tuple[str, list[str]]:
    """
    Split a line on single spaces into (command, args).

    Runs of spaces give empty tokens; trailing empty tokens are dropped.
    """
    tokens = line.split(" ")
    while len(tokens) > 1 and tokens[-1] == "":
        tokens.pop()
    return tokens[0], tokens[1:]


def split_on_keyword(args: list[str], keyword: str) -> tuple[str, str]:
    """Join the args before and after the first `keyword` token."""
    pos = args.index(keyword)
    return " ".join(args[:pos]), " ".join(args[pos + 1 :])


class Parser:
    """Routes commands to handlers. Owns the task and note lists."""

    def __init__(self, storage: Storage, tasks: TaskList, notes: NoteList):
        self.storage = storage
        self.tasks = tasks
        self.notes = notes

    def parse(self, line: str) -> str:
        """Run one command line and return the message for the user."""
        command, args = tokenize(line)
        logger.debug(f"Dispatching {command!r} with {len(args)} args")

        match command:
            case "list":
                return self.parse_list(args)
            case "mark":
                return self.parse_mark(args)
            case "unmark":
                return self.parse_unmark(args)
            case "todo":
                return self.parse_todo(args)
            case "deadline":
                return self.parse_deadline(args)
            case "event":
                return self.parse_event(args)
            case "delete":
                return self.parse_delete(args)
            case "find":
                return self.parse_find(args)
            case "bye":
                return self.parse_bye(args)
            case "notes":
                return self.parse_list_notes(args)
            case "note":
                return self.parse_add_note(args)
            case "deletenote":
                return self.parse_delete_note(args)
            case _:
                raise InvalidCommandError()

    @staticmethod
    def is_exit(line: str) -> bool:
        """Whether the line is the command that ends a session."""
        return tokenize(line)[0] == EXIT_COMMAND

    # ============== Tasks ==============

    def parse_list(self, args: list[str]) -> str:
        _expect_count(args, 0)
        return self.tasks.list_tasks()

    def parse_mark(self, args: list[str]) -> str:
        _expect_count(args, 1)
        index = self.validate_index(args[0], RecordKind.TASK) - 1
        output = self.tasks.get_task(index).mark()
        self.storage.save(self.tasks)
        return output

    def parse_unmark(self, args: list[str]) -> str:
        _expect_count(args, 1)
        index = self.validate_index(args[0], RecordKind.TASK) - 1
        output = self.tasks.get_task(index).unmark()
        self.storage.save(self.tasks)
        return output

    def parse_todo(self, args: list[str]) -> str:
        title = " ".join(args)
        if not title:
            raise EmptyTitleError()
        return self._add_task(Task.todo(title))

    def parse_deadline(self, args: list[str]) -> str:
        title, when = _split_required(args, "/by")
        due = validate_date(when)
        return self._add_task(Task.deadline(title, due))

    def parse_event(self, args: list[str]) -> str:
        title, schedule = _split_required(args, "/at")
        return self._add_task(Task.event(title, schedule))

    def parse_delete(self, args: list[str]) -> str:
        _expect_count(args, 1)
        index = self.validate_index(args[0], RecordKind.TASK) - 1
        output = self.tasks.delete_task(index)
        self.storage.save(self.tasks)
        return output

    def parse_find(self, args: list[str]) -> str:
        if not args:
            raise InvalidArgumentError()
        return self.tasks.list_tasks(" ".join(args))

    def parse_bye(self, args: list[str]) -> str:
        _expect_count(args, 0)
        return farewell()

    def _add_task(self, task: Task) -> str:
        output = self.tasks.add_task(task)
        self.storage.save(self.tasks)
        return output

    # ============== Notes ==============

    def parse_list_notes(self, args: list[str]) -> str:
        _expect_count(args, 0)
        return self.notes.list_notes()

    def parse_add_note(self, args: list[str]) -> str:
        if not args:
            raise InvalidArgumentError()

        if "/desc" in args:
            title, description = split_on_keyword(args, "/desc")
        else:
            title, description = " ".join(args), ""

        if not title:
            raise EmptyTitleError()

        output = self.notes.add_note(Note(title, description))
        self.storage.save(self.notes)
        return output

    def parse_delete_note(self, args: list[str]) -> str:
        _expect_count(args, 1)
        index = self.validate_index(args[0], RecordKind.NOTE) - 1
        output = self.notes.delete_note(index)
        self.storage.save(self.notes)
        return output

    # ============== Validation ==============

    def validate_index(self, raw: str, kind: RecordKind) -> int:
        """Check a 1-based index against the current size of the list for `kind`."""
        count = self.tasks.num_tasks() if kind == RecordKind.TASK else self.notes.num_notes()
        return validate_index(raw, count)


def _expect_count(args: list[str], n: int) -> None:
    if len(args) != n:
        raise InvalidArgumentError()


def _split_required(args: list[str], keyword: str) -> tuple[str, str]:
    """Split on a keyword that must be present; both sides must be non-empty."""
    if keyword not in args:
        raise InvalidArgumentError()

    title, rest = split_on_keyword(args, keyword)
    if not title:
        raise EmptyTitleError()
    if not rest:
        raise InvalidArgumentError()
    return title, rest
