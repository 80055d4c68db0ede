"""Argument validators shared by the command handlers."""

import re
from datetime import date, datetime
from enum import Enum

from .errors import InvalidArgumentError, InvalidDateFormatError

_INDEX_RE = re.compile(r"[+-]?[0-9]+")
_DATE_RE = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")


class RecordKind(Enum):
    """Which collection an index refers to."""

    TASK = "task"
    NOTE = "note"


def validate_index(raw: str, count: int) -> int:
    """
    Parse a 1-based index and check it against the collection size.

    Returns the index unchanged (still 1-based).
    """
    if not _INDEX_RE.fullmatch(raw):
        raise InvalidArgumentError()

    index = int(raw)
    if index <= 0 or index > count:
        raise InvalidArgumentError()
    return index


def validate_date(raw: str) -> date:
    """Parse a strict dd/mm/yyyy date."""
    if not _DATE_RE.fullmatch(raw):
        raise InvalidDateFormatError()
    try:
        return datetime.strptime(raw, "%d/%m/%Y").date()
    except ValueError:
        raise InvalidDateFormatError()
