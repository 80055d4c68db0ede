"""Errors raised while parsing and validating user commands."""


class ArcError(Exception):
    """Base class for request-level errors. The user can simply retry."""

    message = "Something went wrong."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidCommandError(ArcError):
    """Raised when the first token names no known command."""

    message = "I'm sorry, but I don't know what that means :-("


class InvalidArgumentError(ArcError):
    """Raised for a wrong argument count or shape, or an out-of-range index."""

    message = "The arguments given to this command are invalid."


class EmptyTitleError(ArcError):
    """Raised when a required title is empty."""

    message = "The title cannot be empty."


class InvalidDateFormatError(ArcError):
    """Raised when a date does not match dd/mm/yyyy."""

    message = "Date format should be dd/mm/yyyy"
