# src/markdown_split/errors.py


class ParseError(Exception):
    """Raised by a structural parser when the text cannot be parsed."""


class SplitError(Exception):
    """Base class for errors raised by the split operations."""


class ParseFailure(SplitError):
    """The structural parser failed. `message` is its diagnostic, verbatim."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
