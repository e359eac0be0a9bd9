"""Exceptions raised while converting a Vevo LAB export.

Every parse failure is a ``ValueError`` subclass so callers that only guard
against bad input keep working. I/O problems are not wrapped: they surface as
the ``OSError`` raised by the file system.
"""

from __future__ import annotations

from typing import Sequence, Tuple


class ParseError(ValueError):
    """Base class for all conversion failures tied to one input line."""

    def __init__(self, line_number: int, message: str):
        self.line_number = int(line_number)
        super().__init__(f"line {self.line_number}: {message}")


class MalformedLine(ParseError):
    """Quoting could not be resolved (e.g. unterminated quoted field)."""


class MissingContext(ParseError):
    """A data row appeared before a Series Name and Protocol Name were both declared."""

    def __init__(self, line_number: int, raw_fields: Sequence[str] = ()):
        self.raw_fields: Tuple[str, ...] = tuple(raw_fields)
        super().__init__(
            line_number,
            "data row found before a Series Name / Protocol Name header "
            f"established a context: {list(self.raw_fields)}",
        )


class UnrecognizedRecord(ParseError):
    """A row partially matches a record layout (right labels, wrong field count)."""

    def __init__(self, line_number: int, raw_fields: Sequence[str], reason: str = ""):
        self.raw_fields: Tuple[str, ...] = tuple(raw_fields)
        self.reason = reason
        msg = f"unrecognized record {list(self.raw_fields)}"
        if reason:
            msg += f" ({reason})"
        super().__init__(line_number, msg)
