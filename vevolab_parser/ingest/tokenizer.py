from __future__ import annotations

import csv
from typing import Iterable, Iterator, List

from vevolab_parser.errors import MalformedLine
from vevolab_parser.models.records import RawRow


# quote scanner states (same transitions as the csv module's non-strict reader)
_FIELD_START = 0
_IN_FIELD = 1
_IN_QUOTED = 2
_QUOTE_IN_QUOTED = 3


def _scan_quotes(line: str, state: int, delimiter: str, quotechar: str = '"') -> int:
    """Return the quote state after ``line``, starting from ``state``."""
    for ch in line:
        if state == _IN_QUOTED:
            if ch == quotechar:
                state = _QUOTE_IN_QUOTED
        elif state == _QUOTE_IN_QUOTED:
            if ch == quotechar:
                state = _IN_QUOTED
            elif ch == delimiter:
                state = _FIELD_START
            elif ch in "\r\n":
                state = _FIELD_START
            else:
                state = _IN_FIELD
        elif ch == delimiter or ch in "\r\n":
            state = _FIELD_START
        elif state == _FIELD_START and ch == quotechar:
            state = _IN_QUOTED
        else:
            state = _IN_FIELD
    # a record only continues past the end of a line inside quotes
    return state if state == _IN_QUOTED else _FIELD_START


def iter_raw_rows(lines: Iterable[str], delimiter: str = ",") -> Iterator[RawRow]:
    """
    Lazily split export text into RawRow records, in file order.

    Contract:
      - Quoted fields may contain the delimiter or line breaks; a record that
        spans several physical lines is reported at its first line.
      - Stray quotes are read leniently: ``"EF"x`` gives the field ``EFx``.
      - Blank lines are kept (as a RawRow with no fields) so that downstream
        diagnostics keep their original line numbers.
      - Fields are returned exactly as the csv dialect decoded them (no trimming).
      - A quoted field still open at the end of the input raises MalformedLine.
    """
    consumed: List[str] = []

    def _feed() -> Iterator[str]:
        for line in lines:
            consumed.append(line)
            yield line

    reader = csv.reader(_feed(), delimiter=delimiter)
    while True:
        start = reader.line_num + 1
        try:
            fields = next(reader)
        except StopIteration:
            return
        except csv.Error as e:
            raise MalformedLine(start, str(e)) from e

        state = _FIELD_START
        for line in consumed:
            state = _scan_quotes(line, state, delimiter)
        consumed.clear()
        if state == _IN_QUOTED:
            raise MalformedLine(start, "unexpected end of data inside a quoted field")
        yield RawRow(line_number=start, fields=tuple(fields))
