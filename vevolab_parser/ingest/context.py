"""Context tracking for the series/protocol sections of an export.

The export declares its sections with two-field label rows::

    Series Name,10-a
    Protocol Name,MV Flow

:class:`ContextTracker` consumes those rows and hands out immutable
:class:`~vevolab_parser.models.records.Context` snapshots for data rows.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional, Sequence, Tuple

from vevolab_parser.errors import MissingContext
from vevolab_parser.models.records import Context, Diagnostic, RawRow, TaggedRow


logger = logging.getLogger(__name__)

SERIES_LABEL = "Series Name"
PROTOCOL_LABEL = "Protocol Name"


def clean_field(s: str) -> str:
    """Strip surrounding whitespace and any leftover double quotes."""
    return s.strip().strip('"').strip()


def significant_fields(fields: Sequence[str]) -> Tuple[str, ...]:
    """Cleaned fields with trailing empty padding removed."""
    out = [clean_field(f) for f in fields]
    while out and not out[-1]:
        out.pop()
    return tuple(out)


def detect_header(fields: Sequence[str]) -> Optional[Tuple[str, str]]:
    """
    Return (label, value) if the row is a Series Name / Protocol Name header.

    A header has exactly two significant fields, or a lone label whose value is
    empty; the label must start with one of the known header labels. The value
    may be "" (the caller decides what an empty header means).
    """
    sig = significant_fields(fields)
    if not sig or len(sig) > 2:
        return None
    for label in (SERIES_LABEL, PROTOCOL_LABEL):
        if sig[0].startswith(label):
            value = sig[1] if len(sig) == 2 else ""
            return label, value
    return None


class ContextTracker:
    """
    Two-state machine: NoContext (initial) and InContext(Context).

    Header rows replace one half of the live Context; they never become data.
    Data rows get a snapshot of the Context. Snapshots are frozen dataclasses,
    so a later header can never alter an already tagged row.

    reset_protocol_on_series:
      - False: a new Series Name header replaces only the series id.
      - True:  a new Series Name header also clears the protocol, so each
               series must declare its own Protocol Name before data rows.
    """

    def __init__(self, reset_protocol_on_series: bool = False):
        self.reset_protocol_on_series = bool(reset_protocol_on_series)
        self._context: Optional[Context] = None
        self.diagnostics: List[Diagnostic] = []

    @property
    def context(self) -> Optional[Context]:
        return self._context

    def observe(self, row: RawRow) -> bool:
        """Consume ``row`` if it is a header. Returns True when it was one."""
        hdr = detect_header(row.fields)
        if hdr is None:
            return False
        label, value = hdr
        if not value:
            self.diagnostics.append(
                Diagnostic(
                    line_number=row.line_number,
                    kind="EmptyHeader",
                    message=f"'{label}' header without a value; context unchanged",
                    raw_fields=row.fields,
                )
            )
            logger.warning("line %d: empty '%s' header ignored", row.line_number, label)
            return True

        current = self._context or Context()
        if label == SERIES_LABEL:
            if self.reset_protocol_on_series:
                self._context = Context(series_id=value)
            else:
                self._context = replace(current, series_id=value)
        else:
            self._context = replace(current, protocol_name=value)
        logger.debug("line %d: %s -> %r", row.line_number, label, value)
        return True

    def tag(self, row: RawRow) -> TaggedRow:
        """Attach the live Context to a data row, or raise MissingContext."""
        ctx = self._context
        if ctx is None or not ctx.is_complete:
            raise MissingContext(row.line_number, row.fields)
        return TaggedRow(row=row, context=ctx)
