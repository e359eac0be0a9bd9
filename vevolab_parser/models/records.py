from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class RawRow:
    """
    One record as read from the export.

    Notes
    - fields keep their original text apart from the tokenizer's quote handling;
      no trimming happens here.
    - line_number is the 1-based line where the record starts.
    """
    line_number: int
    fields: Tuple[str, ...]

    @property
    def is_blank(self) -> bool:
        return all(not f.strip() for f in self.fields)


@dataclass(frozen=True)
class Context:
    """
    The (series id, protocol name) pair currently open while scanning.

    A Context is complete only when both halves are set; data rows are stamped
    with complete contexts only.
    """
    series_id: Optional[str] = None
    protocol_name: Optional[str] = None

    @property
    def is_complete(self) -> bool:
        return bool(self.series_id) and bool(self.protocol_name)


@dataclass(frozen=True)
class TaggedRow:
    """A data row paired with the snapshot of the Context active when it was read."""
    row: RawRow
    context: Context

    @property
    def line_number(self) -> int:
        return self.row.line_number

    @property
    def fields(self) -> Tuple[str, ...]:
        return self.row.fields


@dataclass(frozen=True)
class MeasurementRecord:
    """
    One row of a protocol's measurement block.

    All content fields are kept as text: avg/std/instance columns may be empty
    or hold non-numeric placeholders in the export.
    """
    series_id: str
    protocol: str
    measurement: str
    mode: str
    parameter: str
    units: str
    avg: str
    std: str
    instance_1: str
    instance_2: str


@dataclass(frozen=True)
class CalculationRecord:
    """One derived value of a protocol's calculation block (text, not parsed)."""
    series_id: str
    protocol: str
    calculation: str
    units: str
    value: str


@dataclass(frozen=True)
class Diagnostic:
    """
    A recoverable problem found during conversion.

    kind is the name of the error class that would have been raised
    (e.g. "UnrecognizedRecord"), or "EmptyHeader" for a label without a value.
    """
    line_number: int
    kind: str
    message: str
    raw_fields: Tuple[str, ...] = ()

    def __str__(self) -> str:
        return f"line {self.line_number}: [{self.kind}] {self.message}"
