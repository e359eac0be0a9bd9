"""Row classification by shape.

Each record layout of the export is described by a :class:`RecordSignature`.
A row is tested against the signatures in order, with the same three checks
for each one:

1. label set   -- which positions must be filled / must be empty
2. field count -- the row must be exactly ``width`` wide (empty padding after
                  ``width`` is tolerated)
3. kind        -- the signature's kind is the row's kind

A row that passes 1 but fails 2 for some signature is an
:class:`~vevolab_parser.errors.UnrecognizedRecord`. A row that passes 1 for no
signature is ignorable metadata. Column-label rows (``Measurement,Mode,...``)
are ignorable too; they are identified by ``markers``.

Supporting a new instrument version means adding a signature, not new control
flow.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence, Tuple

from vevolab_parser.errors import UnrecognizedRecord
from vevolab_parser.ingest.context import clean_field
from vevolab_parser.models.records import RawRow


RecordKind = Literal["measurement", "calculation", "ignorable"]


@dataclass(frozen=True)
class RecordSignature:
    """
    Declarative description of one record layout.

    kind:      "measurement" or "calculation".
    width:     number of columns of the layout.
    filled:    positions that must be non-empty for a row to claim this layout.
    any_filled: positions of which at least one must be non-empty.
    empty:     positions that must be empty (spacer columns).
    positions: column index of each content field, in record field order;
               consumed by the field mappers.
    markers:   (position, label prefix) pairs that identify the column-label row.
    """
    kind: RecordKind
    width: int
    filled: Tuple[int, ...]
    any_filled: Tuple[int, ...] = ()
    empty: Tuple[int, ...] = ()
    positions: Tuple[int, ...] = ()
    markers: Tuple[Tuple[int, str], ...] = ()

    def is_label_row(self, fields: Sequence[str]) -> bool:
        if not self.markers:
            return False
        return all(i < len(fields) and fields[i].startswith(text) for i, text in self.markers)

    def matches_labels(self, fields: Sequence[str]) -> bool:
        n = len(fields)
        if any(i >= n or not fields[i] for i in self.filled):
            return False
        if self.any_filled and not any(i < n and fields[i] for i in self.any_filled):
            return False
        return all(i >= n or not fields[i] for i in self.empty)

    def count_problem(self, fields: Sequence[str]) -> Optional[str]:
        """Return why the field count does not fit, or None when it fits."""
        n = len(fields)
        if n < self.width:
            return f"{self.kind}: {n} fields, expected {self.width}"
        extra = [f for f in fields[self.width:] if f]
        if extra:
            return f"{self.kind}: {n} fields, expected {self.width} ({len(extra)} extra non-empty)"
        return None


# Mode may be empty; at least one of avg/std/instance values must be present:
#   "HR",,"Heart Rate","BPM","400",,"400",,
MEASUREMENT_SIGNATURE = RecordSignature(
    kind="measurement",
    width=8,
    filled=(0, 2),
    any_filled=(4, 5, 6, 7),
    positions=(0, 1, 2, 3, 4, 5, 6, 7),
    markers=((0, "Measurement"), (7, "Instance 2")),
)

# Calculation rows carry an empty spacer in the second column:
#   "A'/E'",,"none","1.538462"
CALCULATION_SIGNATURE = RecordSignature(
    kind="calculation",
    width=4,
    filled=(0, 2),
    empty=(1,),
    positions=(0, 2, 3),
    markers=((0, "Calculation"), (2, "Units")),
)

DEFAULT_SIGNATURES: Tuple[RecordSignature, ...] = (MEASUREMENT_SIGNATURE, CALCULATION_SIGNATURE)


@dataclass(frozen=True)
class Classification:
    kind: RecordKind
    signature: Optional[RecordSignature] = None


IGNORABLE = Classification("ignorable")


def classify(
    row: RawRow,
    signatures: Sequence[RecordSignature] = DEFAULT_SIGNATURES,
) -> Classification:
    """
    Decide whether ``row`` is a measurement, a calculation or ignorable.

    Raises UnrecognizedRecord when the row claims a layout by its labels but
    has the wrong number of fields.
    """
    if row.is_blank:
        return IGNORABLE
    fields = [clean_field(f) for f in row.fields]

    if any(sig.is_label_row(fields) for sig in signatures):
        return IGNORABLE

    problems: List[str] = []
    for sig in signatures:
        if not sig.matches_labels(fields):
            continue
        problem = sig.count_problem(fields)
        if problem is None:
            return Classification(sig.kind, sig)
        problems.append(problem)

    if problems:
        raise UnrecognizedRecord(row.line_number, row.fields, "; ".join(problems))
    return IGNORABLE
