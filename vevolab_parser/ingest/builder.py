from __future__ import annotations

from typing import List, Tuple, Union

from vevolab_parser.models.records import CalculationRecord, MeasurementRecord
from vevolab_parser.models.tables import CalculationTable, MeasurementTable


class TableBuilder:
    """
    Accumulates records in call order and freezes them into the two tables.

    No sorting, merging or validation happens here. ``finish()`` may be called
    once; appending afterwards is an error.
    """

    def __init__(self) -> None:
        self._measurements: List[MeasurementRecord] = []
        self._calculations: List[CalculationRecord] = []
        self._finished = False

    def append(self, record: Union[MeasurementRecord, CalculationRecord]) -> None:
        if self._finished:
            raise RuntimeError("TableBuilder.append() called after finish().")
        if isinstance(record, MeasurementRecord):
            self._measurements.append(record)
        elif isinstance(record, CalculationRecord):
            self._calculations.append(record)
        else:
            raise TypeError(f"Unsupported record type: {type(record).__name__}")

    def finish(self) -> Tuple[MeasurementTable, CalculationTable]:
        if self._finished:
            raise RuntimeError("TableBuilder.finish() may only be called once.")
        self._finished = True
        return (
            MeasurementTable(rows=tuple(self._measurements)),
            CalculationTable(rows=tuple(self._calculations)),
        )
