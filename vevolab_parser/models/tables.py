"""Output tables.

Both tables are immutable ordered collections of records. Row order is the
order of appearance in the export; nothing is sorted or de-duplicated.

Column names follow the CSV layout produced by the converter: the series id is
exported as ``id``.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import ClassVar, Generic, Iterator, Tuple, TypeVar

import numpy as np
import pandas as pd

from vevolab_parser.models.records import CalculationRecord, MeasurementRecord


R = TypeVar("R", MeasurementRecord, CalculationRecord)


@dataclass(frozen=True)
class _RecordTable(Generic[R]):
    rows: Tuple[R, ...] = ()

    columns: ClassVar[Tuple[str, ...]] = ()
    numeric_columns: ClassVar[Tuple[str, ...]] = ()

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[R]:
        return iter(self.rows)

    def __getitem__(self, i: int) -> R:
        return self.rows[i]

    def to_frame(self, numeric: bool = False) -> pd.DataFrame:
        """
        Return the table as a DataFrame with the export column order.

        numeric:
          - False: every column is text (object dtype), empty cells stay "".
          - True: numeric_columns are converted to float64; empty or
                  non-numeric text becomes NaN.
        """
        df = pd.DataFrame([astuple(r) for r in self.rows], columns=list(self.columns), dtype=object)
        if numeric:
            for col in self.numeric_columns:
                df[col] = pd.to_numeric(df[col], errors="coerce").astype(np.float64)
        return df


@dataclass(frozen=True)
class MeasurementTable(_RecordTable[MeasurementRecord]):
    columns: ClassVar[Tuple[str, ...]] = (
        "id",
        "protocol",
        "measurement",
        "mode",
        "parameter",
        "units",
        "avg",
        "std",
        "instance_1",
        "instance_2",
    )
    numeric_columns: ClassVar[Tuple[str, ...]] = ("avg", "std", "instance_1", "instance_2")


@dataclass(frozen=True)
class CalculationTable(_RecordTable[CalculationRecord]):
    columns: ClassVar[Tuple[str, ...]] = ("id", "protocol", "calculation", "units", "value")
    numeric_columns: ClassVar[Tuple[str, ...]] = ("value",)
