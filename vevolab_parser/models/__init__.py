from .records import (
    CalculationRecord,
    Context,
    Diagnostic,
    MeasurementRecord,
    RawRow,
    TaggedRow,
)
from .tables import CalculationTable, MeasurementTable

__all__ = [
    "RawRow",
    "Context",
    "TaggedRow",
    "MeasurementRecord",
    "CalculationRecord",
    "Diagnostic",
    "MeasurementTable",
    "CalculationTable",
]
