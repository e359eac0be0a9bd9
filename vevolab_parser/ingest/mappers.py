from __future__ import annotations

from typing import Sequence

from vevolab_parser.ingest.classifier import CALCULATION_SIGNATURE, MEASUREMENT_SIGNATURE
from vevolab_parser.ingest.context import clean_field
from vevolab_parser.models.records import CalculationRecord, MeasurementRecord, TaggedRow


def _take(tagged: TaggedRow, positions: Sequence[int]) -> list[str]:
    fields = tagged.fields
    return [clean_field(fields[i]) if i < len(fields) else "" for i in positions]


def to_measurement(
    tagged: TaggedRow,
    positions: Sequence[int] = MEASUREMENT_SIGNATURE.positions,
) -> MeasurementRecord:
    """Extract the eight measurement fields; empty text stays empty."""
    measurement, mode, parameter, units, avg, std, inst1, inst2 = _take(tagged, positions)
    return MeasurementRecord(
        series_id=tagged.context.series_id or "",
        protocol=tagged.context.protocol_name or "",
        measurement=measurement,
        mode=mode,
        parameter=parameter,
        units=units,
        avg=avg,
        std=std,
        instance_1=inst1,
        instance_2=inst2,
    )


def to_calculation(
    tagged: TaggedRow,
    positions: Sequence[int] = CALCULATION_SIGNATURE.positions,
) -> CalculationRecord:
    """Extract calculation name, units and value (spacer column skipped)."""
    calculation, units, value = _take(tagged, positions)
    return CalculationRecord(
        series_id=tagged.context.series_id or "",
        protocol=tagged.context.protocol_name or "",
        calculation=calculation,
        units=units,
        value=value,
    )
