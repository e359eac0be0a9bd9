"""Tests for shape-based row classification."""

from __future__ import annotations

import pytest

from vevolab_parser.errors import UnrecognizedRecord
from vevolab_parser.ingest.classifier import (
    CALCULATION_SIGNATURE,
    MEASUREMENT_SIGNATURE,
    RecordSignature,
    classify,
)
from vevolab_parser.models.records import RawRow


def _row(*fields: str, line: int = 7) -> RawRow:
    return RawRow(line_number=line, fields=tuple(fields))


MEAS = ("A'", "PW Tissue Doppler Mode", "Velocity", "mm/s", "-14.438560", "0.000000", "-14.438560", "", "")
CALC = ("A'/E'", "", "none", "1.538462")


# -----------------------------------------------------------------------
# Recognized layouts
# -----------------------------------------------------------------------


def test_measurement_row_with_trailing_padding() -> None:
    c = classify(_row(*MEAS))
    assert c.kind == "measurement"
    assert c.signature is MEASUREMENT_SIGNATURE


def test_measurement_row_exact_width() -> None:
    assert classify(_row(*MEAS[:8])).kind == "measurement"


def test_calculation_row() -> None:
    c = classify(_row(*CALC))
    assert c.kind == "calculation"
    assert c.signature is CALCULATION_SIGNATURE


def test_calculation_row_with_empty_value() -> None:
    assert classify(_row("EF", "", "%", "")).kind == "calculation"


def test_quotes_and_spaces_do_not_change_the_shape() -> None:
    assert classify(_row(' "EF" ', "  ", ' "%" ', "55.2")).kind == "calculation"


# -----------------------------------------------------------------------
# Ignorable rows
# -----------------------------------------------------------------------


@pytest.mark.parametrize(
    "fields",
    [
        (),
        ("",),
        ("", " ", ""),
        ("Measurement", "Mode", "Parameter", "Units", "Avg", "Std", "Instance 1", "Instance 2"),
        ("Calculation", "", "Units", "Value"),
        ("Calculation", "", "Units", ""),
        ("Study Name", "Heart study"),
        ("Study Name", ""),
        ("Exported by Vevo LAB 5.7.1",),
    ],
)
def test_ignorable(fields) -> None:
    assert classify(_row(*fields)).kind == "ignorable"


# -----------------------------------------------------------------------
# Partial matches
# -----------------------------------------------------------------------


def test_measurement_with_missing_columns_is_unrecognized() -> None:
    with pytest.raises(UnrecognizedRecord) as exc:
        classify(_row(*MEAS[:6], line=12))
    assert exc.value.line_number == 12
    assert exc.value.raw_fields == MEAS[:6]
    assert "expected 8" in exc.value.reason


def test_measurement_with_extra_values_is_unrecognized() -> None:
    with pytest.raises(UnrecognizedRecord):
        classify(_row(*MEAS[:8], "unexpected"))


def test_calculation_with_missing_value_column_is_unrecognized() -> None:
    with pytest.raises(UnrecognizedRecord):
        classify(_row("EF", "", "%"))


def test_classification_ignores_neighbours() -> None:
    """The same fields classify identically regardless of line or call order."""
    kinds = [classify(_row(*f, line=n)).kind for n, f in enumerate([CALC, MEAS, CALC, MEAS], start=1)]
    assert kinds == ["calculation", "measurement", "calculation", "measurement"]


# -----------------------------------------------------------------------
# Custom signatures
# -----------------------------------------------------------------------


def test_added_signature_is_used() -> None:
    compact_calc = RecordSignature(kind="calculation", width=3, filled=(0, 1), positions=(0, 1, 2))
    sigs = (MEASUREMENT_SIGNATURE, compact_calc)
    c = classify(_row("EF", "%", "55.2"), sigs)
    assert c.kind == "calculation"
    assert c.signature is compact_calc


def test_signature_label_row_markers() -> None:
    assert MEASUREMENT_SIGNATURE.is_label_row(["Measurement", "Mode", "", "", "", "", "", "Instance 2"])
    assert not MEASUREMENT_SIGNATURE.is_label_row(["Measurement", "Mode"])
    assert not RecordSignature(kind="measurement", width=1, filled=(0,)).is_label_row(["x"])


def test_measurement_with_empty_mode() -> None:
    c = classify(_row("HR", "", "Heart Rate", "BPM", "400", "", "400", ""))
    assert c.kind == "measurement"


def test_padded_calculation_is_not_a_measurement() -> None:
    """Eight columns but no values past the units column: a calculation with padding."""
    assert classify(_row("EF", "", "%", "55", "", "", "", "")).kind == "calculation"


def test_row_without_values_and_stray_column_is_unrecognized() -> None:
    with pytest.raises(UnrecognizedRecord):
        classify(_row("HR", "", "Heart Rate", "BPM", "", "", "", "", "x"))
