from __future__ import annotations

from typing import List

import pytest


MEAS_LABELS = "Measurement,Mode,Parameter,Units,Avg,Std,Instance 1,Instance 2"
CALC_LABELS = "Calculation,,Units,Value"


def export_block(series: str, protocols: List[str]) -> List[str]:
    """One series with, per protocol, 2 measurement rows and 1 calculation row."""
    lines = [f"Series Name,{series}", "Series Date,2024-03-01 10:15:00", ""]
    for k, proto in enumerate(protocols):
        lines += [
            f"Protocol Name,{proto}",
            MEAS_LABELS,
            f'"E","PW Doppler Mode","Velocity","mm/s","70{k}.1","10.2","690.0","710.2"',
            f'"A","PW Doppler Mode","Velocity","mm/s","45{k}.0","","450.0",,',
            CALC_LABELS,
            f'"E/A ({series}/{proto})",,"none","1.55{k}"',
            "",
        ]
    return lines


def make_export(layout: List[tuple]) -> str:
    lines: List[str] = []
    for series, protocols in layout:
        lines += export_block(series, protocols)
    return "\n".join(lines) + "\n"


@pytest.fixture
def two_series_text() -> str:
    return make_export([("10-a", ["MV Flow", "SAX M-Mode"]), ("12-0", ["MV Flow", "SAX M-Mode"])])
