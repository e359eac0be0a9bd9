"""Ingest package - turns a Vevo LAB CSV export into measurement/calculation tables.

Pipeline (single pass, one row at a time, no lookahead):
- tokenizer:  raw text -> RawRow (csv quoting honoured, line numbers kept)
- context:    Series Name / Protocol Name headers -> Context snapshots
- classifier: RawRow -> measurement / calculation / ignorable, by shape
- mappers:    tagged row -> MeasurementRecord / CalculationRecord
- builder:    records -> MeasurementTable / CalculationTable
- assembler:  drives the above and applies the error policy

Error policy:
- MalformedLine and MissingContext abort the conversion
- UnrecognizedRecord rows are skipped and reported (fatal with strict=True)
"""
from .assembler import AssemblerConfig, ConversionResult, ReportAssembler, convert_file
from .classifier import (
    CALCULATION_SIGNATURE,
    DEFAULT_SIGNATURES,
    MEASUREMENT_SIGNATURE,
    RecordSignature,
    classify,
)
from .context import ContextTracker
from .tokenizer import iter_raw_rows

__all__ = [
    "AssemblerConfig",
    "ConversionResult",
    "ReportAssembler",
    "convert_file",
    "RecordSignature",
    "MEASUREMENT_SIGNATURE",
    "CALCULATION_SIGNATURE",
    "DEFAULT_SIGNATURES",
    "classify",
    "ContextTracker",
    "iter_raw_rows",
]
