"""Vevo LAB Parser -- converts VisualSonics Vevo LAB CSV exports into tidy tables.

A Vevo LAB export interleaves section headers (Series Name, Protocol Name) with
measurement and calculation blocks. This package recovers that structure in a
single pass and produces two tables, each row stamped with its series id and
protocol:

- measurements: id, protocol, measurement, mode, parameter, units, avg, std,
  instance_1, instance_2
- calculations: id, protocol, calculation, units, value

Key principles:
- Values are kept as text: nothing is coerced unless explicitly requested
- Input order is preserved in both tables, duplicates included
- Every row's context comes from a header actually present upstream

Main subpackages:
- ingest: tokenizer, context tracker, classifier, mappers, table builder, assembler
- models: records and tables
- output: CSV writers
- scripts: command-line entry point
"""

from .errors import MalformedLine, MissingContext, ParseError, UnrecognizedRecord
from .ingest import AssemblerConfig, ConversionResult, ReportAssembler, convert_file
from .models import CalculationTable, MeasurementTable

__all__ = [
    "ParseError",
    "MalformedLine",
    "MissingContext",
    "UnrecognizedRecord",
    "AssemblerConfig",
    "ConversionResult",
    "ReportAssembler",
    "convert_file",
    "MeasurementTable",
    "CalculationTable",
]
