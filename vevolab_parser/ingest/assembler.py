from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from vevolab_parser.errors import UnrecognizedRecord
from vevolab_parser.ingest.builder import TableBuilder
from vevolab_parser.ingest.classifier import DEFAULT_SIGNATURES, RecordSignature, classify
from vevolab_parser.ingest.context import ContextTracker
from vevolab_parser.ingest.mappers import to_calculation, to_measurement
from vevolab_parser.ingest.tokenizer import iter_raw_rows
from vevolab_parser.models.records import Diagnostic
from vevolab_parser.models.tables import CalculationTable, MeasurementTable


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssemblerConfig:
    """
    Configuration of one conversion pass.

    strict:
      - False: an UnrecognizedRecord row is skipped and reported as a diagnostic.
      - True:  an UnrecognizedRecord row aborts the conversion.
    reset_protocol_on_series:
      See ContextTracker. False keeps the protocol across a new Series Name.
    encoding:
      Used when a file path is opened.
    delimiter:
      Field delimiter of the export.
    signatures:
      Record layouts tested by the classifier, in order.

    MalformedLine and MissingContext are always fatal.
    """
    strict: bool = False
    reset_protocol_on_series: bool = False
    encoding: str = "utf-8-sig"
    delimiter: str = ","
    signatures: Tuple[RecordSignature, ...] = DEFAULT_SIGNATURES


@dataclass(frozen=True)
class ConversionResult:
    """
    Output of one conversion pass.

    measurements / calculations:
      Complete tables in input order.
    diagnostics:
      Recoverable problems (skipped rows, empty headers), in input order.
    """
    measurements: MeasurementTable
    calculations: CalculationTable
    diagnostics: Tuple[Diagnostic, ...] = ()
    source_path: Optional[Path] = None
    n_rows: int = 0

    @property
    def warnings(self) -> Tuple[str, ...]:
        return tuple(str(d) for d in self.diagnostics)

    @property
    def ok(self) -> bool:
        """False when any row was skipped or any header was ignored."""
        return not self.diagnostics


@dataclass
class ReportAssembler:
    """
    Drives tokenizer -> context tracker -> classifier -> mapper -> builder,
    one row at a time, in a single pass.

    Example
    -------
    >>> result = ReportAssembler().convert_lines([
    ...     "Series Name,10-a",
    ...     "Protocol Name,MV Flow",
    ...     "E,PW Doppler Mode,Velocity,mm/s,1.5,0.1,1.4,1.6",
    ... ])
    >>> len(result.measurements)
    1
    """
    config: AssemblerConfig = field(default_factory=AssemblerConfig)

    def convert_lines(self, lines: Iterable[str], source_path: Optional[Path] = None) -> ConversionResult:
        cfg = self.config
        tracker = ContextTracker(reset_protocol_on_series=cfg.reset_protocol_on_series)
        builder = TableBuilder()
        diagnostics: List[Diagnostic] = []
        n_rows = 0

        for row in iter_raw_rows(lines, delimiter=cfg.delimiter):
            n_rows += 1
            n_diag = len(tracker.diagnostics)
            if tracker.observe(row):
                diagnostics.extend(tracker.diagnostics[n_diag:])
                continue

            try:
                found = classify(row, cfg.signatures)
            except UnrecognizedRecord as e:
                if cfg.strict:
                    raise
                diagnostics.append(
                    Diagnostic(
                        line_number=e.line_number,
                        kind=type(e).__name__,
                        message=e.reason or "unrecognized record",
                        raw_fields=e.raw_fields,
                    )
                )
                logger.warning("skipped %s", e)
                continue

            if found.kind == "ignorable" or found.signature is None:
                continue

            tagged = tracker.tag(row)
            if found.kind == "measurement":
                builder.append(to_measurement(tagged, found.signature.positions))
            else:
                builder.append(to_calculation(tagged, found.signature.positions))

        measurements, calculations = builder.finish()
        logger.debug(
            "converted %d rows: %d measurements, %d calculations, %d diagnostics",
            n_rows, len(measurements), len(calculations), len(diagnostics),
        )
        return ConversionResult(
            measurements=measurements,
            calculations=calculations,
            diagnostics=tuple(diagnostics),
            source_path=source_path,
            n_rows=n_rows,
        )

    def convert_file(self, path: str | Path) -> ConversionResult:
        p = Path(path).expanduser().resolve()
        if not p.is_file():
            raise FileNotFoundError(f"Not a regular file: {p}")
        with p.open("r", encoding=self.config.encoding, newline="") as fh:
            return self.convert_lines(fh, source_path=p)


def convert_file(path: str | Path, config: Optional[AssemblerConfig] = None) -> ConversionResult:
    """Convert one export file with the given (or default) configuration."""
    return ReportAssembler(config or AssemblerConfig()).convert_file(path)
