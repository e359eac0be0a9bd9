from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from vevolab_parser.ingest.assembler import ConversionResult


@dataclass(frozen=True)
class WriterConfig:
    """
    Output naming and formatting.

    output_dir:
      Directory for both tables. None writes next to the input file.
    measurement_suffix / calculation_suffix:
      Appended to the input file stem: <stem>_measurements.csv, <stem>_calculations.csv
    numeric:
      - False: all values written as found in the export.
      - True: avg/std/instance_1/instance_2/value written as floats (empty -> empty cell).
    """
    output_dir: Optional[Path] = None
    measurement_suffix: str = "_measurements"
    calculation_suffix: str = "_calculations"
    numeric: bool = False


def output_paths(input_path: str | Path, config: Optional[WriterConfig] = None) -> Tuple[Path, Path]:
    """Return (measurement_csv, calculation_csv) for an input file."""
    cfg = config or WriterConfig()
    p = Path(input_path)
    stem = p.stem or "input"
    out_dir = Path(cfg.output_dir) if cfg.output_dir is not None else p.parent
    return (
        out_dir / f"{stem}{cfg.measurement_suffix}.csv",
        out_dir / f"{stem}{cfg.calculation_suffix}.csv",
    )


def write_tables(
    result: ConversionResult,
    input_path: str | Path,
    config: Optional[WriterConfig] = None,
) -> Tuple[Path, Path]:
    """Write both tables as CSV (header row first, input order). Returns the written paths."""
    cfg = config or WriterConfig()
    m_path, c_path = output_paths(input_path, cfg)
    m_path.parent.mkdir(parents=True, exist_ok=True)

    result.measurements.to_frame(numeric=cfg.numeric).to_csv(m_path, index=False, lineterminator="\n")
    result.calculations.to_frame(numeric=cfg.numeric).to_csv(c_path, index=False, lineterminator="\n")
    return m_path, c_path
