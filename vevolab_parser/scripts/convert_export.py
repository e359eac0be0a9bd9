"""
Command-line entry point: convert Vevo LAB CSV exports.

Examples
--------
    vevolabparser data/input.csv
    vevolabparser -o out/ --numeric data/*.csv

Each input is converted independently and written as
<stem>_measurements.csv and <stem>_calculations.csv.

Exit codes: 0 on success (warnings allowed), 1 when any input failed,
2 for invalid arguments.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from vevolab_parser.errors import ParseError
from vevolab_parser.ingest.assembler import AssemblerConfig, ReportAssembler
from vevolab_parser.output.writers import WriterConfig, write_tables


logger = logging.getLogger("vevolab_parser")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="vevolabparser",
        description="Extract measurement and calculation tables from a VisualSonics Vevo LAB CSV export.",
    )
    ap.add_argument("inputs", nargs="+", type=Path, metavar="CSV_FILE", help="Path to the input CSV file(s)")
    ap.add_argument("-o", "--output-dir", type=Path, default=None,
                    help="Directory for the output tables (default: next to each input)")
    ap.add_argument("--numeric", action="store_true",
                    help="Write avg/std/instance/value columns as numbers (non-numeric text becomes empty)")
    ap.add_argument("--strict", action="store_true",
                    help="Abort on unrecognized rows instead of skipping them")
    ap.add_argument("--reset-protocol-on-series", action="store_true",
                    help="Require every Series Name to be followed by its own Protocol Name")
    ap.add_argument("--encoding", default="utf-8-sig", help="Input text encoding (default: %(default)s)")
    verbosity = ap.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only warnings and errors")
    return ap


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else (logging.WARNING if quiet else logging.INFO)
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s: %(message)s")


def convert_one(path: Path, assembler: ReportAssembler, writer_cfg: WriterConfig) -> bool:
    """Convert and write one input. Returns False on failure (already reported)."""
    if not path.is_file():
        logger.error("'%s' does not exist or is not a regular file.", path)
        return False

    logger.info("Parsing file: %s", path)
    try:
        result = assembler.convert_file(path)
        m_path, c_path = write_tables(result, path, writer_cfg)
    except ParseError as e:
        logger.error("%s: %s", path, e)
        return False
    except UnicodeDecodeError as e:
        logger.error("%s: cannot decode as %s (%s); try --encoding", path, assembler.config.encoding, e)
        return False
    except OSError as e:
        logger.error("%s: %s", path, e)
        return False

    if not result.ok:
        logger.warning("%s: %d row(s) skipped or ignored:", path, len(result.diagnostics))
        for w in result.warnings:
            logger.warning("  %s", w)
    logger.info(
        "Parsing complete: %d measurements, %d calculations. Output written to %s and %s.",
        len(result.measurements), len(result.calculations), m_path, c_path,
    )
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    assembler = ReportAssembler(
        AssemblerConfig(
            strict=args.strict,
            reset_protocol_on_series=args.reset_protocol_on_series,
            encoding=args.encoding,
        )
    )
    writer_cfg = WriterConfig(output_dir=args.output_dir, numeric=args.numeric)

    failed: List[Path] = []
    for path in args.inputs:
        if not convert_one(path, assembler, writer_cfg):
            failed.append(path)

    if failed:
        logger.error("%d of %d input(s) failed.", len(failed), len(args.inputs))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
