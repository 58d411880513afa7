"""Command-line entry point.

Usage
-----
::

    pyclimate data_tn.tdv data_wa.tdv
    python -m pyclimate --json --output summary.json data_*.tdv

Options::

    --capacity N         Maximum number of distinct state codes (default 50)
    --strict             Reject lines with non-numeric fields instead of reading 0
    --abort-on-missing   Stop at the first unreadable file instead of skipping it
    --utc                Render timestamps in UTC instead of local time
    --json               Output machine-readable JSON
    --output FILE        Write output to FILE instead of stdout
    --verbose            Enable debug logging

Environment variables (``CLIMATE_*``, see :class:`pyclimate.config.ClimateConfig`)
supply the defaults; flags override them.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pyclimate.config import ClimateConfig, MissingFilePolicy, NumericPolicy
from pyclimate.exceptions import ClimateConfigError, InputFileError
from pyclimate.ingestion.files import ingest_paths
from pyclimate.report import render_json, render_report
from pyclimate.state.table import AggregationTable

_logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyclimate",
        description="Summarize NOAA tab-delimited climate observations per state.",
    )
    parser.add_argument("files", nargs="+", metavar="tdv_file", help="TDV file(s) to analyze")
    parser.add_argument("--capacity", type=int, help="Maximum number of distinct state codes")
    parser.add_argument("--strict", action="store_true", help="Skip lines with non-numeric fields")
    parser.add_argument(
        "--abort-on-missing",
        action="store_true",
        help="Stop at the first file that cannot be opened",
    )
    parser.add_argument("--utc", action="store_true", help="Render timestamps in UTC")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--output", "-o", help="Write output to FILE instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def _config_from_args(args: argparse.Namespace) -> ClimateConfig:
    overrides: dict[str, Any] = {}
    if args.capacity is not None:
        overrides["state_capacity"] = args.capacity
    if args.strict:
        overrides["numeric_policy"] = NumericPolicy.STRICT
    if args.abort_on_missing:
        overrides["on_missing_file"] = MissingFilePolicy.ABORT
    if args.utc:
        overrides["report_utc"] = True
    return ClimateConfig.from_env(**overrides)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        config = _config_from_args(args)
    except ClimateConfigError as exc:
        parser.error(str(exc))

    table = AggregationTable(capacity=config.state_capacity)
    try:
        stats = ingest_paths(args.files, table, config=config)
    except InputFileError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    summaries = table.finalize()
    if args.json_mode:
        text = render_json(summaries, stats=stats)
    else:
        text = render_report(summaries, utc=config.report_utc)

    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        _logger.info("Report written to %s", args.output)
    else:
        sys.stdout.write(text)

    _logger.debug(
        "Read %d file(s), %d line(s): %d folded, %d malformed, %d rejected for capacity",
        stats.files_read,
        stats.lines_read,
        stats.records_folded,
        stats.malformed_lines,
        stats.capacity_rejections,
    )
    return 0 if stats.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
