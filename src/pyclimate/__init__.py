"""pyclimate - Streaming per-state summaries of NOAA TDV climate observations."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyclimate")
except PackageNotFoundError:
    __version__ = "0+local"
from pyclimate.config import ClimateConfig, MissingFilePolicy, NumericPolicy
from pyclimate.exceptions import (
    CapacityExceededError,
    ClimateConfigError,
    ClimateError,
    InputFileError,
    MalformedLineError,
    NumericParseError,
)
from pyclimate.ingestion.files import IngestStats, ingest_file, ingest_lines, ingest_paths
from pyclimate.ingestion.parser import iter_records, parse_line
from pyclimate.models import ObservationRecord, StateSummary
from pyclimate.report import render_json, render_report
from pyclimate.state import AggregationTable, StateAccumulator

__all__ = [
    "__version__",
    "AggregationTable",
    "CapacityExceededError",
    "ClimateConfig",
    "ClimateConfigError",
    "ClimateError",
    "IngestStats",
    "InputFileError",
    "MalformedLineError",
    "MissingFilePolicy",
    "NumericParseError",
    "NumericPolicy",
    "ObservationRecord",
    "StateAccumulator",
    "StateSummary",
    "ingest_file",
    "ingest_lines",
    "ingest_paths",
    "iter_records",
    "parse_line",
    "render_json",
    "render_report",
]
