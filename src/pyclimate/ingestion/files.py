"""File ingestion driver.

Streams TDV lines from files (or any iterable of lines) through the
record parser and into an :class:`AggregationTable`. Files are read one
at a time, in the order given, and every handle is closed before the
next file is opened.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from collections.abc import Iterable, Sequence

from pyclimate.config import ClimateConfig, MissingFilePolicy
from pyclimate.exceptions import CapacityExceededError, InputFileError
from pyclimate.ingestion.parser import iter_records
from pyclimate.state.table import AggregationTable

_logger = logging.getLogger(__name__)

StrPath = str | os.PathLike[str]


@dataclasses.dataclass
class IngestStats:
    """Counters describing one ingestion run."""

    files_read: int = 0
    lines_read: int = 0
    records_folded: int = 0
    malformed_lines: int = 0
    capacity_rejections: int = 0
    rejected_codes: list[str] = dataclasses.field(default_factory=list)
    failed_files: dict[str, str] = dataclasses.field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """``True`` when every file was read and no record was rejected for capacity."""
        return not self.failed_files and self.capacity_rejections == 0


def ingest_lines(
    lines: Iterable[str],
    table: AggregationTable,
    *,
    config: ClimateConfig | None = None,
    source: str | None = None,
    stats: IngestStats | None = None,
) -> IngestStats:
    """Parse every line of *lines* and fold the records into *table*.

    Malformed lines are skipped. Records whose state code does not fit in
    the table are counted and skipped; the first rejection of each code is
    logged as a warning.
    """
    cfg = config or ClimateConfig()
    if stats is None:
        stats = IngestStats()

    for record in iter_records(lines, numeric_policy=cfg.numeric_policy, stats=stats, source=source):
        try:
            table.fold(record)
        except CapacityExceededError as exc:
            stats.capacity_rejections += 1
            if exc.code not in stats.rejected_codes:
                stats.rejected_codes.append(exc.code)
                _logger.warning("%s; skipping its records", exc)
            continue
        stats.records_folded += 1
    return stats


def ingest_file(
    path: StrPath,
    table: AggregationTable,
    *,
    config: ClimateConfig | None = None,
    stats: IngestStats | None = None,
) -> IngestStats:
    """Read one TDV file into *table*.

    Raises
    ------
    InputFileError
        The file could not be opened or read. Records folded before a
        mid-file read error stay in the table.
    """
    cfg = config or ClimateConfig()
    if stats is None:
        stats = IngestStats()
    name = os.fspath(path)

    _logger.info("Opening file: %s", name)
    try:
        with open(name, encoding=cfg.encoding, errors="replace") as handle:
            ingest_lines(handle, table, config=cfg, source=name, stats=stats)
    except OSError as exc:
        raise InputFileError(f"cannot read {name}: {exc.strerror or exc}", path=name) from exc

    stats.files_read += 1
    return stats


def ingest_paths(
    paths: Sequence[StrPath],
    table: AggregationTable,
    *,
    config: ClimateConfig | None = None,
) -> IngestStats:
    """Read every path in order into *table*.

    With ``on_missing_file="skip"`` unreadable files are logged, recorded
    in :attr:`IngestStats.failed_files` and skipped. With ``"abort"`` the
    first :class:`InputFileError` propagates.
    """
    cfg = config or ClimateConfig()
    stats = IngestStats()

    for path in paths:
        try:
            ingest_file(path, table, config=cfg, stats=stats)
        except InputFileError as exc:
            if cfg.on_missing_file == MissingFilePolicy.ABORT:
                raise
            stats.failed_files[exc.path] = str(exc)
            _logger.error("%s; moving on to next file", exc)
    return stats
