"""TDV record parser.

Turns one tab-separated line into an :class:`ObservationRecord`. The
parser is a pure function of its input; callers decide what to do with
rejected lines.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from pyclimate._constants import (
    FIELD_CLOUD_COVER,
    FIELD_COUNT,
    FIELD_HUMIDITY,
    FIELD_LIGHTNING,
    FIELD_NAMES,
    FIELD_PRESSURE,
    FIELD_SEPARATOR,
    FIELD_SNOW,
    FIELD_STATE_CODE,
    FIELD_SURFACE_TEMP,
    FIELD_TIMESTAMP,
)
from pyclimate.config import NumericPolicy
from pyclimate.exceptions import MalformedLineError, NumericParseError
from pyclimate.ingestion.normalize import leading_float, leading_int, safe_float, safe_int, truncate_flag
from pyclimate.models.observation import ObservationRecord

if TYPE_CHECKING:
    from pyclimate.ingestion.files import IngestStats

_logger = logging.getLogger(__name__)


def split_fields(line: str, *, line_number: int | None = None) -> list[str]:
    """Split *line* into exactly :data:`FIELD_COUNT` fields.

    The line terminator is dropped first. Fields past the ninth are
    ignored; fewer than nine raises :class:`MalformedLineError`.
    """
    fields = line.rstrip("\r\n").split(FIELD_SEPARATOR)
    if len(fields) < FIELD_COUNT:
        where = f" at line {line_number}" if line_number is not None else ""
        raise MalformedLineError(
            f"expected {FIELD_COUNT} tab-separated fields{where}, got {len(fields)}",
            line_number=line_number,
            field_count=len(fields),
        )
    return fields[:FIELD_COUNT]


def _float_field(
    fields: list[str],
    index: int,
    policy: NumericPolicy,
    line_number: int | None,
) -> float:
    text = fields[index]
    if policy == NumericPolicy.PERMISSIVE:
        return leading_float(text)
    value = safe_float(text)
    if value is None:
        raise NumericParseError(
            f"field {FIELD_NAMES[index]!r} is not numeric: {text!r}",
            field=FIELD_NAMES[index],
            value=text,
            line_number=line_number,
        )
    return value


def _int_field(
    fields: list[str],
    index: int,
    policy: NumericPolicy,
    line_number: int | None,
) -> int:
    text = fields[index]
    if policy == NumericPolicy.PERMISSIVE:
        return leading_int(text)
    value = safe_int(text)
    if value is None:
        raise NumericParseError(
            f"field {FIELD_NAMES[index]!r} is not an integer: {text!r}",
            field=FIELD_NAMES[index],
            value=text,
            line_number=line_number,
        )
    return value


def parse_line(
    line: str,
    *,
    numeric_policy: NumericPolicy = NumericPolicy.PERMISSIVE,
    line_number: int | None = None,
) -> ObservationRecord:
    """Parse one TDV line into an :class:`ObservationRecord`.

    Raises
    ------
    MalformedLineError
        The line has fewer than nine fields.
    NumericParseError
        ``numeric_policy`` is strict and a numeric field did not parse.
    """
    fields = split_fields(line, line_number=line_number)

    timestamp_millis = _int_field(fields, FIELD_TIMESTAMP, numeric_policy, line_number)
    humidity = _float_field(fields, FIELD_HUMIDITY, numeric_policy, line_number)
    snow = _float_field(fields, FIELD_SNOW, numeric_policy, line_number)
    cloud_cover = _float_field(fields, FIELD_CLOUD_COVER, numeric_policy, line_number)
    lightning = _float_field(fields, FIELD_LIGHTNING, numeric_policy, line_number)
    # Pressure is not aggregated, but a strict run still rejects a garbled value.
    _float_field(fields, FIELD_PRESSURE, numeric_policy, line_number)
    surface_temp = _float_field(fields, FIELD_SURFACE_TEMP, numeric_policy, line_number)

    return ObservationRecord(
        state_code=fields[FIELD_STATE_CODE],
        timestamp_millis=timestamp_millis,
        humidity_pct=humidity,
        snow_present=truncate_flag(snow),
        cloud_cover_pct=cloud_cover,
        lightning_strike=truncate_flag(lightning),
        surface_temp_kelvin=surface_temp,
    )


def iter_records(
    lines: Iterable[str],
    *,
    numeric_policy: NumericPolicy = NumericPolicy.PERMISSIVE,
    stats: IngestStats | None = None,
    source: str | None = None,
) -> Iterator[ObservationRecord]:
    """Yield records for every well-formed line, skipping the rest.

    Rejected lines are logged at DEBUG and counted on *stats* when given.
    """
    for line_number, line in enumerate(lines, start=1):
        if stats is not None:
            stats.lines_read += 1
        try:
            record = parse_line(line, numeric_policy=numeric_policy, line_number=line_number)
        except MalformedLineError as exc:
            if stats is not None:
                stats.malformed_lines += 1
            _logger.debug("Skipping malformed line in %s: %s", source or "<stream>", exc)
            continue
        yield record
