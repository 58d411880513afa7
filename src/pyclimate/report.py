"""Report rendering.

Produces the reference plain-text summary and a JSON dump of the same
data.
"""

from __future__ import annotations

import dataclasses
import json
import time
from collections.abc import Sequence
from typing import Any

from pyclimate.ingestion.files import IngestStats
from pyclimate.models.summary import StateSummary


INVALID_TIME = "(invalid time)"


def format_ctime(epoch_s: int, *, utc: bool = False) -> str:
    """Render *epoch_s* like C ``ctime`` (without the trailing newline).

    Local time by default, UTC when *utc* is set. Timestamps the platform
    cannot represent render as ``INVALID_TIME``.
    """
    try:
        if utc:
            return time.asctime(time.gmtime(epoch_s))
        return time.ctime(epoch_s)
    except (OverflowError, OSError, ValueError):
        return INVALID_TIME


def _state_block(summary: StateSummary, *, utc: bool) -> list[str]:
    return [
        f"-- State: {summary.code} --",
        f"Number of Records: {summary.num_records}",
        f"Average Humidity: {summary.avg_humidity:.1f}%",
        f"Average Temperature: {summary.avg_temperature_f:.1f}F",
        f"Max Temperature: {summary.max_temp_f:.1f}F",
        f"Max Temperature on: {format_ctime(summary.max_temp_time_epoch_s, utc=utc)}",
        f"Min Temperature: {summary.min_temp_f:.1f}F",
        f"Min Temperature on: {format_ctime(summary.min_temp_time_epoch_s, utc=utc)}",
        f"Lightning Strikes: {summary.lightning_count}",
        f"Records with Snow Cover: {summary.snow_count}",
        f"Average Cloud Cover: {summary.avg_cloud_cover:.1f}%",
    ]


def render_report(summaries: Sequence[StateSummary], *, utc: bool = False) -> str:
    """Render summaries in the reference text format.

    The first line lists every state code in first-seen order, followed
    by one block per state. The result ends with a newline.
    """
    lines = ["States found: " + " ".join(summary.code for summary in summaries)]
    for summary in summaries:
        lines.extend(_state_block(summary, utc=utc))
    return "\n".join(lines) + "\n"


def render_json(
    summaries: Sequence[StateSummary],
    *,
    stats: IngestStats | None = None,
) -> str:
    """Render summaries (and optional ingestion counters) as indented JSON."""
    payload: dict[str, Any] = {
        "states_found": [summary.code for summary in summaries],
        "states": [summary.model_dump(mode="json") for summary in summaries],
    }
    if stats is not None:
        payload["ingest"] = dataclasses.asdict(stats)
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
