"""Per-state summary model."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict


class StateSummary(BaseModel):
    """Finalized statistics for one state code.

    Averages are computed from the running sums at finalize time; the
    remaining fields are copied from the accumulator unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    code: str
    num_records: int
    avg_humidity: float
    avg_temperature_f: float
    avg_cloud_cover: float
    max_temp_f: float
    max_temp_time_epoch_s: int
    min_temp_f: float
    min_temp_time_epoch_s: int
    lightning_count: int
    snow_count: int

    @property
    def max_temp_datetime_utc(self) -> datetime:
        """Return ``max_temp_time_epoch_s`` as a UTC datetime."""
        return datetime.fromtimestamp(self.max_temp_time_epoch_s, tz=UTC)

    @property
    def min_temp_datetime_utc(self) -> datetime:
        """Return ``min_temp_time_epoch_s`` as a UTC datetime."""
        return datetime.fromtimestamp(self.min_temp_time_epoch_s, tz=UTC)
