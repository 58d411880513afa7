"""Per-state running accumulator."""

from __future__ import annotations

import dataclasses
import math

from pyclimate.models.observation import ObservationRecord
from pyclimate.models.summary import StateSummary
from pyclimate.state.policy import should_replace_max, should_replace_min


@dataclasses.dataclass
class RunningSum:
    """Neumaier-compensated running sum.

    Keeps the rounding error of long float sums bounded independently of
    the number of terms.
    """

    total: float = 0.0
    compensation: float = 0.0

    def add(self, value: float) -> None:
        total = self.total + value
        if not math.isfinite(total):
            # Past overflow the compensation carries no information.
            self.total = total
            return
        if abs(self.total) >= abs(value):
            self.compensation += (self.total - total) + value
        else:
            self.compensation += (value - total) + self.total
        self.total = total

    def merge(self, other: RunningSum) -> None:
        self.add(other.total)
        self.add(other.compensation)

    @property
    def value(self) -> float:
        if not math.isfinite(self.total):
            return self.total
        return self.total + self.compensation

    @classmethod
    def of(cls, value: float) -> RunningSum:
        return cls(total=value)


@dataclasses.dataclass
class StateAccumulator:
    """Running statistics for one state code.

    Instances are created from the first record seen for a code (see
    :meth:`from_record`) and updated in place afterwards. ``code`` never
    changes once set.
    """

    code: str
    num_records: int
    max_temp_f: float
    max_temp_time_epoch_s: int
    min_temp_f: float
    min_temp_time_epoch_s: int
    lightning_count: int
    snow_count: int
    temp_f_total: RunningSum
    humidity_total: RunningSum
    cloud_cover_total: RunningSum

    @classmethod
    def from_record(cls, record: ObservationRecord) -> StateAccumulator:
        """Seed an accumulator from the first record of a state."""
        temp_f = record.surface_temp_f
        timestamp = record.timestamp_epoch_s
        return cls(
            code=record.state_code,
            num_records=1,
            max_temp_f=temp_f,
            max_temp_time_epoch_s=timestamp,
            min_temp_f=temp_f,
            min_temp_time_epoch_s=timestamp,
            lightning_count=int(record.lightning_strike),
            snow_count=int(record.snow_present),
            temp_f_total=RunningSum.of(temp_f),
            humidity_total=RunningSum.of(record.humidity_pct),
            cloud_cover_total=RunningSum.of(record.cloud_cover_pct),
        )

    def fold(self, record: ObservationRecord) -> None:
        """Fold one more record of the same state into the running values."""
        temp_f = record.surface_temp_f
        self.num_records += 1
        if should_replace_max(self.max_temp_f, temp_f):
            self.max_temp_f = temp_f
            self.max_temp_time_epoch_s = record.timestamp_epoch_s
        if should_replace_min(self.min_temp_f, temp_f):
            self.min_temp_f = temp_f
            self.min_temp_time_epoch_s = record.timestamp_epoch_s
        self.lightning_count += int(record.lightning_strike)
        self.snow_count += int(record.snow_present)
        self.temp_f_total.add(temp_f)
        self.humidity_total.add(record.humidity_pct)
        self.cloud_cover_total.add(record.cloud_cover_pct)

    def merge(self, other: StateAccumulator) -> None:
        """Combine another accumulator for the same code into this one."""
        if other.code != self.code:
            raise ValueError(f"cannot merge state {other.code!r} into {self.code!r}")
        self.num_records += other.num_records
        if should_replace_max(self.max_temp_f, other.max_temp_f):
            self.max_temp_f = other.max_temp_f
            self.max_temp_time_epoch_s = other.max_temp_time_epoch_s
        if should_replace_min(self.min_temp_f, other.min_temp_f):
            self.min_temp_f = other.min_temp_f
            self.min_temp_time_epoch_s = other.min_temp_time_epoch_s
        self.lightning_count += other.lightning_count
        self.snow_count += other.snow_count
        self.temp_f_total.merge(other.temp_f_total)
        self.humidity_total.merge(other.humidity_total)
        self.cloud_cover_total.merge(other.cloud_cover_total)

    @property
    def sum_temp_f(self) -> float:
        return self.temp_f_total.value

    @property
    def sum_humidity_pct(self) -> float:
        return self.humidity_total.value

    @property
    def sum_cloud_cover_pct(self) -> float:
        return self.cloud_cover_total.value

    def summarize(self) -> StateSummary:
        """Project the running values into a :class:`StateSummary`."""
        count = self.num_records
        # Rounding can push the mean a hair outside the observed range.
        avg_temp = min(max(self.sum_temp_f / count, self.min_temp_f), self.max_temp_f)
        return StateSummary(
            code=self.code,
            num_records=count,
            avg_humidity=self.sum_humidity_pct / count,
            avg_temperature_f=avg_temp,
            avg_cloud_cover=self.sum_cloud_cover_pct / count,
            max_temp_f=self.max_temp_f,
            max_temp_time_epoch_s=self.max_temp_time_epoch_s,
            min_temp_f=self.min_temp_f,
            min_temp_time_epoch_s=self.min_temp_time_epoch_s,
            lightning_count=self.lightning_count,
            snow_count=self.snow_count,
        )
