"""Observation record model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pyclimate._constants import kelvin_to_fahrenheit, millis_to_seconds


class ObservationRecord(BaseModel):
    """One parsed line of a TDV climate file.

    Geolocation and pressure are read from the line but not retained.

    Parameters
    ----------
    state_code : str
        Aggregation key, taken verbatim from the first field.
    timestamp_millis : int
        Observation time as UNIX epoch milliseconds.
    humidity_pct : float
        Relative humidity, 0-100 expected (not clamped).
    snow_present : bool
        Snow cover flag.
    cloud_cover_pct : float
        Cloud cover, 0-100 expected (not clamped).
    lightning_strike : bool
        Lightning strike flag.
    surface_temp_kelvin : float
        Surface temperature in Kelvin.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    state_code: str
    timestamp_millis: int = 0
    humidity_pct: float = 0.0
    snow_present: bool = False
    cloud_cover_pct: float = 0.0
    lightning_strike: bool = False
    surface_temp_kelvin: float = Field(default=0.0, description="Surface temperature (K)")

    @property
    def timestamp_epoch_s(self) -> int:
        """Observation time in epoch seconds (milliseconds truncated toward zero)."""
        return millis_to_seconds(self.timestamp_millis)

    @property
    def surface_temp_f(self) -> float:
        """Surface temperature converted from Kelvin to Fahrenheit."""
        return kelvin_to_fahrenheit(self.surface_temp_kelvin)
