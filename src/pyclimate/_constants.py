"""Internal constants shared across the library."""

# ------------------------------------------------------------------
# TDV record layout (tab separated, one record per line)
# ------------------------------------------------------------------

FIELD_SEPARATOR = "\t"
FIELD_COUNT = 9

FIELD_STATE_CODE = 0
FIELD_TIMESTAMP = 1
FIELD_GEOLOCATION = 2
FIELD_HUMIDITY = 3
FIELD_SNOW = 4
FIELD_CLOUD_COVER = 5
FIELD_LIGHTNING = 6
FIELD_PRESSURE = 7
FIELD_SURFACE_TEMP = 8

FIELD_NAMES: tuple[str, ...] = (
    "state_code",
    "timestamp",
    "geolocation",
    "humidity",
    "snow",
    "cloud_cover",
    "lightning",
    "pressure",
    "surface_temperature",
)

# One slot per US state.
DEFAULT_STATE_CAPACITY = 50

# ------------------------------------------------------------------
# Unit conversions
# ------------------------------------------------------------------

_KELVIN_TO_F_SCALE = 1.8
_KELVIN_TO_F_OFFSET = 459.67


def kelvin_to_fahrenheit(kelvin: float) -> float:
    """Convert a Kelvin temperature to degrees Fahrenheit."""
    return kelvin * _KELVIN_TO_F_SCALE - _KELVIN_TO_F_OFFSET


def millis_to_seconds(millis: int) -> int:
    """Convert epoch milliseconds to epoch seconds, truncating toward zero."""
    if millis >= 0:
        return millis // 1000
    return -(-millis // 1000)
