from __future__ import annotations

from collections.abc import Callable

import pytest


def make_line(
    code: str = "CA",
    timestamp_ms: int | str = 1428300000000,
    *,
    geohash: str = "9prcjqk3yc80",
    humidity: float | str = 93.0,
    snow: float | str = 0.0,
    cloud_cover: float | str = 100.0,
    lightning: float | str = 0.0,
    pressure: float | str = 95644.0,
    kelvin: float | str = 277.58716,
) -> str:
    fields = [code, timestamp_ms, geohash, humidity, snow, cloud_cover, lightning, pressure, kelvin]
    return "\t".join(str(field) for field in fields) + "\n"


@pytest.fixture
def tdv_line() -> Callable[..., str]:
    return make_line
