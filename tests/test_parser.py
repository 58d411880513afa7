from __future__ import annotations

import pytest

from pyclimate.config import NumericPolicy
from pyclimate.exceptions import MalformedLineError, NumericParseError
from pyclimate.ingestion.files import IngestStats
from pyclimate.ingestion.parser import iter_records, parse_line, split_fields


def test_parse_line_reads_all_fields(tdv_line) -> None:
    record = parse_line(
        tdv_line(
            "CA",
            1428300000000,
            humidity=93.0,
            snow=1.0,
            cloud_cover=22.0,
            lightning=1.0,
            kelvin=277.58716,
        )
    )

    assert record.state_code == "CA"
    assert record.timestamp_millis == 1428300000000
    assert record.timestamp_epoch_s == 1428300000
    assert record.humidity_pct == 93.0
    assert record.snow_present is True
    assert record.cloud_cover_pct == 22.0
    assert record.lightning_strike is True
    assert record.surface_temp_kelvin == pytest.approx(277.58716)


def test_state_code_is_taken_verbatim(tdv_line) -> None:
    assert parse_line(tdv_line("ca")).state_code == "ca"
    assert parse_line(tdv_line("C")).state_code == "C"
    assert parse_line(tdv_line("CAL")).state_code == "CAL"


def test_crlf_line_terminator_is_stripped(tdv_line) -> None:
    line = tdv_line(kelvin=300.0).replace("\n", "\r\n")
    assert parse_line(line).surface_temp_kelvin == 300.0


def test_extra_fields_are_ignored(tdv_line) -> None:
    line = tdv_line(kelvin=300.0).rstrip("\n") + "\textra\tfields\n"
    assert parse_line(line).surface_temp_kelvin == 300.0


def test_short_line_is_malformed() -> None:
    with pytest.raises(MalformedLineError) as exc_info:
        parse_line("CA\t1428300000000\t9prc\t93.0\t0.0\n", line_number=7)

    assert exc_info.value.field_count == 5
    assert exc_info.value.line_number == 7
    assert "line 7" in str(exc_info.value)


def test_blank_line_is_malformed() -> None:
    with pytest.raises(MalformedLineError):
        parse_line("\n")


def test_split_fields_returns_exactly_nine(tdv_line) -> None:
    fields = split_fields(tdv_line().rstrip("\n") + "\tx")
    assert len(fields) == 9


def test_permissive_policy_reads_garbage_as_zero(tdv_line) -> None:
    record = parse_line(tdv_line(timestamp_ms="soon", humidity="n/a", snow="yes", kelvin="12.5K"))

    assert record.timestamp_millis == 0
    assert record.humidity_pct == 0.0
    assert record.snow_present is False
    assert record.surface_temp_kelvin == 12.5


def test_fractional_flags_truncate_toward_zero(tdv_line) -> None:
    record = parse_line(tdv_line(snow=0.99, lightning=1.0))
    assert record.snow_present is False
    assert record.lightning_strike is True


def test_strict_policy_rejects_non_numeric_field(tdv_line) -> None:
    with pytest.raises(NumericParseError) as exc_info:
        parse_line(tdv_line(humidity="n/a"), numeric_policy=NumericPolicy.STRICT)

    assert exc_info.value.field == "humidity"
    assert exc_info.value.value == "n/a"
    assert isinstance(exc_info.value, MalformedLineError)


def test_strict_policy_rejects_fractional_timestamp(tdv_line) -> None:
    with pytest.raises(NumericParseError) as exc_info:
        parse_line(tdv_line(timestamp_ms="1428300000000.5"), numeric_policy=NumericPolicy.STRICT)
    assert exc_info.value.field == "timestamp"


def test_strict_policy_accepts_clean_line(tdv_line) -> None:
    record = parse_line(tdv_line(kelvin=280.0), numeric_policy=NumericPolicy.STRICT)
    assert record.surface_temp_kelvin == 280.0


@pytest.mark.parametrize("policy", [NumericPolicy.PERMISSIVE, NumericPolicy.STRICT])
def test_extreme_values_parse_without_error(tdv_line, policy: NumericPolicy) -> None:
    record = parse_line(tdv_line("CA", "99999999999999999999", kelvin="1e308"), numeric_policy=policy)

    assert record.timestamp_epoch_s == 99_999_999_999_999_999
    assert record.surface_temp_kelvin == 1e308
    assert record.surface_temp_f == float("inf")


def test_geolocation_is_not_validated(tdv_line) -> None:
    record = parse_line(tdv_line(geohash=""), numeric_policy=NumericPolicy.STRICT)
    assert record.state_code == "CA"


def test_iter_records_skips_and_counts_malformed_lines(tdv_line) -> None:
    lines = [
        tdv_line("CA"),
        "CA\t1\t2\t3\t4\n",
        "\n",
        tdv_line("TX"),
    ]
    stats = IngestStats()

    records = list(iter_records(lines, stats=stats))

    assert [record.state_code for record in records] == ["CA", "TX"]
    assert stats.lines_read == 4
    assert stats.malformed_lines == 2


def test_iter_records_strict_skips_numeric_failures(tdv_line) -> None:
    lines = [tdv_line("CA", kelvin="hot"), tdv_line("TX")]
    records = list(iter_records(lines, numeric_policy=NumericPolicy.STRICT))
    assert [record.state_code for record in records] == ["TX"]
