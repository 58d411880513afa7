from __future__ import annotations

import pytest

from pyclimate.ingestion.normalize import leading_float, leading_int, safe_float, safe_int, truncate_flag


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("93.0", 93.0),
        ("  277.58716 ", 277.58716),
        ("-1.5e2", -150.0),
        (".5", 0.5),
        ("12.", 12.0),
    ],
)
def test_safe_float_accepts_decimal_text(text: str, expected: float) -> None:
    assert safe_float(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "abc", "12abc", "nan", "inf", "1_000", "--", None])
def test_safe_float_rejects_non_numeric_text(text: str | None) -> None:
    assert safe_float(text) is None


def test_safe_int_requires_whole_integer() -> None:
    assert safe_int("1428300000000") == 1428300000000
    assert safe_int(" -7 ") == -7
    assert safe_int("1.5") is None
    assert safe_int("") is None


def test_leading_float_matches_atof_prefix_semantics() -> None:
    assert leading_float("12.5abc") == 12.5
    assert leading_float("  3e2xyz") == 300.0
    assert leading_float("abc") == 0.0
    assert leading_float("") == 0.0
    assert leading_float("1e308x") == 1e308
    assert leading_float("1e999") == 0.0


def test_leading_int_matches_atol_prefix_semantics() -> None:
    assert leading_int("1428300000000") == 1428300000000
    assert leading_int("1.5e3") == 1
    assert leading_int("x12") == 0
    assert leading_int("-42ms") == -42


def test_leading_int_tolerates_oversized_digit_strings() -> None:
    assert leading_int("9" * 10_000) == 0


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.0, False), (1.0, True), (0.9, False), (2.0, True), (-1.0, True)],
)
def test_truncate_flag(value: float, expected: bool) -> None:
    assert truncate_flag(value) is expected
