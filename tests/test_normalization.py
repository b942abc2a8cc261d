from __future__ import annotations

import datetime as dt
import math

import pytest

from pynmea0183.ingestion.normalize import (
    is_meaningful,
    parse_coordinate,
    parse_date,
    parse_decimal,
    parse_integer,
    parse_time,
    prune_patch,
)
from pynmea0183.models.gnss import FixQuality


def test_parse_decimal_accepts_plain_numbers() -> None:
    assert parse_decimal("12.5") == 12.5
    assert parse_decimal("-0.75") == -0.75
    assert parse_decimal(".5") == 0.5
    assert parse_decimal("5.") == 5.0


@pytest.mark.parametrize("token", ["", "nan", "inf", "1e3", "1,5", " 1"])
def test_parse_decimal_rejects(token: str) -> None:
    with pytest.raises(ValueError):
        parse_decimal(token)


def test_parse_integer() -> None:
    assert parse_integer("08") == 8
    assert parse_integer("-5") == -5
    with pytest.raises(ValueError):
        parse_integer("1.0")


def test_parse_integer_out_of_64_bit_range() -> None:
    assert parse_integer("9223372036854775807") == 2**63 - 1
    assert parse_integer("-9223372036854775808") == -(2**63)
    with pytest.raises(ValueError):
        parse_integer("9223372036854775808")
    with pytest.raises(ValueError):
        parse_integer("9" * 20)


def test_parse_decimal_overflow_rejected() -> None:
    with pytest.raises(ValueError):
        parse_decimal("1" * 400)


def test_parse_time_fraction() -> None:
    assert parse_time("235959.999") == dt.time(23, 59, 59, 999000)
    assert parse_time("000000") == dt.time(0, 0, 0)


def test_parse_date_century() -> None:
    assert parse_date("010100") == dt.date(2000, 1, 1)
    assert parse_date("311299") == dt.date(2099, 12, 31)
    with pytest.raises(ValueError):
        parse_date("320199")


def test_parse_coordinate() -> None:
    assert parse_coordinate("4807.038", "N", latitude=True) == pytest.approx(48.1173)
    assert parse_coordinate("01131.000", "w", latitude=False) == pytest.approx(-11.516667, abs=1e-6)
    with pytest.raises(ValueError):
        parse_coordinate("4807.038", "E", latitude=True)
    with pytest.raises(ValueError):
        parse_coordinate("9100.000", "N", latitude=True)


def test_is_meaningful() -> None:
    assert not is_meaningful(None)
    assert not is_meaningful("")
    assert not is_meaningful(())
    assert not is_meaningful(math.nan)
    assert is_meaningful(0)
    assert is_meaningful(False)
    assert is_meaningful((1,))


def test_prune_patch_drops_empty_values() -> None:
    patch = prune_patch(
        {
            "latitude": 48.1,
            "longitude": None,
            "mode_indicator": "",
            "satellite_prns": (),
            "fix_valid": False,
            "fix_quality": FixQuality.DGPS,
            "nested": {"a": None},
        }
    )

    assert patch == {"latitude": 48.1, "fix_valid": False, "fix_quality": 2}
    assert type(patch["fix_quality"]) is int
