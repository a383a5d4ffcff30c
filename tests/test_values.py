# File: /tests/test_values.py | Version: 1.0 | Title: Cell value coercion helpers
import math
from datetime import date, datetime, timezone

import pytest

from tableviews.engine.values import is_truthy, to_number, to_text, to_timestamp

DAY_MS = 86_400_000.0


@pytest.mark.parametrize("value", [None, "", 0, 0.0, False, float("nan")])
def test_falsy_values(value):
    assert is_truthy(value) is False


@pytest.mark.parametrize("value", ["0", "false", 1, -2.5, True, [], {}])
def test_truthy_values(value):
    assert is_truthy(value) is True


def test_to_number_parses_strings_and_blanks():
    assert to_number("12") == 12.0
    assert to_number(" 3.5 ") == 3.5
    assert to_number("") == 0.0
    assert to_number(True) == 1.0
    assert to_number(7) == 7.0


@pytest.mark.parametrize(
    "value",
    ["abc", "1_000", ["1"], "inf", "-infinity", "nan", "NaN", "infinity", "\uff11\uff12", "-0x1F", "0x", "0b12", "1e"],
)
def test_to_number_unparseable_is_nan(value):
    assert math.isnan(to_number(value))


def test_to_timestamp_iso_and_human_formats_agree():
    iso = to_timestamp("2024-01-15")
    assert iso == to_timestamp("2024-01-15T00:00:00Z")
    assert iso == to_timestamp("01/15/2024")
    assert iso == to_timestamp("Jan 15, 2024")
    assert iso == to_timestamp(date(2024, 1, 15))
    assert iso == to_timestamp(datetime(2024, 1, 15, tzinfo=timezone.utc))


def test_to_timestamp_epoch_arithmetic():
    assert to_timestamp("1970-01-02") == DAY_MS
    assert to_timestamp(date(1970, 1, 1)) == 0.0
    assert to_timestamp(1234) == 1234.0


@pytest.mark.parametrize("value", ["not a date", "", "   ", {"y": 2024}, 10**400, -(10**400), 8.64e15 + 1])
def test_to_timestamp_invalid_is_nan(value):
    assert math.isnan(to_timestamp(value))


def test_to_text():
    assert to_text(None) == ""
    assert to_text(5.0) == "5"
    assert to_text(2.5) == "2.5"
    assert to_text(True) == "true"
    assert to_text(["a", 1]) == "a,1"
    assert to_text("x") == "x"


def test_to_number_follows_grid_number_syntax():
    assert to_number("0x1F") == 31.0
    assert to_number("0B11") == 3.0
    assert to_number("0o17") == 15.0
    assert to_number("Infinity") == math.inf
    assert to_number("-Infinity") == -math.inf
    assert to_number(".5") == 0.5
    assert to_number("1.") == 1.0
    assert to_number("-2e3") == -2000.0


def test_huge_integers_saturate_instead_of_raising():
    assert to_number(10**400) == math.inf
    assert to_number(-(10**400)) == -math.inf
    assert to_number("0x" + "f" * 300) == math.inf
    assert to_text(10**400) == str(10**400)


def test_null_is_zero_not_nan():
    assert to_number(None) == 0.0
    assert to_timestamp(None) == 0.0
    assert to_text(None) == ""


def test_to_timestamp_range_limit():
    assert to_timestamp(8.64e15) == 8.64e15
    assert to_timestamp(-8.64e15) == -8.64e15
