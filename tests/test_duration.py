from datetime import timedelta

import pytest

from histkit.duration import format_duration


def test_zero_is_zero_seconds():
    assert format_duration(timedelta(0)) == "0s"


def test_sub_millisecond_is_zero_seconds():
    assert format_duration(timedelta(microseconds=999)) == "0s"


def test_one_year():
    assert format_duration(timedelta(seconds=31_557_600)) == "1y"


def test_one_month():
    assert format_duration(timedelta(seconds=2_630_016)) == "1mo"


def test_one_day():
    assert format_duration(timedelta(seconds=86400)) == "1d"


@pytest.mark.parametrize("n", [1, 7, 59])
def test_seconds(n):
    assert format_duration(timedelta(seconds=n)) == f"{n}s"


@pytest.mark.parametrize("n", [1, 30, 59])
def test_minutes(n):
    assert format_duration(timedelta(minutes=n)) == f"{n}m"


@pytest.mark.parametrize("n", [1, 12, 23])
def test_hours(n):
    assert format_duration(timedelta(hours=n)) == f"{n}h"


@pytest.mark.parametrize("n", [1, 250, 999])
def test_milliseconds(n):
    assert format_duration(timedelta(milliseconds=n)) == f"{n}ms"


def test_only_most_significant_unit_is_shown():
    assert format_duration(timedelta(hours=3, minutes=59, seconds=12)) == format_duration(
        timedelta(hours=3)
    )


def test_milliseconds_dropped_when_seconds_present():
    assert format_duration(timedelta(seconds=4, milliseconds=500)) == format_duration(
        timedelta(seconds=4)
    )


def test_negative_rejected():
    with pytest.raises(ValueError):
        format_duration(timedelta(seconds=-1))