"""Compact, most-significant-unit rendering of durations."""

from __future__ import annotations

from datetime import timedelta

_YEAR = 31_557_600  # 365.25 days
_MONTH = 2_630_016  # 30.44 days
_DAY = 86_400
_HOUR = 3_600
_MINUTE = 60


def format_duration(duration: timedelta) -> str:
    """Render ``duration`` using only its most significant unit, e.g. ``3h``.

    Durations shorter than a millisecond render as ``0s``.
    """
    if duration < timedelta(0):
        raise ValueError("duration must not be negative")

    secs = duration.days * _DAY + duration.seconds
    millis = duration.microseconds // 1000

    years, rest = divmod(secs, _YEAR)
    months, rest = divmod(rest, _MONTH)
    days, day_secs = divmod(rest, _DAY)
    hours = day_secs // _HOUR
    minutes = day_secs % _HOUR // _MINUTE
    seconds = day_secs % _MINUTE

    units = (
        ("y", years),
        ("mo", months),
        ("d", days),
        ("h", hours),
        ("m", minutes),
        ("s", seconds),
        ("ms", millis),
    )
    return next((f"{value}{unit}" for unit, value in units if value > 0), "0s")