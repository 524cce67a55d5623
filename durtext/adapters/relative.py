"""Adapter for python-dateutil's relativedelta.

Only the relative fields (years, months, days, hours, minutes, seconds,
microseconds) are meaningful as a duration. Years and months are converted
with the same fixed lengths as everything else in durtext: 365 and 30 days.
"""

from dateutil.relativedelta import relativedelta
from typing_extensions import override

from durtext.breakdown import Breakdown
from durtext.core import Adapter, Times
from durtext.errors import DurationConversionError
from durtext.util import DAY, HOUR, MICROSECOND_NS, MINUTE, MONTH, YEAR

_ABSOLUTE_FIELDS = (
    "year",
    "month",
    "day",
    "weekday",
    "hour",
    "minute",
    "second",
    "microsecond",
)

_RELATIVE_FIELDS = (
    "years",
    "months",
    "days",
    "hours",
    "minutes",
    "seconds",
    "microseconds",
)


class RelativedeltaAdapter(Adapter[relativedelta]):
    target = relativedelta

    @override
    def as_times(self, value: relativedelta) -> Times:
        absolute = [
            name for name in _ABSOLUTE_FIELDS if getattr(value, name) is not None
        ]
        if absolute or value.leapdays:
            raise DurationConversionError(
                f"relativedelta with absolute fields is not a duration.\n"
                f"Got: {value!r}\n"
                f"Hint: Use plural relative fields, e.g. relativedelta(months=2)"
            )

        negative = [name for name in _RELATIVE_FIELDS if getattr(value, name) < 0]
        if negative:
            raise DurationConversionError(
                f"Negative durations are not supported.\n"
                f"Got: {value!r} (negative: {', '.join(negative)})"
            )

        seconds = (
            value.years * YEAR
            + value.months * MONTH
            + value.days * DAY
            + value.hours * HOUR
            + value.minutes * MINUTE
            + value.seconds
        )
        return int(seconds), int(value.microseconds) * MICROSECOND_NS

    @override
    def from_times(self, seconds: int, nanoseconds: int) -> relativedelta:
        parts = Breakdown.from_times(seconds, nanoseconds)
        # relativedelta rolls 12 months into a 365-day year, so a full
        # twelve months stays in days
        years_worth, months = divmod(parts.months, 12)
        days = years_worth * 12 * MONTH // DAY + parts.weeks * 7 + parts.days
        return relativedelta(
            years=parts.years,
            months=months,
            days=days,
            hours=parts.hours,
            minutes=parts.minutes,
            seconds=parts.seconds,
            microseconds=parts.milliseconds * 1000 + parts.microseconds,
        )
