"""Adapters for standard library duration values."""

from datetime import timedelta

from typing_extensions import override

from durtext.core import Adapter, Times
from durtext.errors import DurationConversionError
from durtext.util import DAY, MICROSECOND_NS, SECOND_NS


class Nanoseconds(int):
    """A duration held as a total count of nanoseconds.

    Useful for values from ``time.monotonic_ns()`` and ``time.perf_counter_ns()``
    differences, which timedelta cannot hold without losing precision.
    """

    @override
    def __repr__(self) -> str:
        return f"Nanoseconds({int(self)})"


class TimedeltaAdapter(Adapter[timedelta]):
    """Convert :class:`datetime.timedelta` values.

    timedelta stores microseconds, so reconstruction floors the nanosecond
    channel to whole microseconds.
    """

    target = timedelta

    @override
    def as_times(self, value: timedelta) -> Times:
        if value < timedelta(0):
            raise DurationConversionError(
                f"Negative durations are not supported.\n"
                f"Got: {value!r}"
            )
        return value.days * DAY + value.seconds, value.microseconds * MICROSECOND_NS

    @override
    def from_times(self, seconds: int, nanoseconds: int) -> timedelta:
        try:
            return timedelta(
                seconds=seconds, microseconds=nanoseconds // MICROSECOND_NS
            )
        except OverflowError as exc:
            raise DurationConversionError(
                f"Duration of {seconds}s {nanoseconds}ns does not fit in a "
                f"timedelta (max {timedelta.max})"
            ) from exc


class NanosecondsAdapter(Adapter[Nanoseconds]):
    """Convert :class:`Nanoseconds` totals without loss."""

    target = Nanoseconds

    @override
    def as_times(self, value: Nanoseconds) -> Times:
        if value < 0:
            raise DurationConversionError(
                f"Negative durations are not supported.\n"
                f"Got: {value!r}"
            )
        return divmod(int(value), SECOND_NS)

    @override
    def from_times(self, seconds: int, nanoseconds: int) -> Nanoseconds:
        return Nanoseconds(seconds * SECOND_NS + nanoseconds)
