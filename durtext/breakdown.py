from collections.abc import Iterable, Iterator
from dataclasses import dataclass, fields, replace
from enum import Flag

from durtext.util import (
    DAY,
    HOUR,
    MICROSECOND_NS,
    MILLISECOND_NS,
    MINUTE,
    MONTH,
    NANOSECOND,
    SECOND,
    WEEK,
    YEAR,
)


class Unit(Flag):
    """Named duration units, declared most significant first.

    Members combine with ``|`` to select several units at once:

        >>> Unit.MINUTES | Unit.SECONDS
        <Unit.MINUTES|SECONDS: 96>
    """

    YEARS = 1
    MONTHS = 2
    WEEKS = 4
    DAYS = 8
    HOURS = 16
    MINUTES = 32
    SECONDS = 64
    MILLISECONDS = 128
    MICROSECONDS = 256
    NANOSECONDS = 512

    ALL = (
        YEARS
        | MONTHS
        | WEEKS
        | DAYS
        | HOURS
        | MINUTES
        | SECONDS
        | MILLISECONDS
        | MICROSECONDS
        | NANOSECONDS
    )

    @property
    def suffix(self) -> str:
        """Text suffix used when formatting this unit."""
        return _SUFFIXES[self]

    @property
    def field(self) -> str:
        """Name of the matching Breakdown field."""
        return self.name.lower()

    @classmethod
    def select(cls, units: "Unit | Iterable[Unit]") -> "Unit":
        """Normalize a flag or an iterable of units into a single flag."""
        if isinstance(units, Unit):
            return units
        selected = Unit(0)
        for unit in units:
            if not isinstance(unit, Unit):
                raise TypeError(
                    f"Unit selection must contain Unit members.\n"
                    f"Got {type(unit).__name__!r}: {unit!r}\n"
                    f"Example: Unit.MINUTES | Unit.SECONDS"
                )
            selected |= unit
        return selected


_SUFFIXES: dict[Unit, str] = {
    Unit.YEARS: "y",
    Unit.MONTHS: "m",
    Unit.WEEKS: "w",
    Unit.DAYS: "d",
    Unit.HOURS: "h",
    Unit.MINUTES: "m",
    Unit.SECONDS: "s",
    Unit.MILLISECONDS: "ms",
    Unit.MICROSECONDS: "us",
    Unit.NANOSECONDS: "ns",
}

# Coarse units in decomposition order, length in seconds
_SECOND_UNITS: tuple[tuple[Unit, int], ...] = (
    (Unit.YEARS, YEAR),
    (Unit.MONTHS, MONTH),
    (Unit.WEEKS, WEEK),
    (Unit.DAYS, DAY),
    (Unit.HOURS, HOUR),
    (Unit.MINUTES, MINUTE),
    (Unit.SECONDS, SECOND),
)

# Subsecond units in decomposition order, length in nanoseconds
_NANO_UNITS: tuple[tuple[Unit, int], ...] = (
    (Unit.MILLISECONDS, MILLISECOND_NS),
    (Unit.MICROSECONDS, MICROSECOND_NS),
    (Unit.NANOSECONDS, NANOSECOND),
)


@dataclass(frozen=True, kw_only=True)
class Breakdown:
    """A duration split into per-unit counts under the fixed unit table.

    Seconds and nanoseconds are independent channels: years through seconds
    come from the whole-second count, milliseconds through nanoseconds come
    from the subsecond remainder only.
    """

    years: int = 0
    months: int = 0
    weeks: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0
    microseconds: int = 0
    nanoseconds: int = 0

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(
                    f"Breakdown {f.name} must be an int.\n"
                    f"Got {type(value).__name__!r}: {value!r}\n"
                    f"Example: Breakdown(hours=1, minutes=30)"
                )
            if value < 0:
                raise ValueError(
                    f"Breakdown {f.name} must be >= 0, got {value}.\n"
                    f"Negative durations are not supported."
                )

    @classmethod
    def zero(cls) -> "Breakdown":
        return cls()

    @classmethod
    def from_times(cls, seconds: int, nanoseconds: int) -> "Breakdown":
        """Decompose a (seconds, nanoseconds) pair, most significant unit first.

        Each unit takes the largest count its length allows and hands the
        remainder to the next unit down. The whole-second chain ends at
        seconds; the subsecond chain starts over from ``nanoseconds``.

        Raises:
            ValueError: If either channel is negative
        """
        if seconds < 0 or nanoseconds < 0:
            raise ValueError(
                f"Cannot decompose a negative duration.\n"
                f"Got seconds={seconds}, nanoseconds={nanoseconds}"
            )

        counts: dict[str, int] = {}

        remainder = seconds
        for unit, length in _SECOND_UNITS:
            counts[unit.field], remainder = divmod(remainder, length)

        remainder = nanoseconds
        for unit, length in _NANO_UNITS:
            counts[unit.field], remainder = divmod(remainder, length)

        return cls(**counts)

    def as_times(self) -> tuple[int, int]:
        """Recompose into a (seconds, nanoseconds) pair by linear summation."""
        seconds = sum(
            getattr(self, unit.field) * length for unit, length in _SECOND_UNITS
        )
        nanoseconds = sum(
            getattr(self, unit.field) * length for unit, length in _NANO_UNITS
        )
        return seconds, nanoseconds

    def items(self) -> Iterator[tuple[Unit, int]]:
        """Yield (unit, count) pairs in precedence order."""
        for unit in Unit:
            yield unit, getattr(self, unit.field)

    def nonzero(self) -> Iterator[tuple[Unit, int]]:
        return ((unit, count) for unit, count in self.items() if count)

    def __bool__(self) -> bool:
        return any(count for _, count in self.items())

    def filter(self, units: Unit | Iterable[Unit]) -> "Breakdown":
        """Zero every unit that is not selected.

        Dropped counts are discarded, never carried into neighbouring units.

        Example:
            >>> Breakdown(hours=1, minutes=1).filter(Unit.MINUTES) == Breakdown(minutes=1)
            True
        """
        allowed = Unit.select(units)
        return replace(
            self,
            **{unit.field: 0 for unit in Unit if unit not in allowed},
        )

    def truncate(self, limit: int) -> "Breakdown":
        """Keep at most ``limit`` consecutive units from the first nonzero one.

        Leading zero units are skipped without consuming the budget. Once the
        first nonzero unit is reached every unit counts against the budget,
        zero or not, so "1h 1m 30us" truncated to 3 keeps hours, minutes and
        the empty seconds slot and drops the microseconds.
        """
        if limit < 0:
            raise ValueError(f"Truncation limit must be >= 0, got {limit}")

        zeroed: dict[str, int] = {}
        started = False
        remaining = limit

        for unit, count in self.items():
            if not (started or count > 0):
                continue
            started = True
            if remaining == 0:
                zeroed[unit.field] = 0
            else:
                remaining -= 1

        return replace(self, **zeroed)
