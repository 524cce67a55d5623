"""Tests for breaking durations down into unit counts."""

import pytest

from durtext import Breakdown, Unit
from durtext.util import DAY, MONTH, WEEK, YEAR


def test_from_times_minutes_and_seconds():
    """Test that 185 seconds is three minutes and five seconds."""
    assert Breakdown.from_times(185, 0) == Breakdown(minutes=3, seconds=5)


def test_from_times_takes_largest_units_first():
    """Test that each unit absorbs as much as its length allows."""
    parts = Breakdown.from_times(99 * DAY + 324, 0)

    assert parts == Breakdown(months=3, weeks=1, days=2, minutes=5, seconds=24)


def test_from_times_uses_fixed_year_and_month():
    """Test that a year is 365 days and a month is 30 days."""
    assert Breakdown.from_times(365 * DAY, 0) == Breakdown(years=1)
    assert Breakdown.from_times(30 * DAY, 0) == Breakdown(months=1)
    # 360 days is twelve months, not a year
    assert Breakdown.from_times(360 * DAY, 0) == Breakdown(months=12)


def test_from_times_subsecond_chain():
    """Test that nanoseconds split into ms, us and ns."""
    parts = Breakdown.from_times(0, 1_002_003)

    assert parts == Breakdown(milliseconds=1, microseconds=2, nanoseconds=3)


def test_from_times_does_not_carry_nanoseconds_into_seconds():
    """Test that the two channels stay independent."""
    parts = Breakdown.from_times(1, 1_500_000_000)

    assert parts.seconds == 1
    assert parts.milliseconds == 1500


def test_from_times_rejects_negative_values():
    """Test that negative durations are refused."""
    with pytest.raises(ValueError, match="negative duration"):
        Breakdown.from_times(-1, 0)

    with pytest.raises(ValueError, match="negative duration"):
        Breakdown.from_times(0, -1)


def test_breakdown_rejects_negative_fields():
    """Test that a breakdown cannot hold negative counts."""
    with pytest.raises(ValueError, match="hours must be >= 0"):
        Breakdown(hours=-1)


def test_breakdown_rejects_non_integer_fields():
    """Test that counts must be whole numbers."""
    with pytest.raises(TypeError, match="hours must be an int"):
        Breakdown(hours=1.5)

    with pytest.raises(TypeError, match="seconds must be an int"):
        Breakdown(seconds="5")

    with pytest.raises(TypeError, match="days must be an int"):
        Breakdown(days=True)


def test_as_times_recomposes_both_channels():
    """Test linear recomposition of seconds and nanoseconds."""
    parts = Breakdown(
        years=1,
        months=3,
        weeks=2,
        days=2,
        minutes=10,
        seconds=10,
        milliseconds=1,
        microseconds=2,
        nanoseconds=3,
    )

    assert parts.as_times() == (
        YEAR + 3 * MONTH + 2 * WEEK + 2 * DAY + 610,
        1_002_003,
    )


def test_decomposition_is_idempotent():
    """Test that recomposing and decomposing again yields the same breakdown."""
    for seconds, nanoseconds in [
        (0, 0),
        (59, 999_999_999),
        (185, 30),
        (9159010, 0),
        (40695010, 1_002_003),
        (2**64 - 1, 999_999_999),
    ]:
        parts = Breakdown.from_times(seconds, nanoseconds)
        assert Breakdown.from_times(*parts.as_times()) == parts
        assert parts.as_times() == (seconds, nanoseconds)


def test_items_follow_precedence_order():
    """Test that items() walks years down to nanoseconds."""
    units = [unit for unit, _ in Breakdown.zero().items()]

    assert units == list(Unit)
    assert units[0] is Unit.YEARS
    assert units[-1] is Unit.NANOSECONDS
    assert len(units) == 10


def test_nonzero_and_bool():
    """Test nonzero() and truthiness."""
    parts = Breakdown(hours=1, microseconds=30)

    assert list(parts.nonzero()) == [(Unit.HOURS, 1), (Unit.MICROSECONDS, 30)]
    assert parts
    assert not Breakdown.zero()


def test_unit_suffixes():
    """Test that months and minutes share a suffix."""
    assert [unit.suffix for unit in Unit] == [
        "y", "m", "w", "d", "h", "m", "s", "ms", "us", "ns"
    ]
    assert Unit.MONTHS.suffix == Unit.MINUTES.suffix


def test_unit_select_accepts_flags_and_iterables():
    """Test normalizing unit selections."""
    assert Unit.select(Unit.DAYS | Unit.HOURS) == Unit.DAYS | Unit.HOURS
    assert Unit.select([Unit.DAYS, Unit.HOURS]) == Unit.DAYS | Unit.HOURS
    assert Unit.select({Unit.SECONDS}) == Unit.SECONDS
    assert Unit.select([]) == Unit(0)

    with pytest.raises(TypeError, match="must contain Unit members"):
        Unit.select(["hours"])  # type: ignore[list-item]


def test_filter_zeroes_unselected_units_without_carry():
    """Test that dropped units are discarded, not redistributed."""
    parts = Breakdown(hours=1, minutes=1, microseconds=30)

    filtered = parts.filter(Unit.MINUTES | Unit.MICROSECONDS)

    assert filtered == Breakdown(minutes=1, microseconds=30)


def test_filter_with_iterable_selection():
    """Test filtering with a list of units."""
    parts = Breakdown(days=1, hours=1, nanoseconds=30)

    assert parts.filter([Unit.DAYS]) == Breakdown(days=1)


def test_filter_everything_or_nothing():
    """Test the two extreme selections."""
    parts = Breakdown.from_times(40695010, 1_002_003)

    assert parts.filter(Unit.ALL) == parts
    assert parts.filter(Unit(0)) == Breakdown.zero()


def test_filter_is_idempotent():
    """Test that filtering twice with the same set changes nothing more."""
    parts = Breakdown.from_times(40695010, 1_002_003)
    selections = [
        Unit.YEARS,
        Unit.MONTHS | Unit.SECONDS,
        Unit.WEEKS | Unit.DAYS | Unit.NANOSECONDS,
        Unit.ALL,
        Unit(0),
    ]

    for units in selections:
        once = parts.filter(units)
        assert once.filter(units) == once


def test_truncate_counts_empty_slots_after_start():
    """Test that an empty seconds slot consumes the budget."""
    parts = Breakdown(hours=1, minutes=1, microseconds=30)

    assert parts.truncate(3) == Breakdown(hours=1, minutes=1)


def test_truncate_skips_leading_zeros():
    """Test that units before the first nonzero one are free."""
    parts = Breakdown(minutes=1, seconds=5, milliseconds=10)

    assert parts.truncate(2) == Breakdown(minutes=1, seconds=5)


def test_truncate_zero_limit():
    """Test that a zero limit clears everything from the first nonzero unit."""
    parts = Breakdown(days=1, hours=1)

    assert parts.truncate(0) == Breakdown.zero()
    assert Breakdown.zero().truncate(0) == Breakdown.zero()
    assert Breakdown.zero().truncate(5) == Breakdown.zero()


def test_truncate_large_limit_is_identity():
    """Test that a limit past the last unit keeps everything."""
    parts = Breakdown.from_times(40695010, 1_002_003)

    assert parts.truncate(10) == parts
    assert parts.truncate(100) == parts


def test_truncate_results_extend_each_other():
    """Test that each limit keeps a prefix of the next limit's result."""
    parts = Breakdown.from_times(40695010, 1_002_003)

    for limit in range(11):
        shorter = parts.truncate(limit)
        longer = parts.truncate(limit + 1)
        assert longer.truncate(limit) == shorter


def test_truncate_rejects_negative_limit():
    """Test that a negative limit is an error."""
    with pytest.raises(ValueError, match="limit must be >= 0"):
        Breakdown(seconds=1).truncate(-1)
