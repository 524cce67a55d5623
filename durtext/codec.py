"""Text encoding and decoding of durations.

A duration is written as a sequence of ``<count><suffix>`` tokens in
precedence order, separated by whitespace (padded) or not at all (compact):

    y   years          (365 days)
    m   months         (30 days)
    w   weeks
    d   days
    h   hours
    m   minutes
    s   seconds
    ms  milliseconds
    us  microseconds
    ns  nanoseconds

Months and minutes share the ``m`` suffix. Tokens are read right to left and
``m`` means minutes until a coarser unit (h, d, w, y) or a first ``m`` has been
seen, after which it means months. "5y2d30m" is five years, two days and thirty
minutes; "5y30m2d" is five years, thirty months and two days.
"""

import logging
import re

from durtext.breakdown import Breakdown
from durtext.errors import DurationParseError
from durtext.util import (
    DAY,
    HOUR,
    MAX_SECONDS,
    MICROSECOND_NS,
    MILLISECOND_NS,
    MINUTE,
    MONTH,
    NANOSECOND,
    WEEK,
    YEAR,
)

logger = logging.getLogger(__name__)

TOKEN_PATTERN: re.Pattern[str] = re.compile(r"([0-9]+)([a-zA-Z]{1,2})\s*")

ZERO = "0"

# Suffixes that mark a coarser-than-minutes unit, length in seconds
_COARSE_SUFFIXES: dict[str, int] = {
    "h": HOUR,
    "d": DAY,
    "w": WEEK,
    "y": YEAR,
}

# Subsecond suffixes, length in nanoseconds
_SUBSECOND_SUFFIXES: dict[str, int] = {
    "ms": MILLISECOND_NS,
    "us": MICROSECOND_NS,
    "ns": NANOSECOND,
}


def format_breakdown(breakdown: Breakdown, *, pad: bool = True) -> str:
    """Render a breakdown as text, omitting zero units."""
    tokens = [f"{count}{unit.suffix}" for unit, count in breakdown.nonzero()]
    if not tokens:
        return ZERO
    return (" " if pad else "").join(tokens)


def format_times(seconds: int, nanoseconds: int, *, pad: bool = True) -> str:
    """Render a (seconds, nanoseconds) pair as text.

    Example:
        >>> format_times(185, 0)
        '3m 5s'
        >>> format_times(185, 0, pad=False)
        '3m5s'
    """
    if seconds == 0 and nanoseconds == 0:
        return ZERO
    return format_breakdown(Breakdown.from_times(seconds, nanoseconds), pad=pad)


def tokenize(text: str) -> list[tuple[str, str]]:
    """Return every (digits, suffix) token in order of appearance."""
    return [match.groups() for match in TOKEN_PATTERN.finditer(text)]


def _stray_text(text: str) -> str:
    """Return the parts of ``text`` the tokenizer does not consume."""
    return TOKEN_PATTERN.sub(" ", text).strip()


_MAX_DIGITS = len(str(MAX_SECONDS))


def _parse_count(digits: str, suffix: str, text: str) -> int:
    significant = digits.lstrip("0") or "0"
    # Longer runs cannot fit and may exceed int()'s digit limit
    count = int(significant) if len(significant) <= _MAX_DIGITS else None
    if count is None or count > MAX_SECONDS:
        raise DurationParseError(
            f"Duration token {digits}{suffix} is out of range.\n"
            f"Got a {len(significant)}-digit count, the largest supported "
            f"count is {MAX_SECONDS}\n"
            f"Input: {text!r}",
            text=text,
            token=f"{digits}{suffix}",
        )
    return count


def parse_to_times(text: str, *, strict: bool = False) -> tuple[int, int]:
    """Parse duration text into a (seconds, nanoseconds) pair.

    Text with no tokens parses to (0, 0). In the default lenient mode,
    anything the tokenizer does not recognise is skipped, as are tokens with
    unknown suffixes. With ``strict=True`` both raise instead, and only the
    literal "0" may stand in for an empty duration.

    The nanosecond total is not carried into seconds: "1500ms" parses to
    (0, 1_500_000_000).

    Raises:
        DurationParseError: If a count or the running total exceeds the
            unsigned 64-bit range, or on any strict-mode violation
    """
    tokens = tokenize(text)

    stray = _stray_text(text)
    if stray:
        if strict and not (not tokens and stray == ZERO):
            raise DurationParseError(
                f"Unrecognised text in duration {text!r}.\n"
                f"Got: {stray!r}\n"
                f"Hint: Durations are <count><unit> tokens such as '3m 5s'.\n"
                f"      Valid units: y, m, w, d, h, m, s, ms, us, ns",
                text=text,
            )
        if stray != ZERO:
            logger.debug("Ignoring stray text %r in duration %r", stray, text)
    elif strict and not tokens:
        raise DurationParseError(
            f"Empty duration {text!r}.\n"
            f"Hint: Use '0' for a zero duration",
            text=text,
        )

    seconds = 0
    nanoseconds = 0
    past_minutes = False

    # Right to left, so "m" is only read as months once a coarser unit is seen
    for digits, suffix in reversed(tokens):
        count = _parse_count(digits, suffix, text)

        if suffix in _SUBSECOND_SUFFIXES:
            nanoseconds += count * _SUBSECOND_SUFFIXES[suffix]
        elif suffix == "s":
            seconds += count
        elif suffix == "m":
            if past_minutes:
                seconds += count * MONTH
            else:
                past_minutes = True
                seconds += count * MINUTE
        elif suffix in _COARSE_SUFFIXES:
            past_minutes = True
            seconds += count * _COARSE_SUFFIXES[suffix]
        elif strict:
            raise DurationParseError(
                f"Unknown duration unit {suffix!r} in {text!r}.\n"
                f"Valid units: y, m, w, d, h, m, s, ms, us, ns",
                text=text,
                token=f"{digits}{suffix}",
            )
        else:
            logger.debug("Ignoring unknown unit %r in duration %r", suffix, text)
            continue

        if seconds > MAX_SECONDS or nanoseconds > MAX_SECONDS:
            raise DurationParseError(
                f"Duration {text!r} exceeds the supported range.\n"
                f"Overflow at token {digits}{suffix}",
                text=text,
                token=f"{digits}{suffix}",
            )

    return seconds, nanoseconds
