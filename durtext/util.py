"""Unit constants for durtext.

Time unit constants represent durations in seconds (coarse units) or in
nanoseconds (subsecond units). Months and years are fixed approximations:
a month is 30 days and a year is 365 days, with no calendar adjustment.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
MONTH = 2592000
YEAR = 31536000

# Subsecond unit constants (all values in nanoseconds)
NANOSECOND = 1
MICROSECOND_NS = 1_000
MILLISECOND_NS = 1_000_000
SECOND_NS = 1_000_000_000

# Largest value of the underlying unsigned 64-bit second counter
MAX_SECONDS = 2**64 - 1
