"""Exceptions raised by durtext.

Both errors subclass ValueError so callers that already guard duration
handling with ``except ValueError`` keep working.
"""


class DurationParseError(ValueError):
    """Raised when text cannot be interpreted as a duration.

    Attributes:
        text: The full input that was being parsed
        token: The offending token, or None when the input as a whole is invalid
    """

    def __init__(self, message: str, *, text: str, token: str | None = None):
        super().__init__(message)
        self.text: str = text
        self.token: str | None = token


class DurationConversionError(ValueError):
    """Raised when a value cannot be converted to or from (seconds, nanoseconds)."""
