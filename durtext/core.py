import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import timedelta
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from durtext.breakdown import Breakdown, Unit
from durtext.codec import format_times, parse_to_times

if TYPE_CHECKING:
    from pydantic import GetCoreSchemaHandler
    from pydantic_core import CoreSchema

logger = logging.getLogger(__name__)

D = TypeVar("D")

Times = tuple[int, int]


class Adapter(ABC, Generic[D]):
    """Conversion contract between a duration type and (seconds, nanoseconds).

    Subclasses set ``target`` and implement ``as_times`` and ``from_times``;
    parsing comes for free on top of the shared text codec.
    """

    target: type[D]

    @abstractmethod
    def as_times(self, value: D) -> Times:
        """Return (whole seconds, subsecond nanoseconds) for ``value``."""
        pass

    @abstractmethod
    def from_times(self, seconds: int, nanoseconds: int) -> D:
        """Build a value of the target type from (seconds, nanoseconds)."""
        pass

    def parse(self, text: str, *, strict: bool = False) -> D:
        return self.from_times(*parse_to_times(text, strict=strict))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(target={self.target.__name__})"


_REGISTRY: dict[type, Adapter[Any]] = {}


def register_adapter(adapter: Adapter[Any]) -> Adapter[Any]:
    """Make ``adapter`` the converter for its target type and subclasses.

    Registering a second adapter for the same target replaces the first.
    """
    previous = _REGISTRY.get(adapter.target)
    if previous is not None and previous is not adapter:
        logger.debug("Replacing %r with %r", previous, adapter)
    _REGISTRY[adapter.target] = adapter
    logger.debug("Registered %r", adapter)
    return adapter


def adapter_for(type_: type[D]) -> Adapter[D]:
    """Return the adapter registered for ``type_`` or its nearest base class.

    Raises:
        TypeError: If no adapter covers ``type_``
    """
    for klass in getattr(type_, "__mro__", (type_,)):
        adapter = _REGISTRY.get(klass)
        if adapter is not None:
            return adapter
    name = getattr(type_, "__name__", type_)
    known = ", ".join(sorted(t.__name__ for t in _REGISTRY))
    raise TypeError(
        f"No duration adapter registered for {name!r}.\n"
        f"Registered types: {known}\n"
        f"Hint: Subclass durtext.Adapter and pass an instance to register_adapter()"
    )


class FancyDuration(Generic[D]):
    """A duration value paired with its human-readable text form.

    Wraps any value with a registered adapter. Formatting, filtering and
    truncation go through the value's (seconds, nanoseconds) pair and build a
    new value of the same type.

    Example:
        >>> from datetime import timedelta
        >>> str(FancyDuration(timedelta(seconds=185)))
        '3m 5s'
        >>> FancyDuration.parse("3m 5s").duration()
        datetime.timedelta(seconds=185)
    """

    def __init__(self, value: D, adapter: Adapter[D] | None = None):
        self.value: D = value
        self.adapter: Adapter[D] = (
            adapter if adapter is not None else adapter_for(type(value))
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FancyDuration):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"FancyDuration({self.value!r})"

    @classmethod
    def parse(
        cls,
        text: str,
        target: type[D] = timedelta,  # type: ignore[assignment]
        *,
        strict: bool = False,
    ) -> "FancyDuration[D]":
        """Parse ``text`` into a duration of type ``target``.

        Raises:
            DurationParseError: If the text is out of range, or malformed in
                strict mode
            DurationConversionError: If ``target`` cannot hold the result
        """
        adapter = adapter_for(target)
        return cls(adapter.parse(text, strict=strict), adapter)

    def duration(self) -> D:
        """Return the wrapped duration value."""
        return self.value

    def times(self) -> Times:
        return self.adapter.as_times(self.value)

    def breakdown(self) -> Breakdown:
        return Breakdown.from_times(*self.times())

    def format(self) -> str:
        """Padded text form, e.g. "3m 5s"."""
        return format_times(*self.times(), pad=True)

    def format_compact(self) -> str:
        """Compact text form, e.g. "3m5s"."""
        return format_times(*self.times(), pad=False)

    def filter(self, units: Unit | Iterable[Unit]) -> "FancyDuration[D]":
        """Keep only the selected units; the others are dropped, not carried."""
        return self._rebuild(self.breakdown().filter(units))

    def truncate(self, limit: int) -> "FancyDuration[D]":
        """Keep the ``limit`` most significant consecutive units.

        "1y 2m 3w 4d" truncated to 2 gives "1y 2m". Empty units inside the
        run still count, so "1h 1m 30us" truncated to 3 gives "1h 1m".
        """
        return self._rebuild(self.breakdown().truncate(limit))

    def _rebuild(self, breakdown: Breakdown) -> "FancyDuration[D]":
        value = self.adapter.from_times(*breakdown.as_times())
        return FancyDuration(value, self.adapter)

    def __str__(self) -> str:
        return self.format()

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: "GetCoreSchemaHandler"
    ) -> "CoreSchema":
        from durtext.serialization import fancy_duration_schema

        return fancy_duration_schema(source_type)


def fancy_duration(value: D) -> FancyDuration[D]:
    """Wrap ``value`` using its registered adapter."""
    return FancyDuration(value)


def parse_duration(
    text: str,
    target: type[D] = timedelta,  # type: ignore[assignment]
    *,
    strict: bool = False,
) -> D:
    """Parse ``text`` straight into a value of type ``target``.

    Example:
        >>> parse_duration("1d 2m 3s")
        datetime.timedelta(days=1, seconds=123)
    """
    return adapter_for(target).parse(text, strict=strict)


def format_duration(value: Any, *, compact: bool = False) -> str:
    """Format a raw duration value or a FancyDuration."""
    fancy = value if isinstance(value, FancyDuration) else FancyDuration(value)
    return fancy.format_compact() if compact else fancy.format()
