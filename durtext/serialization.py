"""String serialization for durations, including pydantic integration.

The wire form of a duration is its padded text, e.g. ``"3m 5s"``; a zero
duration is ``"0"``. Any string the text codec accepts deserializes.

Example:
    >>> from datetime import timedelta
    >>> from pydantic import BaseModel
    >>> from durtext import FancyDuration
    >>>
    >>> class Job(BaseModel):
    ...     timeout: FancyDuration[timedelta]
    >>>
    >>> Job.model_validate_json('{"timeout":"3m 5s"}').timeout.duration()
    datetime.timedelta(seconds=185)
    >>> Job(timeout="3m5s").model_dump_json()
    '{"timeout":"3m 5s"}'
"""

from datetime import timedelta
from typing import Any, TypeVar, get_args

from pydantic_core import CoreSchema, core_schema

from durtext.core import Adapter, FancyDuration, adapter_for, format_duration


def serialize(value: Any) -> str:
    """Return the padded text form of a FancyDuration or raw duration value."""
    return format_duration(value)


def deserialize(
    text: str, target: type = timedelta, *, strict: bool = False
) -> FancyDuration[Any]:
    """Parse ``text`` into a FancyDuration wrapping a ``target`` value."""
    return FancyDuration.parse(text, target, strict=strict)


def _target_adapter(source_type: Any) -> Adapter[Any]:
    args = get_args(source_type)
    target = args[0] if args else timedelta
    if isinstance(target, TypeVar):
        target = timedelta
    return adapter_for(target)


def fancy_duration_schema(source_type: Any) -> CoreSchema:
    """Build the pydantic core schema for ``FancyDuration[T]``.

    Validation accepts duration text, a raw ``T`` value, or a FancyDuration of
    any registered type (converted to ``T``). JSON input must be a string.
    Serialization always produces the padded text.
    """
    adapter = _target_adapter(source_type)

    def from_text(text: str) -> FancyDuration[Any]:
        return FancyDuration(adapter.parse(text), adapter)

    def from_python(value: Any) -> FancyDuration[Any]:
        if isinstance(value, str):
            return from_text(value)
        if isinstance(value, FancyDuration):
            if isinstance(value.value, adapter.target):
                return value
            return FancyDuration(adapter.from_times(*value.times()), adapter)
        if isinstance(value, adapter.target):
            return FancyDuration(value, adapter)
        raise ValueError(
            f"Expected duration text or {adapter.target.__name__}, "
            f"got {type(value).__name__}: {value!r}"
        )

    return core_schema.json_or_python_schema(
        json_schema=core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(from_text),
            ]
        ),
        python_schema=core_schema.no_info_plain_validator_function(from_python),
        serialization=core_schema.plain_serializer_function_ser_schema(
            serialize, return_schema=core_schema.str_schema()
        ),
    )
