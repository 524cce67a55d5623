from importlib.resources import files

from .breakdown import Breakdown, Unit
from .codec import format_times, parse_to_times, tokenize
from .core import (
    Adapter,
    FancyDuration,
    adapter_for,
    fancy_duration,
    format_duration,
    parse_duration,
    register_adapter,
)
from .adapters import Nanoseconds
from .errors import DurationConversionError, DurationParseError
from .serialization import deserialize, serialize

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "FancyDuration",
    "Breakdown",
    "Unit",
    "Adapter",
    "Nanoseconds",
    "register_adapter",
    "adapter_for",
    "fancy_duration",
    "parse_duration",
    "format_duration",
    "format_times",
    "parse_to_times",
    "tokenize",
    "serialize",
    "deserialize",
    "DurationParseError",
    "DurationConversionError",
    "docs",
]
