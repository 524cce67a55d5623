"""Built-in duration adapters.

Importing this package registers adapters for :class:`datetime.timedelta`,
:class:`~durtext.adapters.stdlib.Nanoseconds` and
:class:`dateutil.relativedelta.relativedelta`. Other types can be supported by
subclassing :class:`durtext.core.Adapter` and calling
:func:`durtext.core.register_adapter`.
"""

from durtext.adapters.relative import RelativedeltaAdapter
from durtext.adapters.stdlib import Nanoseconds, NanosecondsAdapter, TimedeltaAdapter
from durtext.core import register_adapter

register_adapter(TimedeltaAdapter())
register_adapter(NanosecondsAdapter())
register_adapter(RelativedeltaAdapter())

__all__ = [
    "Nanoseconds",
    "NanosecondsAdapter",
    "RelativedeltaAdapter",
    "TimedeltaAdapter",
]
