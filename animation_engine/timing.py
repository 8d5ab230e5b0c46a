"""
Duration value type used for every absolute and relative time in a timeline.

Stored as signed integer nanoseconds so that stage boundaries add up exactly.
"""
from datetime import timedelta
from functools import total_ordering
from typing import Union

from animation_engine.exceptions import TimingError

NANOS_PER_MICRO = 1_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_SECOND = 1_000_000_000


@total_ordering
class Duration:
    """Signed span of time with nanosecond resolution."""

    __slots__ = ("_nanos",)

    def __init__(self, nanos: int = 0):
        self._nanos = int(nanos)

    @classmethod
    def seconds(cls, value: float) -> 'Duration':
        return cls(round(value * NANOS_PER_SECOND))

    @classmethod
    def milliseconds(cls, value: float) -> 'Duration':
        return cls(round(value * NANOS_PER_MILLI))

    @classmethod
    def microseconds(cls, value: float) -> 'Duration':
        return cls(round(value * NANOS_PER_MICRO))

    @classmethod
    def nanoseconds(cls, value: int) -> 'Duration':
        return cls(value)

    @classmethod
    def from_timedelta(cls, value: timedelta) -> 'Duration':
        # timedelta is exact in microseconds; avoid total_seconds() float rounding
        micros = (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
        return cls(micros * NANOS_PER_MICRO)

    @classmethod
    def coerce(cls, value: 'TimeLike') -> 'Duration':
        """
        Convert a Duration, timedelta or number of seconds into a Duration.

        Raises:
            TimingError: If the value has none of those types
        """
        if isinstance(value, Duration):
            return value
        if isinstance(value, timedelta):
            return cls.from_timedelta(value)
        if isinstance(value, bool):
            raise TimingError(f"Cannot interpret {value!r} as a duration")
        if isinstance(value, (int, float)):
            return cls.seconds(value)
        raise TimingError(f"Cannot interpret {value!r} as a duration")

    @property
    def nanos(self) -> int:
        return self._nanos

    def total_seconds(self) -> float:
        return self._nanos / NANOS_PER_SECOND

    def total_milliseconds(self) -> float:
        return self._nanos / NANOS_PER_MILLI

    def to_timedelta(self) -> timedelta:
        """Convert to timedelta, truncating below microsecond resolution."""
        return timedelta(microseconds=self._nanos // NANOS_PER_MICRO)

    def __add__(self, other):
        if not isinstance(other, (Duration, timedelta)):
            return NotImplemented
        return Duration(self._nanos + Duration.coerce(other)._nanos)

    __radd__ = __add__

    def __sub__(self, other):
        if not isinstance(other, (Duration, timedelta)):
            return NotImplemented
        return Duration(self._nanos - Duration.coerce(other)._nanos)

    def __rsub__(self, other):
        if not isinstance(other, timedelta):
            return NotImplemented
        return Duration.coerce(other) - self

    def __neg__(self) -> 'Duration':
        return Duration(-self._nanos)

    def __abs__(self) -> 'Duration':
        return Duration(abs(self._nanos))

    def __mul__(self, factor):
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        return Duration(round(self._nanos * factor))

    __rmul__ = __mul__

    def __truediv__(self, other):
        # Duration / Duration is a plain ratio, used to normalise progress
        if isinstance(other, Duration):
            return self._nanos / other._nanos
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return Duration(round(self._nanos / other))
        return NotImplemented

    def __bool__(self) -> bool:
        return self._nanos != 0

    def __eq__(self, other) -> bool:
        if isinstance(other, (Duration, timedelta)):
            return self._nanos == Duration.coerce(other)._nanos
        return NotImplemented

    def __lt__(self, other) -> bool:
        if isinstance(other, (Duration, timedelta)):
            return self._nanos < Duration.coerce(other)._nanos
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._nanos)

    def __repr__(self) -> str:
        return f"Duration({self._nanos})"

    def __str__(self) -> str:
        return f"{self.total_seconds():.3f}s"


Duration.ZERO = Duration(0)

TimeLike = Union[Duration, timedelta, int, float]
