# src/quickverdict/strategies/numbers.py
"""Numeric and boolean strategies.

Integers and floats are drawn uniformly from a window around their shrink
target (zero, or the bound nearest zero) whose half-width is the current
size, intersected with any explicit bounds. Small sizes therefore produce
small values, and larger trials explore further out.

Shrinking is a binary search toward the target (see ``shrinking.toward``), so
an integer shrinks in O(log |n|) candidates without overshooting its sign.
"""

from __future__ import annotations

from collections.abc import Iterator

from quickverdict.contracts.errors import InvalidStrategyArguments
from quickverdict.core.source import ValueSource
from quickverdict.strategies.base import Strategy
from quickverdict.strategies.shrinking import toward, toward_float


def _nearest_zero[N: (int, float)](lo: N | None, hi: N | None, zero: N) -> N:
    """Value in [lo, hi] closest to zero."""
    if lo is not None and lo > zero:
        return lo
    if hi is not None and hi < zero:
        return hi
    return zero


class IntegerStrategy(Strategy[int]):
    """Integers, optionally bounded on either side.

    Unbounded integers are symmetric around zero with magnitude <= size.
    """

    def __init__(self, min_value: int | None = None, max_value: int | None = None) -> None:
        if min_value is not None and max_value is not None and min_value > max_value:
            raise InvalidStrategyArguments(f"integers(): min_value ({min_value}) > max_value ({max_value})")
        self._min = min_value
        self._max = max_value
        self._target = _nearest_zero(min_value, max_value, 0)

    @property
    def target(self) -> int:
        """The simplest value this strategy can produce."""
        return self._target

    def contains(self, value: int) -> bool:
        return (self._min is None or value >= self._min) and (self._max is None or value <= self._max)

    def generate(self, source: ValueSource) -> int:
        lo = self._target - source.size
        hi = self._target + source.size
        if self._min is not None:
            lo = max(lo, self._min)
        if self._max is not None:
            hi = min(hi, self._max)
        return source.next_bounded_int(lo, hi)

    def candidates(self, value: int) -> Iterator[int]:
        mirrored = -value
        for index, candidate in enumerate(toward(value, self._target)):
            yield candidate
            # A negative value's positive mirror is simpler and just as far from zero
            if index == 0 and value < 0 and self._target == 0 and self.contains(mirrored):
                yield mirrored

    def __repr__(self) -> str:
        return f"integers(min_value={self._min!r}, max_value={self._max!r})"


class FloatStrategy(Strategy[float]):
    """Finite floats, optionally bounded. Never generates NaN or infinities."""

    def __init__(self, min_value: float | None = None, max_value: float | None = None) -> None:
        if min_value is not None and max_value is not None and min_value > max_value:
            raise InvalidStrategyArguments(f"floats(): min_value ({min_value}) > max_value ({max_value})")
        self._min = min_value
        self._max = max_value
        self._target = _nearest_zero(min_value, max_value, 0.0)

    def contains(self, value: float) -> bool:
        return (self._min is None or value >= self._min) and (self._max is None or value <= self._max)

    def generate(self, source: ValueSource) -> float:
        lo = self._target - source.size
        hi = self._target + source.size
        if self._min is not None:
            lo = max(lo, self._min)
        if self._max is not None:
            hi = min(hi, self._max)
        return lo + source.next_unit_float() * (hi - lo)

    def candidates(self, value: float) -> Iterator[float]:
        for offset in toward_float(value - self._target):
            candidate = self._target + offset
            if candidate != value and self.contains(candidate):
                yield candidate

    def __repr__(self) -> str:
        return f"floats(min_value={self._min!r}, max_value={self._max!r})"


class BooleanStrategy(Strategy[bool]):
    """True or False with equal weight; True shrinks to False."""

    def generate(self, source: ValueSource) -> bool:
        return source.next_bool()

    def candidates(self, value: bool) -> Iterator[bool]:
        if value:
            yield False

    def __repr__(self) -> str:
        return "booleans()"


def integers(min_value: int | None = None, max_value: int | None = None) -> IntegerStrategy:
    """Integers in [min_value, max_value]; either bound may be omitted."""
    return IntegerStrategy(min_value, max_value)


def floats(min_value: float | None = None, max_value: float | None = None) -> FloatStrategy:
    return FloatStrategy(min_value, max_value)


def booleans() -> BooleanStrategy:
    return BooleanStrategy()
