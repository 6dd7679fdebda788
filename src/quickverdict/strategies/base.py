# src/quickverdict/strategies/base.py
"""Strategy: the coupled generation + shrink capability for one type.

A strategy is the single place that knows how to:
- ``generate(source)``: draw a value of its type, scaled by ``source.size``
- ``shrink(value)``: list strictly simpler values of the same type, most
  reduced first, as a ShrinkSequence
- ``render(value)``: show a value in a report

Generation and shrinking are defined together on purpose. Every value
``generate`` can return MUST be accepted by ``shrink`` and by a property
expecting that type, and every shrink candidate must be a value ``generate``
could have produced. Subclasses implement ``generate`` and, when the type has
a notion of "simpler", ``candidates``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator

from quickverdict.contracts.errors import Discarded
from quickverdict.core.source import ValueSource
from quickverdict.strategies.shrinking import ShrinkSequence

# Draws a filtered strategy makes before discarding the trial
DEFAULT_FILTER_ATTEMPTS = 100


class Strategy[T](ABC):
    """Base class for generation capabilities."""

    @abstractmethod
    def generate(self, source: ValueSource) -> T:
        """Draw one value from ``source``."""
        ...

    def candidates(self, value: T) -> Iterator[T]:
        """Yield shrink candidates for ``value``, most reduced first.

        The default has none: such values are already minimal.
        """
        return iter(())

    def shrink(self, value: T) -> ShrinkSequence[T]:
        return ShrinkSequence(self.candidates(value))

    def render(self, value: T) -> str:
        return repr(value)

    def map[U](self, pack: Callable[[T], U], unpack: Callable[[U], T] | None = None) -> MappedStrategy[T, U]:
        """Transform generated values with ``pack``.

        Shrinking works through ``unpack``: a mapped value is unpacked, shrunk
        by this strategy and packed again. Without ``unpack`` mapped values do
        not shrink.
        """
        return MappedStrategy(self, pack, unpack)

    def filter(self, predicate: Callable[[T], bool]) -> FilteredStrategy[T]:
        """Keep only values for which ``predicate`` holds, both when generating and shrinking."""
        return FilteredStrategy(self, predicate)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class MappedStrategy[T, U](Strategy[U]):
    """Strategy producing ``pack(v)`` for values ``v`` of an inner strategy."""

    def __init__(
        self,
        inner: Strategy[T],
        pack: Callable[[T], U],
        unpack: Callable[[U], T] | None = None,
    ) -> None:
        self._inner = inner
        self._pack = pack
        self._unpack = unpack

    def generate(self, source: ValueSource) -> U:
        return self._pack(self._inner.generate(source))

    def candidates(self, value: U) -> Iterator[U]:
        if self._unpack is None:
            return
        for candidate in self._inner.shrink(self._unpack(value)):
            yield self._pack(candidate)

    def __repr__(self) -> str:
        return f"{self._inner!r}.map({getattr(self._pack, '__name__', self._pack)!s})"


class FilteredStrategy[T](Strategy[T]):
    """Strategy that rejects values failing a predicate.

    Generation redraws up to ``max_attempts`` times and then raises
    ``Discarded`` so the trial counts as a discard instead of looping.
    """

    def __init__(
        self,
        inner: Strategy[T],
        predicate: Callable[[T], bool],
        max_attempts: int = DEFAULT_FILTER_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self._inner = inner
        self._predicate = predicate
        self._max_attempts = max_attempts

    def generate(self, source: ValueSource) -> T:
        for _ in range(self._max_attempts):
            value = self._inner.generate(source)
            if self._predicate(value):
                return value
        raise Discarded(f"{self!r} found no acceptable value in {self._max_attempts} draws")

    def candidates(self, value: T) -> Iterator[T]:
        return (candidate for candidate in self._inner.shrink(value) if self._predicate(candidate))

    def render(self, value: T) -> str:
        return self._inner.render(value)

    def __repr__(self) -> str:
        return f"{self._inner!r}.filter({getattr(self._predicate, '__name__', self._predicate)!s})"

