# src/quickverdict/strategies/shrinking.py
"""Shrink sequences and the candidate schedules they are built from.

A ShrinkSequence is a pull-based, single-pass stream of candidates that are
strictly simpler than some origin value. Candidates come out most-reduced
first, because the driver adopts the first candidate that still fails.

Schedules:
- ``toward(value, target)``: binary search toward a target integer. Emits the
  target, then ``value - d`` for ``d = distance/2, distance/4, ..., 1``.
  O(log |value - target|) candidates, none repeated, never overshooting.
- ``removals(items, min_length)``: the empty sequence, then every aligned
  chunk of length ``L/2`` removed, then ``L/4``, ..., down to single elements.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator, Sequence

from quickverdict.contracts.errors import ShrinkExhausted

# Halvings toward zero a float shrink may emit; floats never reach a fixed point by halving
MAX_FLOAT_HALVINGS = 32


class ShrinkSequence[T]:
    """Lazy, finite, non-restartable sequence of shrink candidates.

    Each candidate is produced on demand and only once. Iterating a sequence a
    second time yields nothing: to start over, ask the strategy for a new
    sequence from the new origin.

    Example:
        sequence = strategy.shrink(value)
        while True:
            try:
                candidate = sequence.pull()
            except ShrinkExhausted:
                break
            ...
    """

    __slots__ = ("_candidates", "_exhausted", "_pulled")

    def __init__(self, candidates: Iterable[T]) -> None:
        self._candidates: Iterator[T] = iter(candidates)
        self._exhausted = False
        self._pulled = 0

    @classmethod
    def empty(cls) -> ShrinkSequence[T]:
        return cls(())

    @property
    def pulled(self) -> int:
        """Number of candidates produced so far."""
        return self._pulled

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def pull(self) -> T:
        """Produce the next candidate.

        Raises:
            ShrinkExhausted: When no candidates remain. Every later call raises too.
        """
        if self._exhausted:
            raise ShrinkExhausted()
        try:
            candidate = next(self._candidates)
        except StopIteration:
            self._exhausted = True
            raise ShrinkExhausted() from None
        self._pulled += 1
        return candidate

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        try:
            return self.pull()
        except ShrinkExhausted:
            raise StopIteration from None

    def map[U](self, transform: Callable[[T], U]) -> ShrinkSequence[U]:
        """Sequence of ``transform(c)`` for the remaining candidates ``c``."""
        return ShrinkSequence(transform(candidate) for candidate in self)

    def filter(self, predicate: Callable[[T], bool]) -> ShrinkSequence[T]:
        """Sequence of the remaining candidates accepted by ``predicate``."""
        return ShrinkSequence(candidate for candidate in self if predicate(candidate))


def _halve(distance: int) -> int:
    """Halve toward zero for either sign (``-7 -> -3``, ``7 -> 3``)."""
    return -(-distance // 2) if distance < 0 else distance // 2


def toward(value: int, target: int = 0) -> Iterator[int]:
    """Binary-search candidates from ``value`` toward ``target``.

    Yields the target first, then ``value - d`` for halving ``d``, ending at the
    immediate neighbour of ``value`` on the target side. Nothing for
    ``value == target``.

    >>> list(toward(100))
    [0, 50, 75, 88, 94, 97, 99]
    >>> list(toward(-5))
    [0, -3, -4]
    """
    if value == target:
        return
    yield target
    reduction = _halve(value - target)
    while reduction != 0:
        yield value - reduction
        reduction = _halve(reduction)


def toward_float(value: float) -> Iterator[float]:
    """Float candidates: zero, the mirror of a negative, the integral part, then halvings.

    NaN and infinities shrink straight to ``0.0``.
    """
    if value == 0.0:
        return
    yield 0.0
    if math.isnan(value) or math.isinf(value):
        return
    if value < 0:
        yield -value
    truncated = float(math.trunc(value))
    if truncated not in (value, 0.0):
        yield truncated
    reduction = value / 2
    for _ in range(MAX_FLOAT_HALVINGS):
        candidate = value - reduction
        if candidate == value:
            break
        if candidate != truncated:
            yield candidate
        reduction /= 2


def removals[T](items: Sequence[T], min_length: int = 0) -> Iterator[list[T]]:
    """Length-reducing candidates for a sequence.

    Yields the shortest permitted candidate first (empty, or the
    first ``min_length`` items), then removes aligned chunks of halving length:
    chunk ``L/2`` at offsets 0, L/2, ...; chunk ``L/4``; down to chunk 1.
    Candidates shorter than ``min_length`` are skipped.

    >>> list(removals([1, 2, 3, 4]))
    [[], [3, 4], [1, 2], [2, 3, 4], [1, 3, 4], [1, 2, 4], [1, 2, 3]]
    """
    length = len(items)
    if length <= min_length:
        return
    yield list(items[:min_length])

    chunk = length // 2
    while chunk > 0:
        if length - chunk >= min_length:
            for start in range(0, length - chunk + 1, chunk):
                yield [*items[:start], *items[start + chunk :]]
        chunk //= 2


def element_shrinks[T](items: Sequence[T], shrink: Callable[[T], ShrinkSequence[T]]) -> Iterator[list[T]]:
    """Shrink each element in place, position by position, others held fixed."""
    for position, item in enumerate(items):
        for candidate in shrink(item):
            replaced = list(items)
            replaced[position] = candidate
            yield replaced
