# src/quickverdict/strategies/collections.py
"""Sequence and product strategies: lists, text, characters, tuples.

Lists draw a length uniformly from [min_size, size] (clamped to max_size) and
then each element independently. Shrinking is two-phase:

1. Length: the shortest permitted list, then aligned chunk removals of
   halving length (L/2, L/4, ..., 1). A length-reducible counterexample is
   found in logarithmically many steps rather than one element at a time.
2. Elements: each position shrunk with its element strategy, all other
   positions held fixed, in position order.

Because the driver restarts from every adopted candidate, phase 2 is only
reached once no length reduction still fails the property.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Any

from quickverdict.contracts.errors import InvalidStrategyArguments
from quickverdict.core.source import ValueSource
from quickverdict.strategies.base import MappedStrategy, Strategy
from quickverdict.strategies.shrinking import element_shrinks, removals, toward

# Code point every character shrinks toward
CHARACTER_ZERO_POINT = ord("a")

_SURROGATES = range(0xD800, 0xE000)

# Alphabets for character generation, with their relative weights
_LOWERCASE = (ord("a"), ord("z"))
_PRINTABLE_ASCII = (0x20, 0x7E)
_BASIC_PLANE = (0x00, 0xFFFF)
_ALPHABET_WEIGHTS = (6.0, 3.0, 1.0)


class ListStrategy[T](Strategy[list[T]]):
    """Lists of independently generated elements."""

    def __init__(self, elements: Strategy[T], min_size: int = 0, max_size: int | None = None) -> None:
        if min_size < 0:
            raise InvalidStrategyArguments(f"lists(): min_size must be non-negative, got {min_size}")
        if max_size is not None and max_size < min_size:
            raise InvalidStrategyArguments(f"lists(): max_size ({max_size}) < min_size ({min_size})")
        self._elements = elements
        self._min_size = min_size
        self._max_size = max_size

    @property
    def elements(self) -> Strategy[T]:
        return self._elements

    def generate(self, source: ValueSource) -> list[T]:
        upper = max(self._min_size, source.size)
        if self._max_size is not None:
            upper = min(upper, self._max_size)
        length = source.next_bounded_int(self._min_size, upper)
        return [self._elements.generate(source) for _ in range(length)]

    def candidates(self, value: list[T]) -> Iterator[list[T]]:
        yield from removals(value, self._min_size)
        yield from element_shrinks(value, self._elements.shrink)

    def render(self, value: list[T]) -> str:
        return "[" + ", ".join(self._elements.render(item) for item in value) + "]"

    def __repr__(self) -> str:
        return f"lists({self._elements!r}, min_size={self._min_size}, max_size={self._max_size!r})"


class CharacterStrategy(Strategy[str]):
    """Single characters, mostly lowercase letters and printable ASCII.

    Shrinks by code point toward ``'a'``. Surrogate code points are never
    generated and never offered as candidates.
    """

    def generate(self, source: ValueSource) -> str:
        lo, hi = (_LOWERCASE, _PRINTABLE_ASCII, _BASIC_PLANE)[source.choose(_ALPHABET_WEIGHTS)]
        codepoint = source.next_bounded_int(lo, hi)
        if codepoint in _SURROGATES:
            codepoint = CHARACTER_ZERO_POINT
        return chr(codepoint)

    def candidates(self, value: str) -> Iterator[str]:
        for codepoint in toward(ord(value), CHARACTER_ZERO_POINT):
            if codepoint not in _SURROGATES:
                yield chr(codepoint)

    def __repr__(self) -> str:
        return "characters()"


class TupleStrategy(Strategy[tuple[Any, ...]]):
    """Fixed-length tuples, one strategy per component.

    Shrinks one component at a time, siblings held fixed, in declared order.
    """

    def __init__(self, *components: Strategy[Any]) -> None:
        self._components = components

    @property
    def components(self) -> tuple[Strategy[Any], ...]:
        return self._components

    def generate(self, source: ValueSource) -> tuple[Any, ...]:
        return tuple(component.generate(source) for component in self._components)

    def candidates(self, value: tuple[Any, ...]) -> Iterator[tuple[Any, ...]]:
        for position, component in enumerate(self._components):
            for candidate in component.shrink(value[position]):
                yield (*value[:position], candidate, *value[position + 1 :])

    def render(self, value: tuple[Any, ...]) -> str:
        shown = [component.render(item) for component, item in zip(self._components, value, strict=True)]
        if len(shown) == 1:
            return f"({shown[0]},)"
        return "(" + ", ".join(shown) + ")"

    def __repr__(self) -> str:
        return f"tuples({', '.join(repr(c) for c in self._components)})"


def _join(chars: Sequence[str]) -> str:
    return "".join(chars)


def lists[T](elements: Strategy[T], *, min_size: int = 0, max_size: int | None = None) -> ListStrategy[T]:
    """Lists of ``elements`` with length in [min_size, max(min_size, size)], capped at max_size."""
    return ListStrategy(elements, min_size=min_size, max_size=max_size)


def characters() -> CharacterStrategy:
    return CharacterStrategy()


def text(
    alphabet: Strategy[str] | None = None, *, min_size: int = 0, max_size: int | None = None
) -> MappedStrategy[list[str], str]:
    """Strings, generated and shrunk as lists of characters."""
    chars = alphabet if alphabet is not None else CharacterStrategy()
    return ListStrategy(chars, min_size=min_size, max_size=max_size).map(_join, list)


def tuples(*components: Strategy[Any]) -> TupleStrategy:
    return TupleStrategy(*components)
