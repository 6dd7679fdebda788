# src/quickverdict/strategies/variants.py
"""Strategies for values with alternative shapes: optionals, results, fixed choices."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from quickverdict.contracts.errors import InvalidStrategyArguments
from quickverdict.contracts.outcomes import Err, Ok
from quickverdict.core.source import ValueSource
from quickverdict.strategies.base import Strategy
from quickverdict.strategies.shrinking import toward


class OptionalStrategy[T](Strategy[T | None]):
    """``None`` or a value of the inner strategy.

    A weighted choice biases toward "present" so both branches are exercised
    while most trials still reach the inner value. Shrinking tries ``None``
    first, then the inner value's own candidates.
    """

    def __init__(self, inner: Strategy[T], *, present_weight: float = 3.0, absent_weight: float = 1.0) -> None:
        if present_weight < 0 or absent_weight < 0 or present_weight + absent_weight <= 0:
            raise InvalidStrategyArguments(
                f"optionals(): weights must be non-negative and not both zero "
                f"(present={present_weight}, absent={absent_weight})"
            )
        self._inner = inner
        self._weights = (absent_weight, present_weight)

    def generate(self, source: ValueSource) -> T | None:
        if source.choose(self._weights) == 0:
            return None
        return self._inner.generate(source)

    def candidates(self, value: T | None) -> Iterator[T | None]:
        if value is None:
            return
        yield None
        yield from self._inner.shrink(value)

    def render(self, value: T | None) -> str:
        if value is None:
            return "None"
        return self._inner.render(value)

    def __repr__(self) -> str:
        return f"optionals({self._inner!r})"


class ResultStrategy[T, E](Strategy[Ok[T] | Err[E]]):
    """Result-like values: ``Ok(value)`` or ``Err(error)``.

    Each variant shrinks within itself; a value never flips to the other
    variant while shrinking.
    """

    def __init__(self, ok: Strategy[T], err: Strategy[E], *, ok_weight: float = 1.0, err_weight: float = 1.0) -> None:
        if ok_weight < 0 or err_weight < 0 or ok_weight + err_weight <= 0:
            raise InvalidStrategyArguments(
                f"results(): weights must be non-negative and not both zero (ok={ok_weight}, err={err_weight})"
            )
        self._ok = ok
        self._err = err
        self._weights = (ok_weight, err_weight)

    def generate(self, source: ValueSource) -> Ok[T] | Err[E]:
        if source.choose(self._weights) == 0:
            return Ok(self._ok.generate(source))
        return Err(self._err.generate(source))

    def candidates(self, value: Ok[T] | Err[E]) -> Iterator[Ok[T] | Err[E]]:
        match value:
            case Ok(inner):
                for candidate in self._ok.shrink(inner):
                    yield Ok(candidate)
            case Err(inner):
                for candidate in self._err.shrink(inner):
                    yield Err(candidate)
            case _:
                raise TypeError(f"results() cannot shrink {value!r}: expected Ok or Err")

    def render(self, value: Ok[T] | Err[E]) -> str:
        match value:
            case Ok(inner):
                return f"Ok({self._ok.render(inner)})"
            case Err(inner):
                return f"Err({self._err.render(inner)})"
        return repr(value)

    def __repr__(self) -> str:
        return f"results({self._ok!r}, {self._err!r})"


class JustStrategy[T](Strategy[T]):
    """Always produces the same value; nothing to shrink."""

    def __init__(self, value: T) -> None:
        self._value = value

    def generate(self, source: ValueSource) -> T:
        return self._value

    def __repr__(self) -> str:
        return f"just({self._value!r})"


class SampledFromStrategy[T](Strategy[T]):
    """One of a fixed sequence, chosen with equal weight.

    Earlier entries count as simpler: a value shrinks toward index 0 with the
    integer schedule over its position.
    """

    def __init__(self, values: Sequence[T]) -> None:
        if len(values) == 0:
            raise InvalidStrategyArguments("sampled_from() needs at least one value")
        self._values = tuple(values)

    def generate(self, source: ValueSource) -> T:
        return self._values[source.next_bounded_int(0, len(self._values) - 1)]

    def candidates(self, value: T) -> Iterator[T]:
        try:
            position = self._values.index(value)
        except ValueError:
            return
        for index in toward(position, 0):
            yield self._values[index]

    def __repr__(self) -> str:
        return f"sampled_from({list(self._values)!r})"


def optionals[T](inner: Strategy[T], *, present_weight: float = 3.0, absent_weight: float = 1.0) -> OptionalStrategy[T]:
    return OptionalStrategy(inner, present_weight=present_weight, absent_weight=absent_weight)


def results[T, E](ok: Strategy[T], err: Strategy[E]) -> ResultStrategy[T, E]:
    return ResultStrategy(ok, err)


def just[T](value: T) -> JustStrategy[T]:
    return JustStrategy(value)


def sampled_from[T](values: Sequence[T]) -> SampledFromStrategy[T]:
    return SampledFromStrategy(values)
