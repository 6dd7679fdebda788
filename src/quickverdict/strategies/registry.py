# src/quickverdict/strategies/registry.py
"""Type-indexed strategy lookup.

Maps a type annotation to the strategy that generates and shrinks values of
that type. Built-in scalars map directly; generic containers are resolved
recursively from their arguments:

    from_type(int)                     -> integers()
    from_type(list[tuple[int, str]])   -> lists(tuples(integers(), text()))
    from_type(int | None)              -> optionals(integers())
    from_type(Ok[int] | Err[str])      -> results(integers(), text())

User types are added with ``register()``; a registered factory receives the
strategies already resolved for the annotation's type arguments.
"""

from __future__ import annotations

import types
from collections.abc import Callable, Sequence
from typing import Any, Union, get_args, get_origin

from quickverdict.contracts.errors import MissingStrategy
from quickverdict.contracts.outcomes import Err, Ok
from quickverdict.strategies.base import Strategy
from quickverdict.strategies.collections import lists, text, tuples
from quickverdict.strategies.numbers import booleans, floats, integers
from quickverdict.strategies.variants import just, optionals, results

StrategyFactory = Callable[[Sequence[Strategy[Any]]], Strategy[Any]]


def _scalar(build: Callable[[], Strategy[Any]]) -> StrategyFactory:
    def factory(arguments: Sequence[Strategy[Any]]) -> Strategy[Any]:
        return build()

    return factory


def _list_factory(arguments: Sequence[Strategy[Any]]) -> Strategy[Any]:
    (elements,) = arguments
    return lists(elements)


class StrategyRegistry:
    """Registry of strategy factories keyed by type.

    Example:
        registry = StrategyRegistry()
        registry.register(Point, lambda _args: tuples(integers(), integers()).map(Point._make, tuple))
        strategy = registry.resolve(list[Point])
    """

    def __init__(self) -> None:
        self._factories: dict[Any, StrategyFactory] = {
            bool: _scalar(booleans),
            int: _scalar(integers),
            float: _scalar(floats),
            str: _scalar(text),
            type(None): _scalar(lambda: just(None)),
            list: _list_factory,
        }

    def register(self, tp: Any, factory: StrategyFactory) -> None:
        """Register (or replace) the factory used for ``tp``."""
        self._factories[tp] = factory

    def is_registered(self, tp: Any) -> bool:
        return tp in self._factories

    def resolve(self, annotation: Any, parameter: str = "<value>") -> Strategy[Any]:
        """Return a strategy for ``annotation``.

        Args:
            annotation: A type or parameterized generic alias.
            parameter: Name reported in the error when nothing matches.

        Raises:
            MissingStrategy: If no strategy can be built for the annotation.
        """
        if isinstance(annotation, Strategy):
            return annotation

        origin = get_origin(annotation)
        arguments = get_args(annotation)

        if origin is Union or origin is types.UnionType:
            return self._resolve_union(annotation, arguments, parameter)

        if origin is tuple:
            if len(arguments) == 2 and arguments[1] is Ellipsis:
                return lists(self.resolve(arguments[0], parameter)).map(tuple, list)
            return tuples(*(self.resolve(argument, parameter) for argument in arguments))

        key = origin if origin is not None else annotation
        factory = self._factories.get(key)
        if factory is None or (key is list and not arguments):
            raise MissingStrategy(parameter, annotation)
        return factory([self.resolve(argument, parameter) for argument in arguments])

    def _resolve_union(self, annotation: Any, arguments: tuple[Any, ...], parameter: str) -> Strategy[Any]:
        present = [argument for argument in arguments if argument is not type(None)]

        if len(present) == 2:
            by_origin = {get_origin(argument) or argument: argument for argument in present}
            if set(by_origin) == {Ok, Err}:
                ok_type = get_args(by_origin[Ok])
                err_type = get_args(by_origin[Err])
                if len(ok_type) == 1 and len(err_type) == 1:
                    ok = self.resolve(ok_type[0], parameter)
                    err = self.resolve(err_type[0], parameter)
                    strategy: Strategy[Any] = results(ok, err)
                    return optionals(strategy) if len(present) != len(arguments) else strategy

        if len(present) == 1 and len(arguments) == 2:
            return optionals(self.resolve(present[0], parameter))

        raise MissingStrategy(parameter, annotation)


default_registry = StrategyRegistry()


def from_type(annotation: Any) -> Strategy[Any]:
    """Resolve ``annotation`` against the default registry."""
    return default_registry.resolve(annotation)


def register(tp: Any, factory: StrategyFactory) -> None:
    """Register a strategy factory for ``tp`` in the default registry."""
    default_registry.register(tp, factory)
