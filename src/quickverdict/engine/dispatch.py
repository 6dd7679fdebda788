# src/quickverdict/engine/dispatch.py
"""Arity dispatch: adapt a property of 0..3 arguments to one uniform interface.

Every supported arity is a variant of ``Testable`` that binds a tuple of
per-position strategies and knows how to call the property with exactly that
many arguments. The driver only ever sees the uniform operations:

- ``check(source)``: generate one argument per position, invoke, classify
- ``evaluate(witness)``: invoke on concrete arguments (used while shrinking)
- ``shrink_component(witness, i)``: shrink sequence for argument ``i``
- ``with_component(witness, i, value)``: new witness with argument ``i`` replaced

Supporting a larger arity means adding one variant class and one entry in
``ARITY_VARIANTS``. Nothing else in the engine changes.

Classification of one invocation:
    True / None              -> PASS
    False                    -> FAIL(witness)
    AssertionError raised    -> FAIL(witness), message kept
    DISCARD / Discarded      -> DISCARD (precondition not met)
    anything else returned   -> InvalidPropertyResult
    any other exception      -> propagates to the caller
"""

from __future__ import annotations

import copy
import inspect
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import Any, ClassVar

from quickverdict.contracts.errors import Discarded, InvalidPropertyResult, InvalidStrategyArguments, MissingStrategy, UnsupportedArity
from quickverdict.contracts.outcomes import DISCARD, Outcome, Witness
from quickverdict.core.source import ValueSource
from quickverdict.strategies.base import Strategy
from quickverdict.strategies.registry import StrategyRegistry, default_registry
from quickverdict.strategies.shrinking import ShrinkSequence


def classify(result: object, witness: Witness) -> Outcome:
    """Map a property's return value to an Outcome."""
    if result is DISCARD:
        return Outcome.discarded(witness)
    if result is True or result is None:
        return Outcome.passed(witness)
    if result is False:
        return Outcome.failed(witness)
    raise InvalidPropertyResult(result)


class Testable(ABC):
    """A property bound to one strategy per argument.

    Subclasses fix the arity and implement ``invoke``. Calling a Testable
    calls the underlying function, so decorated properties stay usable as
    plain functions.
    """

    # Not a pytest test class, despite the name
    __test__ = False

    arity: ClassVar[int]

    def __init__(
        self,
        fn: Callable[..., Any],
        strategies: Sequence[Strategy[Any]],
        names: Sequence[str] | None = None,
    ) -> None:
        if len(strategies) != self.arity:
            raise InvalidStrategyArguments(
                f"{type(self).__name__} takes {self.arity} strategies, got {len(strategies)}"
            )
        if names is None:
            names = [f"arg{position}" for position in range(self.arity)]
        if len(names) != self.arity:
            raise InvalidStrategyArguments(f"{type(self).__name__} takes {self.arity} names, got {len(names)}")
        self._fn = fn
        self._strategies = tuple(strategies)
        self._names = tuple(names)

    @property
    def fn(self) -> Callable[..., Any]:
        return self._fn

    @property
    def name(self) -> str:
        return getattr(self._fn, "__qualname__", repr(self._fn))

    @property
    def strategies(self) -> tuple[Strategy[Any], ...]:
        return self._strategies

    @property
    def names(self) -> tuple[str, ...]:
        return self._names

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self._fn(*args, **kwargs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name}, strategies={list(self._strategies)!r})"

    @abstractmethod
    def invoke(self, values: tuple[Any, ...]) -> object:
        """Call the property with exactly ``arity`` positional arguments."""
        ...

    def witness(self, values: tuple[Any, ...]) -> Witness:
        rendered = tuple(strategy.render(value) for strategy, value in zip(self._strategies, values, strict=True))
        return Witness(values=values, names=self._names, rendered=rendered)

    def generate(self, source: ValueSource) -> Witness:
        """Draw one value per argument, in parameter order."""
        return self.witness(tuple(strategy.generate(source) for strategy in self._strategies))

    def evaluate(self, witness: Witness) -> Outcome:
        """Invoke the property on concrete arguments and classify the result.

        The property gets a deep copy of the witness values, so mutating an
        argument never changes the recorded witness.
        """
        try:
            result = self.invoke(copy.deepcopy(witness.values))
        except Discarded:
            return Outcome.discarded(witness)
        except AssertionError as exc:
            return Outcome.failed(witness, message=str(exc) or None)
        return classify(result, witness)

    def check(self, source: ValueSource) -> Outcome:
        """Generate fresh arguments from ``source`` and evaluate them."""
        try:
            witness = self.generate(source)
        except Discarded:
            return Outcome.discarded()
        return self.evaluate(witness)

    def shrink_component(self, witness: Witness, position: int) -> ShrinkSequence[Any]:
        return self._strategies[position].shrink(witness.values[position])

    def with_component(self, witness: Witness, position: int, value: Any) -> Witness:
        return witness.replace(position, value, self._strategies[position].render(value))


class Nullary(Testable):
    arity = 0

    def invoke(self, values: tuple[Any, ...]) -> object:
        return self._fn()


class Unary(Testable):
    arity = 1

    def invoke(self, values: tuple[Any, ...]) -> object:
        (a,) = values
        return self._fn(a)


class Binary(Testable):
    arity = 2

    def invoke(self, values: tuple[Any, ...]) -> object:
        a, b = values
        return self._fn(a, b)


class Ternary(Testable):
    arity = 3

    def invoke(self, values: tuple[Any, ...]) -> object:
        a, b, c = values
        return self._fn(a, b, c)


ARITY_VARIANTS: dict[int, type[Testable]] = {
    Nullary.arity: Nullary,
    Unary.arity: Unary,
    Binary.arity: Binary,
    Ternary.arity: Ternary,
}


def _generated_parameters(fn: Callable[..., Any]) -> list[inspect.Parameter]:
    """Positional parameters without defaults; these receive generated values."""
    signature = inspect.signature(fn, eval_str=True)
    return [
        parameter
        for parameter in signature.parameters.values()
        if parameter.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
        and parameter.default is inspect.Parameter.empty
    ]


def bind(
    prop: Callable[..., Any],
    strategies: Sequence[Strategy[Any]] | None = None,
    *,
    registry: StrategyRegistry | None = None,
) -> Testable:
    """Bind a property to its argument strategies.

    Args:
        prop: The property function, or an already bound Testable.
        strategies: One strategy per generated parameter. When omitted, each
            parameter's annotation is resolved through ``registry``.
        registry: Registry for annotation lookup (default: the module registry).

    Raises:
        UnsupportedArity: If the property takes an arity with no variant.
        MissingStrategy: If a parameter has no usable annotation.
        InvalidStrategyArguments: If the strategy count does not match the parameters.
    """
    if isinstance(prop, Testable):
        if strategies is None:
            return prop
        prop = prop.fn

    parameters = _generated_parameters(prop)
    variant = ARITY_VARIANTS.get(len(parameters))
    if variant is None:
        raise UnsupportedArity(len(parameters), tuple(sorted(ARITY_VARIANTS)))

    names = [parameter.name for parameter in parameters]
    if strategies is None:
        lookup = registry if registry is not None else default_registry
        resolved: list[Strategy[Any]] = []
        for parameter in parameters:
            if parameter.annotation is inspect.Parameter.empty:
                raise MissingStrategy(parameter.name)
            resolved.append(lookup.resolve(parameter.annotation, parameter.name))
        strategies = resolved
    elif len(strategies) != len(parameters):
        raise InvalidStrategyArguments(
            f"{getattr(prop, '__qualname__', prop)!s} takes {len(parameters)} generated arguments "
            f"({', '.join(names) or 'none'}), got {len(strategies)} strategies"
        )

    return variant(prop, strategies, names)


def for_all(*strategies: Strategy[Any]) -> Callable[[Callable[..., Any]], Testable]:
    """Decorator binding a property to explicit strategies, one per argument.

    Example:
        @for_all(integers(0, 100))
        def never_five(x: int) -> bool:
            return x != 5
    """

    def decorator(fn: Callable[..., Any]) -> Testable:
        return bind(fn, strategies)

    return decorator


def assume(condition: bool) -> None:
    """Discard the current arguments unless ``condition`` holds."""
    if not condition:
        raise Discarded("assumption not met")


def implies(precondition: bool, result: bool | Callable[[], bool]) -> object:
    """Return ``result`` when ``precondition`` holds, otherwise DISCARD.

    ``result`` may be a zero-argument callable, evaluated only when the
    precondition holds.
    """
    if not precondition:
        return DISCARD
    if callable(result):
        return result()
    return result
