# src/quickverdict/testing.py
"""Raise-on-failure helpers for use inside test suites.

``run()`` returns a Report and never raises for a verdict. Test runners want
the opposite: a falsified property should fail the test with the minimal
witness in the message. ``check()`` and ``@quickcheck`` do that conversion.

Example:
    from quickverdict.testing import quickcheck

    @quickcheck(max_trials=500)
    def test_reverse_twice(xs: list[int]) -> bool:
        return list(reversed(list(reversed(xs)))) == xs
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable, Sequence
from typing import Any

from quickverdict.contracts.errors import GaveUp, PropertyFailed
from quickverdict.contracts.report import Report
from quickverdict.core.config import RunConfig
from quickverdict.core.events import EventBusProtocol
from quickverdict.engine.dispatch import bind
from quickverdict.engine.runner import run
from quickverdict.strategies.base import Strategy


def check(
    prop: Callable[..., Any],
    config: RunConfig | None = None,
    *,
    strategies: Sequence[Strategy[Any]] | None = None,
    events: EventBusProtocol | None = None,
    **overrides: Any,
) -> Report:
    """Run a property and raise unless it passed.

    Keyword overrides are RunConfig fields applied on top of ``config``.

    Returns:
        The PASSED report.

    Raises:
        PropertyFailed: If the property was falsified (an AssertionError).
        GaveUp: If too many inputs were discarded.
    """
    base = config if config is not None else RunConfig()
    if overrides:
        base = RunConfig(**{**base.model_dump(), **overrides})

    report = run(prop, base, strategies=strategies, events=events)
    if report.is_failed:
        raise PropertyFailed(report)
    if report.is_gave_up:
        raise GaveUp(report)
    return report


def quickcheck(
    *strategies: Strategy[Any],
    config: RunConfig | None = None,
    **overrides: Any,
) -> Callable[[Callable[..., Any]], Callable[[], None]]:
    """Decorator turning a property into a zero-argument test function.

    Strategies may be given positionally; otherwise they come from the
    property's annotations. The property is bound when decorated, so an
    unsupported arity or missing strategy fails at import time.
    """

    def decorator(fn: Callable[..., Any]) -> Callable[[], None]:
        testable = bind(fn, strategies or None)

        @functools.wraps(fn)
        def wrapper() -> None:
            check(testable, config, **overrides)

        # Test runners must not try to inject the property's parameters as fixtures
        wrapper.__signature__ = inspect.Signature()  # type: ignore[attr-defined]
        del wrapper.__wrapped__  # type: ignore[attr-defined]
        return wrapper

    return decorator
