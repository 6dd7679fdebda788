"""Event bus for run observability.

A simple synchronous bus that carries driver events (trial completed, shrink
step adopted, ...) to whoever subscribed. This replaces a process-wide log
level toggle: the caller decides what to observe by passing a bus to
``run()``.
"""

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

import structlog

from quickverdict.contracts.events import (
    PropertyFalsified,
    RunFinished,
    ShrinkStepAdopted,
    TrialCompleted,
)
from quickverdict.core.logging import get_logger

T = TypeVar("T")


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Lets EventBus and NullEventBus share an interface without inheritance.
    """

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        """Subscribe a handler to an event type."""
        ...

    def emit(self, event: T) -> None:
        """Emit an event to all subscribers."""
        ...


class EventBus:
    """Synchronous event bus.

    Handlers run on the driver's thread in subscription order. Handler
    exceptions propagate to the caller of ``run()``.

    Example:
        bus = EventBus()
        bus.subscribe(ShrinkStepAdopted, lambda e: print(e.step, e.witness.describe()))
        report = run(prop, config, events=bus)
    """

    def __init__(self) -> None:
        self._subscribers: dict[type, list[Callable[[Any], None]]] = {}

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        self._subscribers.setdefault(event_type, []).append(handler)

    def emit(self, event: T) -> None:
        """Dispatch ``event`` to the handlers subscribed to its exact type.

        Events nobody subscribed to are ignored.
        """
        for handler in self._subscribers.get(type(event), []):
            handler(event)


class NullEventBus:
    """No-op bus used when the caller does not observe the run.

    Does NOT inherit from EventBus: subscribing here is silently ignored, so
    a caller that expects callbacks must pass a real EventBus.
    """

    def subscribe(self, event_type: type[T], handler: Callable[[T], None]) -> None:
        """No-op subscription - handler will never be called."""

    def emit(self, event: T) -> None:
        """No-op emission."""


class LoggingObserver:
    """Forwards driver events to structlog at each event's declared level.

    Example:
        bus = EventBus()
        LoggingObserver().attach(bus)
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger("quickverdict.run")

    def attach(self, bus: EventBusProtocol) -> None:
        bus.subscribe(TrialCompleted, self.on_trial)
        bus.subscribe(PropertyFalsified, self.on_falsified)
        bus.subscribe(ShrinkStepAdopted, self.on_shrink_step)
        bus.subscribe(RunFinished, self.on_finished)

    def on_trial(self, event: TrialCompleted) -> None:
        self._logger.log(
            event.level,
            "Trial completed",
            attempt=event.attempt,
            trial=event.trial,
            size=event.size,
            outcome=event.kind.value,
        )

    def on_falsified(self, event: PropertyFalsified) -> None:
        self._logger.log(
            event.level,
            "Property falsified, shrinking",
            trial=event.trial,
            witness=event.witness.as_dict(),
        )

    def on_shrink_step(self, event: ShrinkStepAdopted) -> None:
        self._logger.log(
            event.level,
            "Shrink step adopted",
            step=event.step,
            attempts=event.attempts,
            witness=event.witness.as_dict(),
        )

    def on_finished(self, event: RunFinished) -> None:
        report = event.report
        self._logger.log(
            event.level,
            "Run finished",
            status=report.status.value,
            trials=report.trials_run,
            discards=report.discards,
            shrink_steps=report.shrink_steps,
            seed=report.seed,
        )
