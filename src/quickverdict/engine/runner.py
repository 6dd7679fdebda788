# src/quickverdict/engine/runner.py
"""Driver: trial loop, discard accounting and shrink search.

State machine:

    INIT -> RUNNING -> PASSED
                    -> GIVEN_UP
                    -> SHRINK_SEARCH -> FAILED

The trial loop grows the size magnitude per attempt, hands the ValueSource to
the dispatcher, and counts passes and discards. The first failure switches to
the shrink search:

1. For each argument position in order, pull candidates from that
   component's shrink sequence and re-evaluate the property with only that
   component replaced. No values are regenerated.
2. The first candidate that still fails is adopted. The rest of the sequence
   is dropped and the search restarts at position 0 from the new witness.
3. When every position's sequence is exhausted without an adoption, the
   current witness is locally minimal.

Restarting from scratch after each adoption finds a local, not global,
minimum. Exceptions raised by the property (other than AssertionError and
Discarded) propagate out of ``run()`` in either phase.
"""

from __future__ import annotations

import secrets
from collections.abc import Callable, Sequence
from typing import Any

from quickverdict.contracts.enums import OutcomeKind, RunnerState
from quickverdict.contracts.errors import ShrinkExhausted
from quickverdict.contracts.events import PropertyFalsified, RunFinished, ShrinkStepAdopted, TrialCompleted
from quickverdict.contracts.outcomes import Outcome
from quickverdict.contracts.report import Report
from quickverdict.core.config import RunConfig
from quickverdict.core.events import EventBusProtocol, NullEventBus
from quickverdict.core.logging import get_logger
from quickverdict.core.source import ValueSource
from quickverdict.engine.dispatch import Testable, bind
from quickverdict.strategies.base import Strategy

slog = get_logger(__name__)

# Bits of OS entropy in a generated seed
SEED_BITS = 63


class Runner:
    """Runs one property once.

    A Runner is single-use: ``run()`` drives it from INIT to a terminal state
    and a second call raises. Create a new Runner per run.

    Example:
        runner = Runner(RunConfig(max_trials=500, seed=7), events=bus)
        report = runner.run(bind(prop))
    """

    def __init__(self, config: RunConfig | None = None, *, events: EventBusProtocol | None = None) -> None:
        self._config = config if config is not None else RunConfig()
        self._events: EventBusProtocol = events if events is not None else NullEventBus()
        self._state = RunnerState.INIT

    @property
    def state(self) -> RunnerState:
        return self._state

    @property
    def config(self) -> RunConfig:
        return self._config

    def _transition(self, state: RunnerState) -> None:
        slog.debug("Runner state change", previous=self._state.value, current=state.value)
        self._state = state

    def run(self, testable: Testable) -> Report:
        """Run ``testable`` to a verdict.

        Raises:
            RuntimeError: If this Runner has already run.
        """
        if self._state is not RunnerState.INIT:
            raise RuntimeError(f"Runner already used (state={self._state.value}); create a new Runner per run")

        config = self._config
        seed = config.seed if config.seed is not None else secrets.randbits(SEED_BITS)
        source = ValueSource(seed)
        self._transition(RunnerState.RUNNING)

        trials = 0
        discards = 0
        attempt = 0
        while trials < config.max_trials:
            attempt += 1
            size = config.size_for(attempt)
            source.resize(size)

            outcome = testable.check(source)
            if outcome.kind is OutcomeKind.DISCARD:
                discards += 1
            else:
                trials += 1
            self._events.emit(TrialCompleted(attempt=attempt, trial=trials, size=size, kind=outcome.kind))

            if outcome.kind is OutcomeKind.FAIL:
                return self._shrink_search(testable, outcome, trials=trials, discards=discards, seed=seed)

            if discards > config.discard_budget:
                report = Report.gave_up(trials_run=trials, discards=discards, seed=seed)
                return self._finish(report, RunnerState.GIVEN_UP)

        return self._finish(Report.passed(trials_run=trials, discards=discards, seed=seed), RunnerState.PASSED)

    def _shrink_search(self, testable: Testable, failure: Outcome, *, trials: int, discards: int, seed: int) -> Report:
        assert failure.witness is not None  # a FAIL outcome always carries its witness
        original = failure.witness
        self._events.emit(PropertyFalsified(trial=trials, witness=original))
        self._transition(RunnerState.SHRINK_SEARCH)

        current = failure
        steps = 0
        attempts = 0
        adopted = True
        while adopted:
            adopted = False
            for position in range(testable.arity):
                assert current.witness is not None
                sequence = testable.shrink_component(current.witness, position)
                while True:
                    try:
                        candidate = sequence.pull()
                    except ShrinkExhausted:
                        break
                    attempts += 1
                    outcome = testable.evaluate(testable.with_component(current.witness, position, candidate))
                    if outcome.is_failure:
                        current = outcome
                        steps += 1
                        assert outcome.witness is not None
                        self._events.emit(ShrinkStepAdopted(step=steps, attempts=attempts, witness=outcome.witness))
                        adopted = True
                        break
                if adopted:
                    break

        assert current.witness is not None
        report = Report.failed(
            trials_run=trials,
            discards=discards,
            seed=seed,
            witness=current.witness,
            original_witness=original,
            shrink_steps=steps,
            shrink_attempts=attempts,
            message=current.message,
        )
        return self._finish(report, RunnerState.FAILED)

    def _finish(self, report: Report, state: RunnerState) -> Report:
        self._transition(state)
        self._events.emit(RunFinished(report=report))
        return report


def run(
    prop: Callable[..., Any],
    config: RunConfig | None = None,
    *,
    strategies: Sequence[Strategy[Any]] | None = None,
    events: EventBusProtocol | None = None,
) -> Report:
    """Check a property and return the Report.

    Args:
        prop: A property function or a Testable from ``for_all``/``bind``.
        config: Run settings (default: ``RunConfig()``).
        strategies: Explicit strategies, one per argument. Overrides annotations.
        events: Bus receiving trial and shrink events (default: none).

    Raises:
        UnsupportedArity: If the property's arity has no dispatcher variant.
        MissingStrategy: If an argument has neither a strategy nor a usable annotation.
        InvalidPropertyResult: If the property returns a non-verdict value.
    """
    testable = bind(prop, strategies)
    return Runner(config, events=events).run(testable)
