# tests/unit/engine/test_runner.py
"""Tests for the driver: trial loop, discards, shrink search and reporting.

PYTEST_DONT_REWRITE: properties here fail via plain ``assert`` and the tests check
the exact AssertionError text, which pytest's assertion rewriting would alter.

End-to-end scenarios:
- A: integers in [0, 100] never equal 5 -> falsified with x = 5
- B: double reversal with a faulty reverse -> minimal witness [0]
- C: a precondition rejecting every input -> GAVE_UP, not PASSED
- D: same seed and config -> identical reports
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from structlog.testing import capture_logs

from quickverdict.contracts import DISCARD, OutcomeKind, ReportStatus, RunnerState
from quickverdict.contracts.errors import InvalidPropertyResult, UnsupportedArity
from quickverdict.contracts.events import PropertyFalsified, RunFinished, ShrinkStepAdopted, TrialCompleted
from quickverdict.core.config import RunConfig
from quickverdict.engine.dispatch import assume, bind, for_all
from quickverdict.engine.runner import Runner, run
from quickverdict.strategies import integers, lists

if TYPE_CHECKING:
    from tests.conftest import EventRecorder


def _faulty_reverse(items: list[int]) -> list[int]:
    """Reverses, but loses the first element."""
    return list(reversed(items[1:]))


class TestScenarios:
    def test_scenario_a_finds_exact_counterexample(self) -> None:
        """x != 5 over [0, 100] is falsified and reported as x = 5."""

        @for_all(integers(0, 100))
        def never_five(x: int) -> bool:
            return x != 5

        report = run(never_five, RunConfig(max_trials=500, max_size=10, seed=11))

        assert report.status is ReportStatus.FAILED
        assert report.witness is not None
        assert report.witness.values == (5,)
        assert report.arguments == {"x": "5"}

    def test_scenario_b_minimal_list(self) -> None:
        """A faulty double reversal shrinks to a single-element list of 0."""

        def reverse_twice(xs: list[int]) -> bool:
            return _faulty_reverse(_faulty_reverse(xs)) == xs

        report = run(reverse_twice, RunConfig(seed=3))

        assert report.status is ReportStatus.FAILED
        assert report.witness is not None
        assert report.witness.values == ([0],)
        assert report.render().splitlines()[1] == "  xs = [0]"

    def test_scenario_b_with_small_integers(self) -> None:
        report = run(
            lambda xs: _faulty_reverse(_faulty_reverse(xs)) == xs,
            RunConfig(seed=8, max_size=30),
            strategies=[lists(integers(-9, 9))],
        )

        assert report.witness is not None
        assert report.witness.values == ([0],)

    def test_scenario_c_gives_up(self) -> None:
        """A precondition that never holds ends in GAVE_UP."""

        def impossible(x: int) -> bool:
            assume(False)
            return True

        config = RunConfig(max_trials=20, max_discard_ratio=5.0, seed=1)
        report = run(impossible, config)

        assert report.status is ReportStatus.GAVE_UP
        assert report.trials_run == 0
        assert report.discards == config.discard_budget + 1

    def test_scenario_c_discard_marker(self) -> None:
        report = run(lambda x: DISCARD, RunConfig(seed=1), strategies=[integers()])

        assert report.is_gave_up

    def test_scenario_d_same_seed_same_report(self) -> None:
        def sorted_is_identity(xs: list[int]) -> bool:
            return sorted(xs) == xs

        config = RunConfig(seed=424242, max_trials=200)

        first = run(sorted_is_identity, config)
        second = run(sorted_is_identity, config)

        assert first.status is ReportStatus.FAILED
        assert first == second
        assert first.original_witness == second.original_witness


class TestPassing:
    def test_passing_property_runs_all_trials(self) -> None:
        report = run(lambda x: x * 0 == 0, RunConfig(max_trials=37, seed=2), strategies=[integers()])

        assert report.status is ReportStatus.PASSED
        assert report.trials_run == 37
        assert report.discards == 0
        assert report.witness is None

    def test_none_return_passes(self) -> None:
        def prop(xs: list[int]) -> None:
            assert len(xs) >= 0

        assert run(prop, RunConfig(seed=2)).is_passed

    def test_discards_do_not_count_as_trials(self) -> None:
        def even_only(x: int) -> bool:
            assume(x % 2 == 0)
            return x % 2 == 0

        report = run(even_only, RunConfig(max_trials=50, seed=6))

        assert report.status is ReportStatus.PASSED
        assert report.trials_run == 50
        assert report.discards > 0

    def test_nullary_property(self) -> None:
        assert run(lambda: True, RunConfig(max_trials=5, seed=1)).trials_run == 5


class TestFailing:
    def test_nullary_failure_has_empty_witness(self) -> None:
        report = run(lambda: False, RunConfig(seed=1))

        assert report.is_failed
        assert report.trials_run == 1
        assert report.witness is not None
        assert len(report.witness) == 0
        assert report.shrink_steps == 0

    def test_shrinks_to_boundary(self) -> None:
        """A monotone predicate shrinks to the first failing value."""

        def prop(x: int) -> None:
            assert x < 10, f"{x} is not below 10"

        report = run(prop, RunConfig(seed=9), strategies=[integers(0, 100)])

        assert report.witness is not None
        assert report.witness.values == (10,)
        assert report.message == "10 is not below 10"

    def test_binary_property_shrinks_each_argument(self) -> None:
        report = run(lambda a, b: a < 3 or b < 3, RunConfig(seed=12), strategies=[integers(0, 100), integers(0, 100)])

        assert report.witness is not None
        assert report.witness.values == (3, 3)
        assert report.witness.names == ("a", "b")

    def test_ternary_property(self) -> None:
        def prop(a: int, b: int, c: int) -> bool:
            return not (a > 0 and b > 0 and c > 0)

        report = run(prop, RunConfig(seed=4), strategies=[integers(0, 50)] * 3)

        assert report.witness is not None
        assert report.witness.values == (1, 1, 1)

    def test_original_witness_kept(self) -> None:
        report = run(lambda x: x < 10, RunConfig(seed=9), strategies=[integers(0, 100)])

        assert report.original_witness is not None
        assert report.original_witness.values[0] >= 10
        assert report.shrink_attempts >= report.shrink_steps

    def test_stops_at_first_failure(self) -> None:
        calls: list[int] = []

        def prop(x: int) -> bool:
            calls.append(x)
            return False

        report = run(prop, RunConfig(max_trials=100, seed=3), strategies=[integers(0, 0)])

        assert report.trials_run == 1
        assert len(calls) == 1

    def test_runtime_fault_propagates(self) -> None:
        """Exceptions other than assertions are not recovered."""

        def prop(x: int) -> bool:
            return 100 // (x - x) > 0

        with pytest.raises(ZeroDivisionError):
            run(prop, RunConfig(seed=1))

    def test_non_verdict_result_raises(self) -> None:
        with pytest.raises(InvalidPropertyResult):
            run(lambda x: x, RunConfig(seed=1), strategies=[integers()])

    def test_unsupported_arity_raises_before_running(self) -> None:
        calls: list[int] = []

        def four(a: int, b: int, c: int, d: int) -> bool:
            calls.append(a)
            return True

        with pytest.raises(UnsupportedArity):
            run(four)

        assert calls == []


class TestArgumentIsolation:
    """Properties that mutate their arguments cannot corrupt the witness."""

    def test_growing_argument_still_terminates(self, recorder: EventRecorder) -> None:
        strategy = lists(integers())

        @for_all(strategy)
        def appends(xs: list[int]) -> bool:
            xs.append(0)
            return False

        report = run(appends, RunConfig(seed=1), events=recorder.bus)

        assert report.status is ReportStatus.FAILED
        assert report.witness is not None
        assert report.witness.values == ([],)
        assert report.witness.rendered == ("[]",)
        for event in recorder.of_type(ShrinkStepAdopted):
            assert event.witness.rendered == (strategy.render(event.witness.values[0]),)

    def test_shrinking_argument_reports_minimal_witness(self) -> None:
        """Fails for lists of length >= 3; the pop must not leak into the witness."""

        @for_all(lists(integers(0, 10)))
        def pops(xs: list[int]) -> bool:
            if xs:
                xs.pop()
            return len(xs) < 2

        report = run(pops, RunConfig(seed=3))

        assert report.status is ReportStatus.FAILED
        assert report.witness is not None
        assert report.witness.values == ([0, 0, 0],)
        assert report.witness.rendered == ("[0, 0, 0]",)

    def test_original_witness_keeps_generated_value(self) -> None:
        strategy = lists(integers(1, 9), min_size=2)

        @for_all(strategy)
        def clears(xs: list[int]) -> bool:
            xs.clear()
            return False

        report = run(clears, RunConfig(seed=7))

        assert report.original_witness is not None
        generated = report.original_witness.values[0]
        assert len(generated) >= 2
        assert report.original_witness.rendered == (strategy.render(generated),)
        assert report.witness is not None
        assert report.witness.values == ([1, 1],)


class TestSeed:
    def test_seed_drawn_when_absent(self) -> None:
        report = run(lambda x: True, RunConfig(max_trials=3), strategies=[integers()])

        assert isinstance(report.seed, int)
        assert report.seed >= 0

    def test_recorded_seed_replays_failure(self) -> None:
        def prop(xs: list[int]) -> bool:
            return sum(xs) < 40

        first = run(prop, RunConfig(max_trials=500))
        assert first.is_failed

        replay = run(prop, RunConfig(max_trials=500, seed=first.seed))

        assert replay == first


class TestRunnerState:
    def test_starts_in_init(self) -> None:
        assert Runner().state is RunnerState.INIT

    @pytest.mark.parametrize(
        ("prop", "expected"),
        [
            (lambda x: True, RunnerState.PASSED),
            (lambda x: False, RunnerState.FAILED),
            (lambda x: DISCARD, RunnerState.GIVEN_UP),
        ],
    )
    def test_terminal_state(self, prop: object, expected: RunnerState) -> None:
        runner = Runner(RunConfig(max_trials=10, seed=1))
        runner.run(bind(prop, [integers()]))  # type: ignore[arg-type]

        assert runner.state is expected
        assert runner.state.is_terminal

    def test_single_use(self) -> None:
        runner = Runner(RunConfig(max_trials=3, seed=1))
        testable = bind(lambda x: True, [integers()])
        runner.run(testable)

        with pytest.raises(RuntimeError, match="already used"):
            runner.run(testable)

    def test_transitions_are_logged(self) -> None:
        with capture_logs() as logs:
            run(lambda x: False, RunConfig(max_trials=5, seed=1), strategies=[integers(0, 0)])

        changes = [(entry["previous"], entry["current"]) for entry in logs if entry["event"] == "Runner state change"]
        assert changes == [("init", "running"), ("running", "shrink_search"), ("shrink_search", "failed")]


class TestObserverEvents:
    """The driver reports progress only through the injected bus."""

    def test_trial_events_carry_growing_size(self, recorder: EventRecorder) -> None:
        config = RunConfig(max_trials=8, max_size=5, size_step=1, seed=1)
        run(lambda x: True, config, strategies=[integers()], events=recorder.bus)

        trials = recorder.of_type(TrialCompleted)
        assert [event.size for event in trials] == [1, 2, 3, 4, 5, 5, 5, 5]
        assert [event.attempt for event in trials] == list(range(1, 9))
        assert all(event.kind is OutcomeKind.PASS for event in trials)

    def test_discarded_attempts_still_grow_size(self, recorder: EventRecorder) -> None:
        config = RunConfig(max_trials=5, max_discard_ratio=1.0, seed=1)
        run(lambda x: DISCARD, config, strategies=[integers()], events=recorder.bus)

        trials = recorder.of_type(TrialCompleted)
        assert [event.size for event in trials] == [1, 2, 3, 4, 5, 6]
        assert all(event.trial == 0 for event in trials)

    def test_run_finished_is_last(self, recorder: EventRecorder) -> None:
        report = run(lambda x: True, RunConfig(max_trials=3, seed=1), strategies=[integers()], events=recorder.bus)

        assert isinstance(recorder.events[-1], RunFinished)
        assert recorder.events[-1].report is report
        assert len(recorder.of_type(RunFinished)) == 1

    def test_failure_events(self, recorder: EventRecorder) -> None:
        report = run(lambda x: x < 10, RunConfig(seed=9), strategies=[integers(0, 100)], events=recorder.bus)

        falsified = recorder.of_type(PropertyFalsified)
        steps = recorder.of_type(ShrinkStepAdopted)

        assert len(falsified) == 1
        assert falsified[0].witness == report.original_witness
        assert len(steps) == report.shrink_steps
        assert [event.step for event in steps] == list(range(1, report.shrink_steps + 1))
        if steps:
            assert steps[-1].witness == report.witness

    def test_adopted_witnesses_still_fail(self, recorder: EventRecorder) -> None:
        """Every adopted shrink step re-evaluates to FAIL."""
        testable = bind(lambda xs: len(xs) < 3, [lists(integers(0, 1000))])
        report = run(testable, RunConfig(seed=5, size_step=10), events=recorder.bus)

        steps = recorder.of_type(ShrinkStepAdopted)
        assert steps
        for event in steps:
            assert testable.evaluate(event.witness).is_failure
        assert report.witness is not None
        assert report.witness.values == ([0, 0, 0],)

    def test_no_events_without_bus(self) -> None:
        """The default NullEventBus accepts emits silently."""
        assert run(lambda x: True, RunConfig(max_trials=2, seed=1), strategies=[integers()]).is_passed
