# tests/unit/contracts/test_report.py
"""Tests for the final run Report and the verdict exceptions built from it."""

import pytest

from quickverdict.contracts import GaveUp, PropertyFailed, Report, ReportStatus, Witness


def _witness(value: int = 5) -> Witness:
    return Witness(values=(value,), names=("x",), rendered=(str(value),))


def _failed(**kwargs: object) -> Report:
    defaults: dict[str, object] = {
        "trials_run": 7,
        "discards": 2,
        "seed": 99,
        "witness": _witness(5),
        "original_witness": _witness(83),
        "shrink_steps": 3,
        "shrink_attempts": 11,
    }
    defaults.update(kwargs)
    return Report.failed(**defaults)  # type: ignore[arg-type]


class TestReportInvariants:
    """A report's fields must agree with its status."""

    def test_failed_requires_witness(self) -> None:
        with pytest.raises(ValueError, match="MUST carry the final witness"):
            Report(status=ReportStatus.FAILED, trials_run=1, discards=0, seed=1)

    def test_passed_rejects_witness(self) -> None:
        with pytest.raises(ValueError, match="cannot carry a witness"):
            Report(status=ReportStatus.PASSED, trials_run=1, discards=0, seed=1, witness=_witness())

    def test_status_predicates(self) -> None:
        passed = Report.passed(trials_run=100, discards=0, seed=1)
        gave_up = Report.gave_up(trials_run=3, discards=31, seed=1)
        failed = _failed()

        assert (passed.is_passed, passed.is_failed, passed.is_gave_up) == (True, False, False)
        assert (failed.is_passed, failed.is_failed, failed.is_gave_up) == (False, True, False)
        assert (gave_up.is_passed, gave_up.is_failed, gave_up.is_gave_up) == (False, False, True)


class TestReportRendering:
    """Tests for the human-readable summary."""

    def test_passed_reports_trial_count(self) -> None:
        assert Report.passed(trials_run=100, discards=4, seed=1).render() == "OK, passed 100 trials."

    def test_gave_up_reports_discards(self) -> None:
        rendered = Report.gave_up(trials_run=3, discards=31, seed=8).render()

        assert rendered == "Gave up after 3 trials: 31 inputs discarded (seed=8)."

    def test_failed_renders_minimal_witness_per_argument(self) -> None:
        rendered = _failed().render()

        assert rendered.splitlines() == [
            "Falsified after 7 trials and 3 shrink steps (seed=99).",
            "  x = 5",
        ]

    def test_failed_includes_assertion_message(self) -> None:
        rendered = _failed(message="5 is not allowed").render()

        assert rendered.splitlines()[-1] == "Assertion: 5 is not allowed"

    def test_failed_nullary_property(self) -> None:
        """A property with no arguments renders a placeholder line."""
        empty = Witness(values=(), names=(), rendered=())
        rendered = _failed(witness=empty, original_witness=empty, shrink_steps=0).render()

        assert "  (no arguments)" in rendered.splitlines()


class TestReportSerialization:
    def test_arguments_empty_unless_failed(self) -> None:
        assert Report.passed(trials_run=1, discards=0, seed=1).arguments == {}
        assert _failed().arguments == {"x": "5"}

    def test_to_dict(self) -> None:
        assert _failed().to_dict() == {
            "status": "failed",
            "trials_run": 7,
            "discards": 2,
            "seed": 99,
            "witness": {"x": "5"},
            "shrink_steps": 3,
            "shrink_attempts": 11,
            "message": None,
        }

    def test_to_dict_without_witness(self) -> None:
        data = Report.gave_up(trials_run=0, discards=11, seed=3).to_dict()

        assert data["status"] == "gave_up"
        assert data["witness"] is None


class TestVerdictExceptions:
    """PropertyFailed and GaveUp wrap a finished report."""

    def test_property_failed_is_assertion_error(self) -> None:
        report = _failed()
        error = PropertyFailed(report)

        assert isinstance(error, AssertionError)
        assert error.report is report
        assert str(error) == report.render()

    def test_gave_up_carries_report(self) -> None:
        report = Report.gave_up(trials_run=0, discards=11, seed=3)

        with pytest.raises(GaveUp) as exc_info:
            raise GaveUp(report)

        assert exc_info.value.report is report
        assert "11 inputs discarded" in str(exc_info.value)
