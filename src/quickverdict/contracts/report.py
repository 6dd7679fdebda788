"""Final report of a run.

A Report is created exactly once, when the driver reaches a terminal state,
and is immutable afterwards. Use the factory methods; they enforce which
fields accompany which status.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from quickverdict.contracts.enums import ReportStatus
from quickverdict.contracts.outcomes import Witness


@dataclass(frozen=True, slots=True)
class Report:
    """Result of ``run()``.

    Attributes:
        status: PASSED, FAILED or GAVE_UP
        trials_run: Non-discarded property invocations before the run ended
            (the falsifying trial included)
        discards: Invocations rejected by a precondition
        seed: Seed of the run; pass it back as ``RunConfig.seed`` to replay
        witness: Locally-minimal falsifying arguments (FAILED only)
        original_witness: The arguments that first falsified the property (FAILED only)
        shrink_steps: Number of shrink candidates adopted (FAILED only)
        shrink_attempts: Number of shrink candidates evaluated (FAILED only)
        message: Assertion message from the final failing invocation, if any
    """

    status: ReportStatus
    trials_run: int
    discards: int
    seed: int
    witness: Witness | None = None
    original_witness: Witness | None = None
    shrink_steps: int = 0
    shrink_attempts: int = 0
    message: str | None = None

    def __post_init__(self) -> None:
        if self.status is ReportStatus.FAILED and self.witness is None:
            raise ValueError("A FAILED report MUST carry the final witness")
        if self.status is not ReportStatus.FAILED and self.witness is not None:
            raise ValueError(f"A {self.status.upper()} report cannot carry a witness")

    @classmethod
    def passed(cls, *, trials_run: int, discards: int, seed: int) -> Report:
        return cls(status=ReportStatus.PASSED, trials_run=trials_run, discards=discards, seed=seed)

    @classmethod
    def failed(
        cls,
        *,
        trials_run: int,
        discards: int,
        seed: int,
        witness: Witness,
        original_witness: Witness,
        shrink_steps: int,
        shrink_attempts: int,
        message: str | None = None,
    ) -> Report:
        return cls(
            status=ReportStatus.FAILED,
            trials_run=trials_run,
            discards=discards,
            seed=seed,
            witness=witness,
            original_witness=original_witness,
            shrink_steps=shrink_steps,
            shrink_attempts=shrink_attempts,
            message=message,
        )

    @classmethod
    def gave_up(cls, *, trials_run: int, discards: int, seed: int) -> Report:
        return cls(status=ReportStatus.GAVE_UP, trials_run=trials_run, discards=discards, seed=seed)

    @property
    def is_passed(self) -> bool:
        return self.status is ReportStatus.PASSED

    @property
    def is_failed(self) -> bool:
        return self.status is ReportStatus.FAILED

    @property
    def is_gave_up(self) -> bool:
        return self.status is ReportStatus.GAVE_UP

    @property
    def arguments(self) -> dict[str, str]:
        """Rendered minimal witness keyed by parameter name (empty unless FAILED)."""
        if self.witness is None:
            return {}
        return self.witness.as_dict()

    def render(self) -> str:
        """Human-readable summary.

        PASSED reports the trial count, FAILED the minimized witness one
        argument per line, GAVE_UP the discard count.
        """
        if self.status is ReportStatus.PASSED:
            return f"OK, passed {self.trials_run} trials."
        if self.status is ReportStatus.GAVE_UP:
            return f"Gave up after {self.trials_run} trials: {self.discards} inputs discarded (seed={self.seed})."

        assert self.witness is not None  # guaranteed by __post_init__
        lines = [
            f"Falsified after {self.trials_run} trials and {self.shrink_steps} shrink steps (seed={self.seed}).",
        ]
        if len(self.witness) == 0:
            lines.append("  (no arguments)")
        lines.extend(f"  {line}" for line in self.witness.describe())
        if self.message:
            lines.append(f"Assertion: {self.message}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain JSON-safe types."""
        return {
            "status": self.status.value,
            "trials_run": self.trials_run,
            "discards": self.discards,
            "seed": self.seed,
            "witness": self.arguments if self.witness is not None else None,
            "shrink_steps": self.shrink_steps,
            "shrink_attempts": self.shrink_attempts,
            "message": self.message,
        }
