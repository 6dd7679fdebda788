"""Status codes and verdict kinds shared across the engine.

Every verdict the engine produces is one of a small closed set. There is no
"unknown" outcome: a property invocation either passed, failed, or was
discarded, and a run always ends in exactly one terminal status.
"""

from enum import StrEnum


class OutcomeKind(StrEnum):
    """Verdict of a single property invocation.

    Values:
        PASS: The property held for the generated arguments
        FAIL: The property was falsified; the arguments form a witness
        DISCARD: A precondition rejected the arguments; not counted as a trial
    """

    PASS = "pass"
    FAIL = "fail"
    DISCARD = "discard"


class ReportStatus(StrEnum):
    """Terminal status of a whole run."""

    PASSED = "passed"
    FAILED = "failed"
    GAVE_UP = "gave_up"


class RunnerState(StrEnum):
    """States of the driver state machine.

    INIT -> RUNNING -> PASSED
                    -> SHRINK_SEARCH -> FAILED
                    -> GIVEN_UP

    PASSED, FAILED and GIVEN_UP are terminal.
    """

    INIT = "init"
    RUNNING = "running"
    SHRINK_SEARCH = "shrink_search"
    PASSED = "passed"
    FAILED = "failed"
    GIVEN_UP = "given_up"

    @property
    def is_terminal(self) -> bool:
        """True once the runner can make no further transitions."""
        return self in (RunnerState.PASSED, RunnerState.FAILED, RunnerState.GIVEN_UP)
