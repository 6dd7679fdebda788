"""Shared contracts: verdicts, witnesses, reports, events and errors.

Everything that crosses a boundary between the dispatcher, the driver and the
caller is defined here, so those layers only depend on this package and not
on each other.
"""

from quickverdict.contracts.enums import OutcomeKind, ReportStatus, RunnerState
from quickverdict.contracts.errors import (
    Discarded,
    GaveUp,
    InvalidPropertyResult,
    InvalidStrategyArguments,
    MissingStrategy,
    PropertyFailed,
    QuickverdictError,
    ShrinkExhausted,
    UnsupportedArity,
)
from quickverdict.contracts.events import (
    PropertyFalsified,
    RunEvent,
    RunFinished,
    ShrinkStepAdopted,
    TrialCompleted,
)
from quickverdict.contracts.outcomes import DISCARD, Err, Ok, Outcome, Witness
from quickverdict.contracts.report import Report

__all__ = [
    "DISCARD",
    "Discarded",
    "Err",
    "GaveUp",
    "InvalidPropertyResult",
    "InvalidStrategyArguments",
    "MissingStrategy",
    "Ok",
    "Outcome",
    "OutcomeKind",
    "PropertyFailed",
    "PropertyFalsified",
    "QuickverdictError",
    "Report",
    "ReportStatus",
    "RunEvent",
    "RunFinished",
    "RunnerState",
    "ShrinkExhausted",
    "ShrinkStepAdopted",
    "TrialCompleted",
    "UnsupportedArity",
    "Witness",
]
