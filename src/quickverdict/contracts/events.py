"""Observer events emitted by the driver.

The driver never consults global log state. It emits these events on an
injected event bus at trial and shrink-step boundaries; subscribers decide
what to do with them. Each event type declares a stdlib logging ``level`` so
a logging subscriber can forward it without a lookup table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from quickverdict.contracts.enums import OutcomeKind
from quickverdict.contracts.outcomes import Witness
from quickverdict.contracts.report import Report


@dataclass(frozen=True, slots=True)
class TrialCompleted:
    """One generated input was evaluated.

    Attributes:
        attempt: 1-based count of invocations so far (passes, fails and discards)
        trial: Non-discarded invocations so far
        size: Size magnitude the arguments were generated at
        kind: Verdict of this invocation
    """

    level: ClassVar[int] = logging.DEBUG

    attempt: int
    trial: int
    size: int
    kind: OutcomeKind


@dataclass(frozen=True, slots=True)
class PropertyFalsified:
    """A generated input failed; the shrink search starts from ``witness``."""

    level: ClassVar[int] = logging.INFO

    trial: int
    witness: Witness


@dataclass(frozen=True, slots=True)
class ShrinkStepAdopted:
    """A shrink candidate still failed and replaced the current witness."""

    level: ClassVar[int] = logging.DEBUG

    step: int
    attempts: int
    witness: Witness


@dataclass(frozen=True, slots=True)
class RunFinished:
    """The driver reached a terminal state."""

    level: ClassVar[int] = logging.INFO

    report: Report


RunEvent = TrialCompleted | PropertyFalsified | ShrinkStepAdopted | RunFinished
