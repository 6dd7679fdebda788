"""Exceptions raised by the engine.

Three groups live here:

- Declaration errors: the property or a strategy was set up wrongly. These
  surface when a property is bound, never halfway through a run.
- Control flow signals: ``Discarded`` and ``ShrinkExhausted`` are NOT error
  conditions. They tell the dispatcher and driver to take another branch.
- Verdict exceptions: ``PropertyFailed`` and ``GaveUp`` wrap a finished
  Report for callers (pytest, scripts) that want a raise instead of a value.

Exceptions raised by the property function itself (ZeroDivisionError,
IndexError, ...) are deliberately not represented here. They propagate out of
``run()`` untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quickverdict.contracts.report import Report


class QuickverdictError(Exception):
    """Base class for declaration errors."""


class UnsupportedArity(QuickverdictError):
    """Raised when a property takes a number of arguments with no dispatcher variant."""

    def __init__(self, arity: int, supported: tuple[int, ...]) -> None:
        self.arity = arity
        self.supported = supported
        super().__init__(f"Properties taking {arity} arguments are not supported (supported arities: {list(supported)})")


class MissingStrategy(QuickverdictError):
    """Raised when no generation capability can be found for an argument."""

    def __init__(self, parameter: str, annotation: object = None) -> None:
        self.parameter = parameter
        self.annotation = annotation
        if annotation is None:
            detail = "it has no annotation and no explicit strategy was given"
        else:
            detail = f"no strategy is registered for {annotation!r}"
        super().__init__(f"Cannot generate argument {parameter!r}: {detail}")


class InvalidPropertyResult(QuickverdictError):
    """Raised when a property returns something other than a verdict.

    Accepted returns are True, False, None and the DISCARD marker.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Property returned {value!r} ({type(value).__name__}); expected a bool, None, or DISCARD from implies()/assume()"
        )


class InvalidStrategyArguments(QuickverdictError, ValueError):
    """Raised when a strategy constructor receives inconsistent arguments."""


# =============================================================================
# Control Flow Signals
# =============================================================================


class Discarded(Exception):
    """Raised to reject the current arguments because a precondition failed.

    This is NOT an error condition. The dispatcher turns it into a DISCARD
    outcome, which does not count as a trial. Raised by ``assume()`` inside a
    property and by filtered strategies that cannot find an acceptable value.
    """


class ShrinkExhausted(Exception):
    """Raised by ``ShrinkSequence.pull()`` when no candidates remain.

    This is NOT an error condition. To the driver it means the component
    being shrunk is locally minimal for the current witness.
    """


# =============================================================================
# Verdict Exceptions
# =============================================================================


class PropertyFailed(AssertionError):
    """The property was falsified; carries the final Report.

    Subclasses AssertionError so test runners report it as a test failure
    rather than an error.
    """

    def __init__(self, report: Report) -> None:
        self.report = report
        super().__init__(report.render())


class GaveUp(QuickverdictError):
    """Too many inputs were discarded relative to the trial budget."""

    def __init__(self, report: Report) -> None:
        self.report = report
        super().__init__(report.render())
