"""
quickverdict: property-based testing with shrinking.

Declare a property over generated values, run it, and on failure get back the
locally-minimal witness that still falsifies it.

    from quickverdict import for_all, integers, run

    @for_all(integers(0, 100))
    def never_five(x: int) -> bool:
        return x != 5

    report = run(never_five)
    print(report.render())
"""

__version__ = "0.1.0"

from quickverdict.contracts import (
    DISCARD,
    Discarded,
    Err,
    GaveUp,
    InvalidPropertyResult,
    InvalidStrategyArguments,
    MissingStrategy,
    Ok,
    Outcome,
    OutcomeKind,
    PropertyFailed,
    QuickverdictError,
    Report,
    ReportStatus,
    UnsupportedArity,
    Witness,
)
from quickverdict.core import EventBus, LoggingObserver, NullEventBus, RunConfig, ValueSource, load_config
from quickverdict.engine import Runner, assume, bind, for_all, implies, run
from quickverdict.strategies import (
    Strategy,
    booleans,
    characters,
    floats,
    from_type,
    integers,
    just,
    lists,
    optionals,
    register,
    results,
    sampled_from,
    text,
    tuples,
)
from quickverdict.testing import check, quickcheck

__all__ = [
    "DISCARD",
    "Discarded",
    "Err",
    "EventBus",
    "GaveUp",
    "InvalidPropertyResult",
    "InvalidStrategyArguments",
    "LoggingObserver",
    "MissingStrategy",
    "NullEventBus",
    "Ok",
    "Outcome",
    "OutcomeKind",
    "PropertyFailed",
    "QuickverdictError",
    "Report",
    "ReportStatus",
    "RunConfig",
    "Runner",
    "Strategy",
    "UnsupportedArity",
    "ValueSource",
    "Witness",
    "__version__",
    "assume",
    "bind",
    "booleans",
    "characters",
    "check",
    "floats",
    "for_all",
    "from_type",
    "implies",
    "integers",
    "just",
    "lists",
    "load_config",
    "optionals",
    "register",
    "results",
    "run",
    "sampled_from",
    "text",
    "tuples",
]
