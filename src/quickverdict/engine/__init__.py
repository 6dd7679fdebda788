"""Engine: arity dispatch and the driver."""

from quickverdict.engine.dispatch import (
    ARITY_VARIANTS,
    Binary,
    Nullary,
    Ternary,
    Testable,
    Unary,
    assume,
    bind,
    classify,
    for_all,
    implies,
)
from quickverdict.engine.runner import Runner, run

__all__ = [
    "ARITY_VARIANTS",
    "Binary",
    "Nullary",
    "Runner",
    "Ternary",
    "Testable",
    "Unary",
    "assume",
    "bind",
    "classify",
    "for_all",
    "implies",
    "run",
]
