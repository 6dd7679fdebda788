"""Generation and shrink capabilities.

Use the lowercase constructors (``integers()``, ``lists(...)``) to build
strategies explicitly, or ``from_type()`` to derive one from an annotation.
"""

from quickverdict.strategies.base import FilteredStrategy, MappedStrategy, Strategy
from quickverdict.strategies.collections import (
    CharacterStrategy,
    ListStrategy,
    TupleStrategy,
    characters,
    lists,
    text,
    tuples,
)
from quickverdict.strategies.numbers import (
    BooleanStrategy,
    FloatStrategy,
    IntegerStrategy,
    booleans,
    floats,
    integers,
)
from quickverdict.strategies.registry import StrategyRegistry, default_registry, from_type, register
from quickverdict.strategies.shrinking import ShrinkSequence, removals, toward, toward_float
from quickverdict.strategies.variants import (
    JustStrategy,
    OptionalStrategy,
    ResultStrategy,
    SampledFromStrategy,
    just,
    optionals,
    results,
    sampled_from,
)

__all__ = [
    "BooleanStrategy",
    "CharacterStrategy",
    "FilteredStrategy",
    "FloatStrategy",
    "IntegerStrategy",
    "JustStrategy",
    "ListStrategy",
    "MappedStrategy",
    "OptionalStrategy",
    "ResultStrategy",
    "SampledFromStrategy",
    "ShrinkSequence",
    "Strategy",
    "StrategyRegistry",
    "TupleStrategy",
    "booleans",
    "characters",
    "default_registry",
    "floats",
    "from_type",
    "integers",
    "just",
    "lists",
    "optionals",
    "register",
    "removals",
    "results",
    "sampled_from",
    "text",
    "toward",
    "toward_float",
    "tuples",
]
