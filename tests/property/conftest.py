# tests/property/conftest.py
"""Shared Hypothesis strategies for property-based tests.

Note the two meanings of "strategy" in these tests: Hypothesis strategies
(``st.*``) generate the inputs that exercise quickverdict's own strategies.

Usage:
    from tests.property.conftest import seeds, int_lists

    @given(seed=seeds, items=int_lists)
    def test_something(seed: int, items: list[int]) -> None:
        ...
"""

# =============================================================================
# Hypothesis Settings
# =============================================================================
#
# For standardized @settings decorators, import from tests.property.settings:
#   from tests.property.settings import STANDARD_SETTINGS, DETERMINISM_SETTINGS
#
# Tiers: DETERMINISM (300), STANDARD (100), SLOW (30), QUICK (20)
# =============================================================================

from __future__ import annotations

from hypothesis import strategies as st

# Seeds for ValueSource / RunConfig
seeds = st.integers(min_value=0, max_value=2**63 - 1)

# Size magnitudes a run can reach with the default config
sizes = st.integers(min_value=0, max_value=100)

# Integers well beyond anything size-scaled generation produces
big_ints = st.integers(min_value=-(2**64), max_value=2**64)

# Short lists of small integers, for length-shrinking properties
int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=64)

# Finite floats, including subnormals and large magnitudes
finite_floats = st.floats(allow_nan=False, allow_infinity=False)
