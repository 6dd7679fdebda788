# src/quickverdict/core/source.py
"""Size-parameterized source of random draws.

ValueSource owns the pseudo-random stream for one run. Every strategy draws
through it, so a run is a deterministic function of (seed, sequence of
draws): the same seed and the same property replay the same arguments, the
same failure, and the same shrink path.

The driver owns the source exclusively and sets its size before each trial.
Strategies read ``size`` but never change it.
"""

from __future__ import annotations

import random as random_module
from collections.abc import Sequence


class ValueSource:
    """Seeded random stream plus the current size magnitude.

    Example:
        source = ValueSource(seed=42)
        source.resize(10)
        n = source.next_bounded_int(-source.size, source.size)
        branch = source.choose([1.0, 3.0])  # 0 with p=0.25, 1 with p=0.75
    """

    def __init__(self, seed: int, size: int = 0) -> None:
        """Initialize the source.

        Args:
            seed: Seed for the underlying random stream.
            size: Initial size magnitude (must be non-negative).

        Raises:
            ValueError: If size is negative.
        """
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._seed = seed
        self._rng = random_module.Random(seed)
        self._size = size
        self._draws = 0

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def size(self) -> int:
        """Current size magnitude; scales ranges and lengths of generated values."""
        return self._size

    @property
    def draws(self) -> int:
        """Number of primitive draws taken so far."""
        return self._draws

    def resize(self, size: int) -> None:
        """Set the size for the next trial.

        Size never decreases within a run.

        Raises:
            ValueError: If size is negative or smaller than the current size.
        """
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        if size < self._size:
            raise ValueError(f"size must be non-decreasing within a run: {size} < {self._size}")
        self._size = size

    def next_bounded_int(self, lo: int, hi: int) -> int:
        """Draw an integer uniformly from the closed range [lo, hi]."""
        if lo > hi:
            raise ValueError(f"empty range: lo ({lo}) > hi ({hi})")
        self._draws += 1
        return self._rng.randint(lo, hi)

    def next_unit_float(self) -> float:
        """Draw a float uniformly from [0.0, 1.0)."""
        self._draws += 1
        return self._rng.random()

    def next_bool(self) -> bool:
        return self.choose((1.0, 1.0)) == 1

    def choose(self, weights: Sequence[float]) -> int:
        """Pick an alternative index with probability proportional to its weight.

        Zero-weight alternatives are never picked.

        Args:
            weights: Non-negative weight per alternative, at least one positive.

        Returns:
            Index into ``weights`` of the chosen alternative.

        Raises:
            ValueError: If weights is empty, has a negative entry, or sums to zero.
        """
        if not weights:
            raise ValueError("choose() needs at least one alternative")
        if any(w < 0 for w in weights):
            raise ValueError(f"weights must be non-negative, got {list(weights)}")
        total = sum(weights)
        if total <= 0:
            raise ValueError("at least one weight must be positive")

        roll = self.next_unit_float() * total
        threshold = 0.0
        last_positive = 0
        for index, weight in enumerate(weights):
            if weight <= 0:
                continue
            last_positive = index
            threshold += weight
            if roll < threshold:
                return index
        # Float accumulation can leave roll == total; fall back to the last live branch.
        return last_positive
