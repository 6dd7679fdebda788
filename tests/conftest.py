# tests/conftest.py
"""Shared test fixtures and helpers.

Fixtures:
- seeded_config: RunConfig with a fixed seed, so runs replay exactly
- recorder: EventBus plus a list of every event it carried, in order
- source: ValueSource at a fixed seed and a moderate size

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings

from quickverdict.contracts.events import PropertyFalsified, RunFinished, ShrinkStepAdopted, TrialCompleted
from quickverdict.core.config import RunConfig
from quickverdict.core.events import EventBus
from quickverdict.core.source import ValueSource

# =============================================================================
# Hypothesis Configuration
# =============================================================================

# CI profile: Fast tests for continuous integration
settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

# Nightly profile: Thorough testing for scheduled runs
settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Debug profile: Minimal examples with verbose output for debugging
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


# =============================================================================
# Event Recording
# =============================================================================


@dataclass
class EventRecorder:
    """EventBus wired to append every driver event to ``events``."""

    bus: EventBus = field(default_factory=EventBus)
    events: list[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        for event_type in (TrialCompleted, PropertyFalsified, ShrinkStepAdopted, RunFinished):
            self.bus.subscribe(event_type, self.events.append)

    def of_type[E](self, event_type: type[E]) -> list[E]:
        return [event for event in self.events if isinstance(event, event_type)]


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


@pytest.fixture
def seeded_config() -> RunConfig:
    return RunConfig(seed=20240611)


@pytest.fixture
def source() -> ValueSource:
    value_source = ValueSource(seed=1234)
    value_source.resize(30)
    return value_source
