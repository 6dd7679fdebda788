"""Run configuration.

Uses Pydantic for validation with a frozen (immutable) model.
Configuration precedence: explicit overrides > YAML file > defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


class RunConfig(BaseModel):
    """Settings for one ``run()``.

    Example:
        config = RunConfig(max_trials=500, seed=1234)
    """

    model_config = {"frozen": True, "extra": "forbid"}

    max_trials: int = Field(
        default=100,
        gt=0,
        description="Non-discarded trials that must pass before the property is accepted",
    )
    max_size: int = Field(
        default=100,
        ge=0,
        description="Upper bound of the size magnitude used to scale generated values",
    )
    size_step: int = Field(
        default=1,
        gt=0,
        description="Size growth per attempt; attempt n runs at min(n * size_step, max_size)",
    )
    max_discard_ratio: float = Field(
        default=10.0,
        ge=0.0,
        description="Give up once discards exceed max_discard_ratio * max_trials",
    )
    seed: int | None = Field(
        default=None,
        description="Seed for the random stream; None draws one from the OS and records it in the report",
    )

    @property
    def discard_budget(self) -> int:
        """Largest discard count the run tolerates before giving up."""
        return int(self.max_discard_ratio * self.max_trials)

    def size_for(self, attempt: int) -> int:
        """Size magnitude for the 1-based ``attempt``; non-decreasing in attempt."""
        if attempt < 1:
            raise ValueError(f"attempt is 1-based, got {attempt}")
        return min(attempt * self.size_step, self.max_size)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dicts, with override taking precedence.

    Returns:
        Merged configuration dict (new dict, does not mutate inputs).
    """
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(config_file: Path | None = None, **overrides: Any) -> RunConfig:
    """Build a RunConfig from an optional YAML file plus overrides.

    Overrides whose value is None are ignored, so CLI options that were not
    given fall through to the file or the defaults.

    Args:
        config_file: YAML file holding a mapping of RunConfig fields.
        **overrides: Field values taking precedence over the file.

    Raises:
        ValueError: If the YAML document is not a mapping.
        pydantic.ValidationError: If the merged values are invalid.
    """
    merged: dict[str, Any] = {}
    if config_file is not None:
        with config_file.open(encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle)
        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ValueError(f"{config_file}: expected a mapping of settings, got {type(loaded).__name__}")
        merged = deep_merge(merged, loaded)

    merged = deep_merge(merged, {key: value for key, value in overrides.items() if value is not None})
    return RunConfig(**merged)
