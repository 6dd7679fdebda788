"""Property evaluation outcomes and witnesses.

These types answer: "What did one invocation of the property produce?"

IMPORTANT:
- Witness is replaced wholesale during shrinking, never mutated. Use
  Witness.replace() to derive a new witness with one component swapped.
- Outcome is produced once per invocation and is immutable.
- Use the Outcome factory methods rather than constructing it directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from quickverdict.contracts.enums import OutcomeKind


@dataclass(frozen=True, slots=True)
class Witness:
    """Ordered argument tuple that a property was invoked with.

    Attributes:
        values: Concrete argument values, in parameter order
        names: Parameter names, same length as values
        rendered: Per-argument textual form, produced by each argument's strategy
    """

    values: tuple[Any, ...]
    names: tuple[str, ...]
    rendered: tuple[str, ...]

    def __post_init__(self) -> None:
        if not (len(self.values) == len(self.names) == len(self.rendered)):
            raise ValueError(
                f"Witness fields must have equal length: "
                f"{len(self.values)} values, {len(self.names)} names, {len(self.rendered)} rendered"
            )

    def __len__(self) -> int:
        return len(self.values)

    def replace(self, position: int, value: Any, rendered: str) -> Witness:
        """Return a new witness with the component at ``position`` replaced."""
        values = list(self.values)
        shown = list(self.rendered)
        values[position] = value
        shown[position] = rendered
        return Witness(values=tuple(values), names=self.names, rendered=tuple(shown))

    def describe(self) -> list[str]:
        """Render as ``name = value`` lines, one per argument."""
        return [f"{name} = {shown}" for name, shown in zip(self.names, self.rendered, strict=True)]

    def as_dict(self) -> dict[str, str]:
        return dict(zip(self.names, self.rendered, strict=True))


@dataclass(frozen=True, slots=True)
class Outcome:
    """Three-way verdict of one property invocation.

    Invariant: kind=FAIL implies witness is not None.
    """

    kind: OutcomeKind
    witness: Witness | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        if self.kind is OutcomeKind.FAIL and self.witness is None:
            raise ValueError("A failing Outcome MUST carry the witness that falsified the property")

    @classmethod
    def passed(cls, witness: Witness | None = None) -> Outcome:
        return cls(kind=OutcomeKind.PASS, witness=witness)

    @classmethod
    def failed(cls, witness: Witness, message: str | None = None) -> Outcome:
        """Create a failing outcome.

        Args:
            witness: The arguments that falsified the property
            message: Assertion message, when the failure came from an assert
        """
        return cls(kind=OutcomeKind.FAIL, witness=witness, message=message)

    @classmethod
    def discarded(cls, witness: Witness | None = None) -> Outcome:
        return cls(kind=OutcomeKind.DISCARD, witness=witness)

    @property
    def is_failure(self) -> bool:
        return self.kind is OutcomeKind.FAIL


class _DiscardMarker:
    """Type of the DISCARD singleton returned by properties to reject inputs."""

    _instance: _DiscardMarker | None = None

    def __new__(cls) -> _DiscardMarker:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DISCARD"


DISCARD = _DiscardMarker()


# =============================================================================
# Result-like two-variant values
# =============================================================================


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Success branch of a result-like value."""

    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Error branch of a result-like value."""

    error: E

