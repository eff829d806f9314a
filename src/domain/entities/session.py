"""Wizard session - mutable context of one wizard run."""

from dataclasses import dataclass, field
from typing import NamedTuple

from src.domain.entities.wizard_state import WizardState


class StepResult(NamedTuple):
    """Outcome of one engine transition."""

    next_state: WizardState
    output: str | None = None


@dataclass
class Session:
    """State of one wizard run. Mutated only by the conversation engine.

    payload keeps insertion order (dict), so the signed token lists fields
    in the order the user entered them.
    """

    secret: bytes
    required_fields: frozenset[str] = frozenset()
    state: WizardState = WizardState.START
    current_key: str = ""
    payload: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.required_fields = frozenset(self.required_fields)

    @property
    def missing_fields(self) -> frozenset[str]:
        """Required fields not yet present in the payload."""
        return self.required_fields - self.payload.keys()

    def __repr__(self) -> str:
        # secret and values stay out of logs and tracebacks
        return (
            f"Session(state={self.state.value!r}, current_key={self.current_key!r}, "
            f"fields={list(self.payload)!r}, required={sorted(self.required_fields)!r})"
        )
