"""Wizard prompt texts."""

from types import MappingProxyType

from src.domain.entities.wizard_state import WizardState

STARTING = "Starting with JWT token generation."
INVALID_VALUE = "Invalid {key} entered!"
TOKEN_COPIED = "The JWT has been copied to your clipboard!"

# Questions shown by prompting states, with the reading state each one leads to
QUESTIONS: MappingProxyType[WizardState, tuple[str, WizardState]] = MappingProxyType(
    {
        WizardState.ASKING_FOR_KEY: ("Enter key {number}", WizardState.READING_KEY),
        WizardState.ASKING_FOR_VALUE: ("Enter value for {key}", WizardState.READING_VALUE),
        WizardState.ASKING_FOR_MORE_DATA: (
            "Any additional inputs? (y/n)",
            WizardState.READING_MORE_DATA,
        ),
        WizardState.ASKING_ANOTHER: (
            "Generate another token? (y/n)",
            WizardState.READING_ANOTHER,
        ),
    }
)
