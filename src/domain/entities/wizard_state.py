"""Wizard state machine states."""

from enum import Enum


class WizardState(str, Enum):
    """States of the token wizard conversation."""

    START = "start"  # initial; emits the banner
    ASKING_FOR_KEY = "asking_for_key"
    READING_KEY = "reading_key"
    ASKING_FOR_VALUE = "asking_for_value"
    READING_VALUE = "reading_value"
    VALIDATING = "validating"  # no I/O, checks required fields
    ASKING_FOR_MORE_DATA = "asking_for_more_data"
    READING_MORE_DATA = "reading_more_data"
    ASKING_ANOTHER = "asking_another"
    READING_ANOTHER = "reading_another"
    DONE = "done"

    @property
    def is_reading(self) -> bool:
        """Return True for states that consume one line of input."""
        return self in _READING_STATES


_READING_STATES = frozenset(
    {
        WizardState.READING_KEY,
        WizardState.READING_VALUE,
        WizardState.READING_MORE_DATA,
        WizardState.READING_ANOTHER,
    }
)
