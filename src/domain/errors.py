"""Wizard errors."""


class WizardError(Exception):
    """Base error for the token wizard."""


class InvalidFieldValue(WizardError):
    """Value rejected by the validator registered for its field.

    Recovered inside the engine by asking for the value again.
    """

    def __init__(self, field_name: str, value: str) -> None:
        super().__init__(f"Invalid {field_name} value")
        self.field_name = field_name
        self.value = value


class InputExhausted(WizardError):
    """Input source has no more lines to read."""


class CollaboratorFailure(WizardError):
    """Signer or clipboard failed while emitting a token."""

    def __init__(self, collaborator: str, reason: str) -> None:
        super().__init__(f"{collaborator} failed: {reason}")
        self.collaborator = collaborator
        self.reason = reason
