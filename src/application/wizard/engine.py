"""Conversation engine - state machine driving the token wizard."""

import structlog

from src.application.wizard.prompts import INVALID_VALUE, QUESTIONS, STARTING, TOKEN_COPIED
from src.domain.entities.session import Session, StepResult
from src.domain.entities.wizard_state import WizardState
from src.domain.errors import CollaboratorFailure, InputExhausted, InvalidFieldValue, WizardError
from src.domain.ports.wizard import ClipboardPort, InputPort, SignerPort
from src.domain.services.field_validators import FieldValidatorRegistry, get_default_registry

log = structlog.get_logger()


def is_yes(answer: str) -> bool:
    """Return True when answer starts with "y" (case-insensitive). Anything else is "no"."""
    return answer.lower()[:1] == "y"


class ConversationEngine:
    """Decides the next wizard state and what to print.

    Prompting states only produce text; reading states consume exactly one
    line from the input source. The signer and the clipboard are called only
    when the user declines to add more data.
    """

    def __init__(
        self,
        signer: SignerPort,
        clipboard: ClipboardPort,
        input_source: InputPort,
        validators: FieldValidatorRegistry | None = None,
    ) -> None:
        self._signer = signer
        self._clipboard = clipboard
        self._input = input_source
        self._validators = validators if validators is not None else get_default_registry()
        self._handlers = {
            WizardState.START: self._start,
            WizardState.ASKING_FOR_KEY: self._ask,
            WizardState.READING_KEY: self._read_key,
            WizardState.ASKING_FOR_VALUE: self._ask,
            WizardState.READING_VALUE: self._read_value,
            WizardState.VALIDATING: self._validate,
            WizardState.ASKING_FOR_MORE_DATA: self._ask,
            WizardState.READING_MORE_DATA: self._read_more_data,
            WizardState.ASKING_ANOTHER: self._ask,
            WizardState.READING_ANOTHER: self._read_another,
        }

    def advance(self, session: Session) -> StepResult:
        """Run one transition, store the next state in session and return it with the output."""
        handler = self._handlers.get(session.state)
        if handler is None:
            raise WizardError(f"Cannot advance from state {session.state.value!r}")

        result = handler(session)
        log.debug(
            "wizard_transition",
            from_state=session.state.value,
            to_state=result.next_state.value,
            fields=len(session.payload),
        )
        session.state = result.next_state
        return result

    def _read_line(self) -> str:
        line = self._input.read_line()
        if line is None:
            raise InputExhausted("No more input")
        return line

    def _start(self, session: Session) -> StepResult:
        return StepResult(WizardState.ASKING_FOR_KEY, STARTING)

    def _ask(self, session: Session) -> StepResult:
        template, next_state = QUESTIONS[session.state]
        text = template.format(number=len(session.payload) + 1, key=session.current_key)
        return StepResult(next_state, text)

    def _read_key(self, session: Session) -> StepResult:
        session.current_key = self._read_line()
        return StepResult(WizardState.ASKING_FOR_VALUE)

    def _read_value(self, session: Session) -> StepResult:
        value = self._read_line()
        try:
            self._validators.ensure_valid(session.current_key, value)
        except InvalidFieldValue as e:
            return StepResult(WizardState.ASKING_FOR_VALUE, INVALID_VALUE.format(key=e.field_name))

        session.payload[session.current_key] = value
        session.current_key = ""
        return StepResult(WizardState.VALIDATING)

    def _validate(self, session: Session) -> StepResult:
        if session.missing_fields:
            return StepResult(WizardState.ASKING_FOR_KEY)
        return StepResult(WizardState.ASKING_FOR_MORE_DATA)

    def _read_more_data(self, session: Session) -> StepResult:
        if is_yes(self._read_line()):
            return StepResult(WizardState.ASKING_FOR_KEY)

        self._emit_token(session)
        return StepResult(WizardState.ASKING_ANOTHER, TOKEN_COPIED)

    def _read_another(self, session: Session) -> StepResult:
        if is_yes(self._read_line()):
            return StepResult(WizardState.START)
        return StepResult(WizardState.DONE)

    def _emit_token(self, session: Session) -> None:
        """Sign the payload and put the token on the clipboard."""
        try:
            token = self._signer.sign(dict(session.payload), session.secret)
        except Exception as e:
            raise CollaboratorFailure("signer", str(e)) from e

        try:
            self._clipboard.copy(token)
        except Exception as e:
            raise CollaboratorFailure("clipboard", str(e)) from e

        log.info("token_copied", fields=list(session.payload))
