"""Wizard runner - drives the conversation engine until the session is done."""

from collections.abc import Callable

import structlog

from src.application.wizard.engine import ConversationEngine
from src.domain.entities.session import Session
from src.domain.entities.wizard_state import WizardState
from src.domain.errors import CollaboratorFailure, InputExhausted

log = structlog.get_logger()

INPUT_ENDED = "Input ended before the wizard finished."


class WizardRunner:
    """Repeats engine transitions and writes their output."""

    def __init__(
        self,
        engine: ConversationEngine,
        write: Callable[[str], None] = print,
    ) -> None:
        self._engine = engine
        self._write = write

    def run(self, session: Session) -> int:
        """Run session to completion. Returns process exit code (0 = done, 1 = failed)."""
        log.info("wizard_started", required=sorted(session.required_fields))
        while session.state is not WizardState.DONE:
            try:
                result = self._engine.advance(session)
            except InputExhausted:
                log.warning("wizard_input_exhausted", state=session.state.value)
                self._write(INPUT_ENDED)
                return 1
            except CollaboratorFailure as e:
                log.error(
                    "wizard_collaborator_failed",
                    collaborator=e.collaborator,
                    reason=e.reason,
                )
                self._write(f"Token generation failed: {e}")
                return 1

            if result.output:
                self._write(result.output)

        log.info("wizard_finished")
        return 0
