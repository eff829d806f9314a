"""Token wizard: conversation engine and its driving loop."""

from src.application.wizard.engine import ConversationEngine, is_yes
from src.application.wizard.runner import WizardRunner

__all__ = [
    "ConversationEngine",
    "WizardRunner",
    "is_yes",
]
