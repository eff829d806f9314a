"""Dependency Injection Container - wires the wizard's collaborators."""

import secrets
from functools import cached_property

from src.application.wizard import ConversationEngine, WizardRunner
from src.domain.entities.session import Session
from src.domain.ports.config import AppConfig
from src.domain.ports.wizard import ClipboardPort, InputPort, SignerPort
from src.domain.services.field_validators import FieldValidatorRegistry, get_default_registry
from src.infrastructure.config import load_config


class Container:
    """Dependency Injection Container with lazy initialization.

    All dependencies are created on first access and cached. Tests pass a
    config and swap collaborators by assigning attributes before first use:

        container = Container(config)
        container.clipboard = FakeClipboard()
        container.runner.run(container.create_session())
    """

    def __init__(self, config: AppConfig | None = None):
        """Initialize container with optional config override."""
        self._config_override = config

    @cached_property
    def config(self) -> AppConfig:
        """Application configuration."""
        if self._config_override:
            return self._config_override
        return load_config()

    @cached_property
    def signer(self) -> SignerPort:
        """Token signer for the configured algorithm."""
        from src.infrastructure.signing import JWTSigner

        return JWTSigner(self.config.signing.algorithm)

    @cached_property
    def clipboard(self) -> ClipboardPort:
        """System clipboard."""
        from src.infrastructure.clipboard import PyperclipClipboard

        return PyperclipClipboard()

    @cached_property
    def input_source(self) -> InputPort:
        """Line reader over stdin."""
        from src.infrastructure.console import ConsoleInput

        return ConsoleInput()

    @cached_property
    def validators(self) -> FieldValidatorRegistry:
        """Field validator registry."""
        return get_default_registry()

    @cached_property
    def engine(self) -> ConversationEngine:
        """Conversation engine."""
        return ConversationEngine(
            signer=self.signer,
            clipboard=self.clipboard,
            input_source=self.input_source,
            validators=self.validators,
        )

    @cached_property
    def runner(self) -> WizardRunner:
        """Driving loop writing prompts to stdout."""
        return WizardRunner(self.engine)

    def create_session(self) -> Session:
        """Fresh session: configured secret (or a random one) and required fields."""
        signing = self.config.signing
        if signing.secret:
            secret = signing.secret.encode("utf-8")
        else:
            secret = secrets.token_bytes(signing.secret_bytes)
        return Session(
            secret=secret,
            required_fields=frozenset(self.config.wizard.required_fields),
        )
