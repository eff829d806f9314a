"""Pytest configuration and shared fixtures."""

import logging
from unittest.mock import MagicMock

import pytest
import structlog

from src.application.wizard import ConversationEngine
from src.domain.entities.session import Session
from src.domain.errors import InputExhausted


class ScriptedInput:
    """Input source replaying a fixed list of lines."""

    def __init__(self, *lines: str):
        self.lines = list(lines)
        self.reads = 0

    def read_line(self) -> str:
        if not self.lines:
            raise InputExhausted("script finished")
        self.reads += 1
        return self.lines.pop(0)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to captured streams between tests."""
    yield
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()


@pytest.fixture
def signer():
    """Mock signer returning a fixed token."""
    mock = MagicMock()
    mock.sign.return_value = "header.payload.signature"
    return mock


@pytest.fixture
def clipboard():
    """Mock clipboard."""
    return MagicMock()


@pytest.fixture
def make_input():
    """Factory for scripted input sources."""
    return ScriptedInput


@pytest.fixture
def scripted_input():
    """Empty scripted input; tests append lines."""
    return ScriptedInput()


@pytest.fixture
def engine(signer, clipboard, scripted_input):
    """Engine wired to mocks and scripted input."""
    return ConversationEngine(signer=signer, clipboard=clipboard, input_source=scripted_input)


@pytest.fixture
def session():
    """Session with no required fields."""
    return Session(secret=b"test-secret")
