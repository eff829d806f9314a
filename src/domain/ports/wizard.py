"""Wizard Ports - interfaces for the collaborators the engine calls."""

from collections.abc import Mapping
from typing import Protocol


class SignerPort(Protocol):
    """Interface for token signers (JWT, etc.)."""

    def sign(self, payload: Mapping[str, str], secret: bytes) -> str:
        """Sign payload with secret and return the encoded token."""
        ...


class ClipboardPort(Protocol):
    """Interface for clipboard sinks."""

    def copy(self, text: str) -> None:
        """Put text on the clipboard. May raise when no clipboard is available."""
        ...


class InputPort(Protocol):
    """Interface for line-based user input."""

    def read_line(self) -> str | None:
        """Read one line without its trailing newline.

        Raises InputExhausted (or returns None) at end of input.
        """
        ...
