"""Console I/O adapters."""

from src.infrastructure.console.console_input import ConsoleInput

__all__ = ["ConsoleInput"]
