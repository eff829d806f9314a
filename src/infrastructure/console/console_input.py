"""Console input - reads user answers line by line."""

import sys
from typing import TextIO

from src.domain.errors import InputExhausted


class ConsoleInput:
    """Reads lines from a text stream (stdin by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def read_line(self) -> str:
        """Read one line without trailing newline. Raises InputExhausted at EOF."""
        stream = self._stream or sys.stdin
        line = stream.readline()
        if not line:
            raise InputExhausted("End of input")
        return line.rstrip("\r\n")
