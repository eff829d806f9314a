"""Clipboard adapter backed by pyperclip."""

import pyperclip


class PyperclipClipboard:
    """Copies text to the system clipboard.

    pyperclip raises PyperclipException when no clipboard mechanism is
    available (headless session, missing xclip/xsel); it is not caught here.
    """

    def copy(self, text: str) -> None:
        pyperclip.copy(text)
