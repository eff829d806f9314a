"""Clipboard adapters."""

from src.infrastructure.clipboard.pyperclip_adapter import PyperclipClipboard

__all__ = ["PyperclipClipboard"]
