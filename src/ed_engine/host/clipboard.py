"""System clipboard access through pyperclip."""

from __future__ import annotations

from typing import List

import pyperclip

from ed_engine.runtime import telemetry

CLIPBOARD_READ_ERROR = "Error reading clipboard."


def read_clipboard_lines() -> List[str]:
    """Clipboard text split on newlines, or a one-line diagnostic on failure."""

    try:
        text = pyperclip.paste()
    except pyperclip.PyperclipException as exc:
        telemetry.record_event(
            "clipboard.read_failed", level="warning", data={"reason": str(exc)}
        )
        return [CLIPBOARD_READ_ERROR]
    return (text or "").split("\n")


def write_clipboard_lines(lines: List[str]) -> None:
    pyperclip.copy("\n".join(lines))


__all__ = ["CLIPBOARD_READ_ERROR", "read_clipboard_lines", "write_clipboard_lines"]
