"""Validation helpers shared by the command handlers."""

from __future__ import annotations

from ed_engine.errors import EdError, ErrorKind

from .document import LineBuffer


def require_lines(document: LineBuffer) -> None:
    if not document:
        raise EdError(ErrorKind.EMPTY_BUFFER)


def ensure_range(document: LineBuffer, start: int, end: int) -> None:
    """Reject 1-based ranges outside ``1..line_count`` or inverted ones."""

    if start < 1 or end > document.line_count or start > end:
        raise EdError(ErrorKind.INVALID_ADDRESS, detail=f"{start},{end}")
