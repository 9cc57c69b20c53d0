"""Cursor and error tracking state for an ed session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class BufferState:
    """Mutable cursor info tied to a LineBuffer."""

    current_line: int = 0
    last_error: Optional[str] = None

    def set_cursor(self, index: int) -> None:
        self.current_line = max(0, index)

    def reset(self) -> None:
        self.current_line = 0
