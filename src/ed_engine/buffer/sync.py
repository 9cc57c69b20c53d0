"""Adapter boundary types for exchanging buffers with host sources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Protocol


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot describing the current buffer state."""

    lines: List[str]
    current_line: int
    version: int
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class BufferSource(Protocol):
    """Protocol describing how a host container feeds and receives buffers."""

    def read_lines(self) -> List[str]:
        """Return the initial buffer contents for a new session."""
        ...

    def write_lines(self, lines: List[str]) -> None:
        """Store a finished buffer back into the host container."""
        ...
