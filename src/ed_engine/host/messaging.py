"""Payloads broadcast by the palette when a session finishes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional

from ed_engine.modes import ModeBus

from .sources import SessionMode

WRITE_EVENT = "palette.write"
HIGHLIGHT_EVENT = "palette.highlight"
CLOSE_EVENT = "palette.close"
OUTPUT_EVENT = "palette.output"

PALETTE_EVENTS = (WRITE_EVENT, HIGHLIGHT_EVENT, CLOSE_EVENT, OUTPUT_EVENT)

HIGHLIGHT_SUFFIX = "/H"


@dataclass(frozen=True, slots=True)
class PalettePayload:
    """What every listening frame should do once the palette closes."""

    type: Literal["write", "highlight"]
    buffer: List[str] = field(default_factory=list)
    session_mode: Optional[SessionMode] = None
    regex_string: Optional[str] = None

    @classmethod
    def write(cls, buffer: List[str], session_mode: SessionMode) -> "PalettePayload":
        return cls(type="write", buffer=list(buffer), session_mode=session_mode)

    @classmethod
    def highlight(cls, regex_string: str) -> "PalettePayload":
        return cls(type="highlight", regex_string=regex_string)


def highlight_request(command: str) -> Optional[str]:
    """Regex text of a ``/regex/H`` palette command, else ``None``."""

    if (
        len(command) > 2
        and command.startswith("/")
        and command.endswith(HIGHLIGHT_SUFFIX)
    ):
        return command[1 : -len(HIGHLIGHT_SUFFIX)]
    return None


def broadcast(bus: ModeBus, event: str, payload: object | None = None) -> None:
    if event not in PALETTE_EVENTS:
        raise ValueError(f"Unknown palette event '{event}'")
    bus.emit(event, payload)


__all__ = [
    "WRITE_EVENT",
    "HIGHLIGHT_EVENT",
    "CLOSE_EVENT",
    "OUTPUT_EVENT",
    "PALETTE_EVENTS",
    "PalettePayload",
    "highlight_request",
    "broadcast",
]
