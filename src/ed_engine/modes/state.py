"""Explicit mode variant stored on the session."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Union

from ed_engine.parsing import AddressRange


class PendingOp(str, Enum):
    """Edit operation waiting for its text-input lines."""

    APPEND = "a"
    INSERT = "i"
    CHANGE = "c"


@dataclass(frozen=True, slots=True)
class CommandState:
    name: str = "command"


@dataclass(slots=True)
class TextInputState:
    """Text-input mode with the edit captured when it was entered."""

    op: PendingOp
    range: AddressRange
    pending: List[str] = field(default_factory=list)
    name: str = "input"


ModeState = Union[CommandState, TextInputState]

__all__ = ["PendingOp", "CommandState", "TextInputState", "ModeState"]
