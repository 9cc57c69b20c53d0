"""Base classes and shared utilities for interpreter modes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from ed_engine.buffer import BufferMirror, BufferState, LineBuffer
from ed_engine.errors import ErrorKind, format_error
from ed_engine.runtime import SessionConfig, telemetry

from .state import CommandState, ModeState

INPUT_STATUS = "input"


@dataclass(slots=True)
class EdResult:
    """Outcome of one ``process`` call.

    Exactly one of these shapes is produced: ``output`` alone, ``error``
    alone, ``status`` (optionally with an empty ``output``) while in
    text-input mode, or ``output`` plus the full ``buffer`` for ``w``.
    """

    output: Optional[str] = None
    error: Optional[str] = None
    status: Optional[str] = None
    buffer: Optional[List[str]] = None

    @classmethod
    def text(cls, output: str = "") -> "EdResult":
        return cls(output=output)

    @classmethod
    def failure(cls, message: str) -> "EdResult":
        return cls(error=message)

    @classmethod
    def awaiting_input(cls, *, echo: bool = False) -> "EdResult":
        return cls(output="" if echo else None, status=INPUT_STATUS)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def awaits_input(self) -> bool:
        return self.status == INPUT_STATUS

    def as_dict(self) -> Dict[str, object]:
        shape: Dict[str, object] = {}
        if self.output is not None:
            shape["output"] = self.output
        if self.error is not None:
            shape["error"] = self.error
        if self.status is not None:
            shape["status"] = self.status
        if self.buffer is not None:
            shape["buffer"] = list(self.buffer)
        return shape


class ModeBus:
    """Minimal event bus letting modes and hosts exchange structured signals."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


@dataclass(slots=True)
class ModeContext:
    """Everything a mode or command handler may read or mutate."""

    document: LineBuffer
    state: BufferState
    config: SessionConfig
    bus: ModeBus = field(default_factory=ModeBus)
    mode: ModeState = field(default_factory=CommandState)

    def switch_mode(self, mode: ModeState) -> None:
        previous = self.mode.name
        self.mode = mode
        if previous != mode.name:
            telemetry.record_event(
                "ed.mode", level="debug", data={"from": previous, "to": mode.name}
            )
            self.bus.emit("mode.switch", mode.name)

    def fail(self, kind: ErrorKind, detail: Optional[str] = None) -> EdResult:
        self.state.last_error = kind.message
        data = {"kind": kind.name, "mode": self.mode.name}
        if detail:
            data["detail"] = detail
        telemetry.record_event("ed.error", level="debug", data=data)
        self.bus.emit("ed.error", kind)
        return EdResult.failure(format_error(kind, self.config.verbose_errors))

    def mirror(self) -> BufferMirror:
        return BufferMirror(
            lines=self.document.to_list(),
            current_line=self.state.current_line,
            version=self.document.version,
            attributes={"mode": self.mode.name},
        )


class Mode:
    """Base class both interpreter modes inherit from."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def handle_line(self, line: str) -> EdResult:  # pragma: no cover - abstract override
        raise NotImplementedError


__all__ = [
    "EdResult",
    "INPUT_STATUS",
    "Mode",
    "ModeBus",
    "ModeContext",
]
