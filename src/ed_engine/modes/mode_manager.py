"""Mode manager routing each input line to the active mode."""

from __future__ import annotations

from typing import Dict, Type

from ed_engine.errors import EdError
from ed_engine.runtime import telemetry

from .base_mode import EdResult, Mode, ModeContext
from .command_mode import CommandMode
from .input_mode import TextInputMode


class ModeManager:
    """Owns the mode handlers and converts raised errors into results."""

    def __init__(self, context: ModeContext, *, register_defaults: bool = True) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self.logger = telemetry.get_logger("ed_engine.modes")
        if register_defaults:
            self.register_mode(CommandMode)
            self.register_mode(TextInputMode)

    @property
    def active_mode(self) -> Mode:
        name = self.context.mode.name
        try:
            return self._modes[name]
        except KeyError as exc:
            raise RuntimeError(f"No mode registered for '{name}'") from exc

    def register_mode(self, mode_cls: Type[Mode]) -> Mode:
        mode = mode_cls(self.context)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        return mode

    def handle_line(self, line: str) -> EdResult:
        mode = self.active_mode
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"mode": mode.name, "length": len(line)},
        ) as handle:
            try:
                result = mode.handle_line(line)
            except EdError as exc:
                handle.add_metadata("error", exc.kind.name)
                self.logger.debug(f"{mode.name} rejected line: {exc.kind.message}")
                result = self.context.fail(exc.kind, exc.detail)
        return result
