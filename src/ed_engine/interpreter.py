"""Session facade for the ed command interpreter."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ed_engine.buffer import BufferMirror, BufferState, LineBuffer
from ed_engine.modes import EdResult, ModeBus, ModeContext, ModeState, TextInputState
from ed_engine.modes.mode_manager import ModeManager
from ed_engine.runtime import SessionConfig, telemetry


class Ed:
    """One editing session over an in-memory line buffer.

    Feed it one line at a time through :meth:`process`; it never performs
    I/O. The caller renders ``output``/``error``, keeps reading while
    ``status == "input"``, and externalises ``buffer`` when one is returned.
    """

    def __init__(
        self,
        initial_lines: Optional[Iterable[str]] = None,
        *,
        config: Optional[SessionConfig] = None,
        bus: Optional[ModeBus] = None,
        name: str = "default",
    ) -> None:
        self.name = name
        document = LineBuffer.from_lines(initial_lines or ())
        state = BufferState(current_line=max(0, document.line_count - 1))
        self.context = ModeContext(
            document=document,
            state=state,
            config=config.copy() if config else SessionConfig(),
            bus=bus or ModeBus(),
        )
        self.manager = ModeManager(self.context)

    def process(self, line: str) -> EdResult:
        with telemetry.span(
            "ed::process",
            metadata={"session": self.name, "mode": self.context.mode.name},
        ):
            return self.manager.handle_line(line)

    def get_prompt(self) -> str:
        if self.input_mode:
            return ""
        return "*" if self.context.config.show_prompt else ""

    @property
    def buffer(self) -> List[str]:
        return self.context.document.to_list()

    @property
    def current_line(self) -> int:
        return self.context.state.current_line

    @current_line.setter
    def current_line(self, index: int) -> None:
        self.context.state.set_cursor(index)

    @property
    def state(self) -> ModeState:
        return self.context.mode

    @property
    def input_mode(self) -> bool:
        return isinstance(self.context.mode, TextInputState)

    @property
    def show_prompt(self) -> bool:
        return self.context.config.show_prompt

    @property
    def verbose_errors(self) -> bool:
        return self.context.config.verbose_errors

    @property
    def last_error(self) -> Optional[str]:
        return self.context.state.last_error

    @property
    def bus(self) -> ModeBus:
        return self.context.bus

    def mirror(self) -> BufferMirror:
        return self.context.mirror()


__all__ = ["Ed"]
