"""Text-input mode entered by ``a``, ``i`` and ``c``."""

from __future__ import annotations

from ed_engine.actions import commit_text_input

from .base_mode import EdResult, Mode
from .state import CommandState, TextInputState

TERMINATOR = "."


class TextInputMode(Mode):
    name = "input"

    def handle_line(self, line: str) -> EdResult:
        pending = self.context.mode
        if not isinstance(pending, TextInputState):
            raise RuntimeError("text-input mode active without a pending edit")

        if line != TERMINATOR:
            pending.pending.append(line)
            return EdResult.awaiting_input(echo=True)

        # command mode even if the commit raises
        self.context.switch_mode(CommandState())
        commit_text_input(self.context, pending)
        return EdResult.text()
