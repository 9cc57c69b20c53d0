"""Command mode: parse, resolve, and dispatch one ed command line."""

from __future__ import annotations

from ed_engine.actions import advance_line, run_command
from ed_engine.parsing import AddressResolver, parse_command_line
from ed_engine.runtime import telemetry

from .base_mode import EdResult, Mode, ModeContext


class CommandMode(Mode):
    name = "command"

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self.logger = telemetry.get_logger("ed_engine.modes.command")

    def handle_line(self, line: str) -> EdResult:
        text = line.strip()
        if not text:
            return advance_line(self.context)

        command = parse_command_line(text)
        resolver = AddressResolver(
            self.context.document.snapshot(), self.context.state.current_line
        )
        address = resolver.resolve(command.address)
        self.logger.debug(f"dispatch {command.letter!r} over {address.start},{address.end}")
        self.context.bus.emit("command.submit", text)
        return run_command(self.context, command, address)
