"""Letter dispatch for parsed ed command lines."""

from __future__ import annotations

from typing import Callable, Dict

from ed_engine.errors import EdError, ErrorKind
from ed_engine.modes.base_mode import EdResult, ModeContext
from ed_engine.parsing import AddressRange, ParsedCommand

from . import display, edit, session

CommandHandler = Callable[[ModeContext, ParsedCommand, AddressRange], EdResult]


def run_command(
    context: ModeContext, command: ParsedCommand, address: AddressRange
) -> EdResult:
    handler = _COMMAND_HANDLERS.get(command.letter)
    if handler is None:
        context.bus.emit("command.unknown", command.letter)
        raise EdError(ErrorKind.UNKNOWN_COMMAND, detail=command.letter)
    return handler(context, command, address)


_COMMAND_HANDLERS: Dict[str, CommandHandler] = {
    "a": edit.begin_text_input,
    "i": edit.begin_text_input,
    "c": edit.begin_text_input,
    "d": edit.delete_lines,
    "p": display.print_lines,
    "n": display.number_lines,
    "s": edit.substitute,
    "q": session.quit_hint,
    "Q": session.reset_session,
    "w": session.write_buffer,
    "h": session.show_help,
    "H": session.toggle_verbose_errors,
    "P": session.toggle_prompt,
}


__all__ = ["CommandHandler", "run_command"]
