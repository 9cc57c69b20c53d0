"""Session commands that do not address lines: q, Q, w, h, H, P."""

from __future__ import annotations

from ed_engine.modes.base_mode import EdResult, ModeContext
from ed_engine.parsing import AddressRange, ParsedCommand

QUIT_HINT = (
    "Type 'w' to save (simulated) and 'q' again to exit.\n"
    "Or 'Q' to quit without saving."
)
RESET_MESSAGE = "Simulator reset."
WRITE_MESSAGE = "File saved (simulated)."

HELP_TEXT = """
ed commands:
 a      - Append text after the addressed line
 i      - Insert text before the addressed line
 c      - Change lines
 d      - Delete lines
 p      - Print lines
 n      - Number and print lines
 s/old/new/g - Substitute (g for global)
 w      - Write/Save (simulated)
 q      - Warn before quitting
 Q      - Quit without warning (resets simulator)
 .      - Exit input mode / refer to current line
 $      - Refer to last line
 1,$p   - Print all lines
 /regex/ - Search for regex (forward)
 H      - Toggle verbose error messages
 P      - Toggle prompt
"""


def quit_hint(context: ModeContext, command: ParsedCommand, address: AddressRange) -> EdResult:
    del context, command, address
    return EdResult.text(QUIT_HINT)


def reset_session(
    context: ModeContext, command: ParsedCommand, address: AddressRange
) -> EdResult:
    del command, address
    context.document.clear()
    context.state.reset()
    context.bus.emit("session.reset", None)
    return EdResult.text(RESET_MESSAGE)


def write_buffer(
    context: ModeContext, command: ParsedCommand, address: AddressRange
) -> EdResult:
    del command, address
    lines = context.document.to_list()
    context.bus.emit("session.write", context.mirror())
    return EdResult(output=WRITE_MESSAGE, buffer=lines)


def show_help(context: ModeContext, command: ParsedCommand, address: AddressRange) -> EdResult:
    del context, command, address
    return EdResult.text(HELP_TEXT)


def toggle_verbose_errors(
    context: ModeContext, command: ParsedCommand, address: AddressRange
) -> EdResult:
    del command, address
    config = context.config
    config.verbose_errors = not config.verbose_errors
    state = "enabled" if config.verbose_errors else "disabled"
    return EdResult.text(f"Verbose errors {state}.")


def toggle_prompt(
    context: ModeContext, command: ParsedCommand, address: AddressRange
) -> EdResult:
    del command, address
    context.config.show_prompt = not context.config.show_prompt
    return EdResult.text()


__all__ = [
    "HELP_TEXT",
    "QUIT_HINT",
    "RESET_MESSAGE",
    "WRITE_MESSAGE",
    "quit_hint",
    "reset_session",
    "write_buffer",
    "show_help",
    "toggle_verbose_errors",
    "toggle_prompt",
]
