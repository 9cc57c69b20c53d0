"""Print-style commands: ``p``, ``n``, and bare-newline stepping."""

from __future__ import annotations

from ed_engine.buffer import ensure_range, require_lines
from ed_engine.errors import EdError, ErrorKind
from ed_engine.modes.base_mode import EdResult, ModeContext
from ed_engine.parsing import AddressRange, ParsedCommand


def _collect(context: ModeContext, start: int, end: int) -> list[str]:
    ensure_range(context.document, start, end)
    lines = context.document.lines_between(start - 1, end)
    context.state.set_cursor(end - 1)
    return lines


def print_range(context: ModeContext, start: int, end: int) -> str:
    if not context.document and (start or end):
        raise EdError(ErrorKind.EMPTY_BUFFER)
    return "\n".join(_collect(context, start, end))


def number_range(context: ModeContext, start: int, end: int) -> str:
    require_lines(context.document)
    lines = _collect(context, start, end)
    return "\n".join(
        f"{number}\t{line}" for number, line in enumerate(lines, start=start)
    )


def print_lines(
    context: ModeContext, command: ParsedCommand, address: AddressRange
) -> EdResult:
    del command
    return EdResult.text(print_range(context, address.start, address.end))


def number_lines(
    context: ModeContext, command: ParsedCommand, address: AddressRange
) -> EdResult:
    del command
    return EdResult.text(number_range(context, address.start, address.end))


def advance_line(context: ModeContext) -> EdResult:
    """Step to the next line, wrapping to the top, and print it."""

    require_lines(context.document)
    following = (context.state.current_line + 1) % context.document.line_count
    return EdResult.text(print_range(context, following + 1, following + 1))


__all__ = [
    "print_range",
    "number_range",
    "print_lines",
    "number_lines",
    "advance_line",
]
