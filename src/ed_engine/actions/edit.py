"""Buffer-mutating commands: append, insert, change, delete, substitute."""

from __future__ import annotations

from typing import List

from ed_engine.buffer import ensure_range, require_lines
from ed_engine.errors import EdError, ErrorKind
from ed_engine.modes.base_mode import EdResult, ModeContext
from ed_engine.modes.state import PendingOp, TextInputState
from ed_engine.parsing import AddressRange, ParsedCommand, parse_substitute
from ed_engine.runtime import telemetry


def begin_text_input(
    context: ModeContext, command: ParsedCommand, address: AddressRange
) -> EdResult:
    """Capture the op and range; lines arrive later through text-input mode."""

    context.switch_mode(TextInputState(op=PendingOp(command.letter), range=address))
    return EdResult.awaiting_input()


def _splice_point(context: ModeContext, index: int) -> int:
    total = context.document.line_count
    if index < 0:
        return max(0, total + index)
    return min(index, total)


def append_lines(context: ModeContext, lines: List[str], after: int) -> None:
    index = _splice_point(context, after)
    context.document.splice(index, 0, lines)
    context.state.set_cursor(index + len(lines) - 1)


def insert_lines(context: ModeContext, lines: List[str], before: int) -> None:
    index = _splice_point(context, before - 1 if before > 0 else 0)
    context.document.splice(index, 0, lines)
    context.state.set_cursor(index + len(lines) - 1)


def change_lines(context: ModeContext, lines: List[str], start: int, end: int) -> None:
    ensure_range(context.document, start, end)
    context.document.splice(start - 1, end - start + 1, lines)
    context.state.set_cursor(start - 1 + len(lines) - 1)


def commit_text_input(context: ModeContext, pending: TextInputState) -> None:
    lines = list(pending.pending)
    with telemetry.span(
        "ed::commit",
        component="actions",
        metadata={"op": pending.op.name, "lines": len(lines)},
    ):
        if pending.op is PendingOp.APPEND:
            append_lines(context, lines, pending.range.end)
        elif pending.op is PendingOp.INSERT:
            insert_lines(context, lines, pending.range.start)
        else:
            change_lines(context, lines, pending.range.start, pending.range.end)


def delete_lines(
    context: ModeContext, command: ParsedCommand, address: AddressRange
) -> EdResult:
    del command
    document = context.document
    require_lines(document)
    ensure_range(document, address.start, address.end)
    document.splice(address.start - 1, address.end - address.start + 1)
    if document:
        context.state.set_cursor(min(address.start - 1, document.line_count - 1))
    else:
        context.state.reset()
    return EdResult.text()


def substitute(
    context: ModeContext, command: ParsedCommand, address: AddressRange
) -> EdResult:
    spec = parse_substitute(command.tail)
    document = context.document
    require_lines(document)
    pattern = spec.compile()
    ensure_range(document, address.start, address.end)

    last_changed = -1
    for index in range(address.start - 1, address.end):
        original = document.get_line(index)
        updated = spec.apply(pattern, original)
        if updated != original:
            document.set_line(index, updated)
            last_changed = index

    if last_changed < 0:
        raise EdError(ErrorKind.NO_MATCH, detail=spec.pattern_text)
    context.state.set_cursor(last_changed)
    return EdResult.text(document.get_line(last_changed))


__all__ = [
    "begin_text_input",
    "commit_text_input",
    "append_lines",
    "insert_lines",
    "change_lines",
    "delete_lines",
    "substitute",
]
