"""Error taxonomy shared by the parser, resolver, and command handlers."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Every failure the interpreter can report, valued by its message."""

    EMPTY_BUFFER = "empty buffer"
    INVALID_ADDRESS = "invalid address"
    INVALID_RANGE = "invalid address range"
    NO_MATCH = "no match"
    INVALID_REGEX = "invalid regex"
    INVALID_ADDRESS_REGEX = "invalid regex in address"
    INVALID_SUBSTITUTE = "invalid substitute command"
    UNKNOWN_COMMAND = "unknown command"

    @property
    def message(self) -> str:
        return self.value


class EdError(RuntimeError):
    """Raised by parsing and execution code; caught at ``Ed.process``."""

    def __init__(self, kind: ErrorKind, *, detail: str | None = None) -> None:
        super().__init__(kind.message)
        self.kind = kind
        self.detail = detail


def format_error(kind: ErrorKind, verbose: bool) -> str:
    if verbose:
        return f"? {kind.message}"
    return "?"


__all__ = ["ErrorKind", "EdError", "format_error"]
