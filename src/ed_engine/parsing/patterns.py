"""Compile user-supplied regular expressions."""

from __future__ import annotations

import re
from typing import Pattern

from ed_engine.errors import EdError, ErrorKind


def compile_pattern(text: str, *, kind: ErrorKind = ErrorKind.INVALID_REGEX) -> Pattern[str]:
    try:
        return re.compile(text)
    except (re.error, OverflowError, RecursionError) as exc:
        raise EdError(kind, detail=str(exc)) from exc


__all__ = ["compile_pattern"]
