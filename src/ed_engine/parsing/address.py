"""Resolve ed address text into 1-based line ranges."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Sequence

from ed_engine.errors import EdError, ErrorKind

from .patterns import compile_pattern

_LEADING_INTEGER = re.compile(r"\s*([+-]?[0-9]+)")


@dataclass(frozen=True, slots=True)
class AddressRange:
    """Resolved ``(start, end)`` pair of 1-based line numbers."""

    start: int
    end: int

    @classmethod
    def single(cls, line: int) -> "AddressRange":
        return cls(start=line, end=line)


class AddressResolver:
    """Turns address strings into ranges against a snapshot of lines.

    Bounds are not checked here; the consuming command validates the final
    range, so ``0a`` and ``$a`` stay expressible.
    """

    def __init__(self, lines: Sequence[str], current_line: int) -> None:
        self._lines = lines
        self._current_line = current_line

    def resolve(self, address: str) -> AddressRange:
        if not address:
            return AddressRange.single(self._current_line + 1)
        if address in {",", "%"}:
            return AddressRange(start=1, end=len(self._lines) or 1)
        if "," in address:
            return self._resolve_pair(address)
        return AddressRange.single(self.resolve_single(address, self._current_line))

    def _resolve_pair(self, address: str) -> AddressRange:
        fields = address.split(",")
        left = fields[0] or "1"
        right = fields[1] or "$"
        start = self.resolve_single(left, self._current_line)
        end = self.resolve_single(right, start - 1, no_wrap=True)
        if start > end:
            raise EdError(ErrorKind.INVALID_RANGE, detail=f"{start},{end}")
        return AddressRange(start=start, end=end)

    def resolve_single(
        self, address: str, reference_line: int, *, no_wrap: bool = False
    ) -> int:
        """Resolve one address relative to the 0-based ``reference_line``."""

        if address in {".", ""}:
            return reference_line + 1
        if address == "$":
            return len(self._lines)

        number = _LEADING_INTEGER.match(address)
        if number:
            try:
                return int(number.group(1))
            except ValueError as exc:
                raise EdError(ErrorKind.INVALID_ADDRESS, detail=address[:32]) from exc

        if address.startswith("/") and address.endswith("/"):
            return self._search(address[1:-1], reference_line, no_wrap=no_wrap)

        raise EdError(ErrorKind.INVALID_ADDRESS, detail=address)

    def _search(self, pattern_text: str, reference_line: int, *, no_wrap: bool) -> int:
        pattern = compile_pattern(pattern_text, kind=ErrorKind.INVALID_ADDRESS_REGEX)
        total = len(self._lines)

        candidates = list(range(max(0, reference_line + 1), total))
        if not no_wrap:
            candidates.extend(range(0, min(reference_line + 1, total)))

        for index in candidates:
            if pattern.search(self._lines[index]):
                return index + 1
        raise EdError(ErrorKind.NO_MATCH, detail=pattern_text)


__all__ = ["AddressRange", "AddressResolver"]
