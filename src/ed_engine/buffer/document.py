"""Line storage for ed sessions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class LineBuffer:
    """Mutable list-of-lines document.

    Unlike a character-level editor document, an empty buffer here really
    holds zero lines; ``ed`` distinguishes "no lines" from "one empty line".
    Every mutation bumps ``version`` and marks the buffer dirty.
    """

    _lines: List[str] = field(default_factory=list)
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "LineBuffer":
        return cls(_lines=[str(line) for line in lines])

    @classmethod
    def from_text(cls, text: str) -> "LineBuffer":
        """Split on ``\\n`` only, keeping a trailing empty line if present."""

        return cls(_lines=text.split("\n"))

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def to_list(self) -> List[str]:
        return list(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __bool__(self) -> bool:
        return bool(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]

    def set_line(self, index: int, text: str) -> None:
        self._lines[index] = text
        self._touch()

    def lines_between(self, start: int, end: int) -> List[str]:
        """Return 0-based lines ``[start, end)``."""

        return self._lines[start:end]

    def splice(self, index: int, delete_count: int, new_lines: Iterable[str] = ()) -> None:
        """Replace ``delete_count`` lines at ``index`` with ``new_lines``.

        ``index`` follows slice rules, so values past the end append and
        negative values count back from the end.
        """

        if index < 0:
            index = max(0, len(self._lines) + index)
        self._lines[index : index + delete_count] = list(new_lines)
        self._touch()

    def clear(self) -> None:
        self._lines = []
        self._touch()

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True
