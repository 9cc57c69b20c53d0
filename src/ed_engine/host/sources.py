"""Host containers an editing session reads from and writes back to."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional

from ed_engine.buffer import BufferSource
from ed_engine.interpreter import Ed
from ed_engine.runtime import SessionConfig

from .clipboard import read_clipboard_lines, write_clipboard_lines
from .editable import html_to_lines, lines_to_html


class SessionMode(str, Enum):
    """Where the buffer came from, and therefore where it goes back to."""

    TEXTFIELD_VALUE = "textfield-value"
    TEXTFIELD_EDITABLE = "textfield-editable"
    CLIPBOARD_EDIT = "clipboard-edit"


@dataclass(slots=True)
class TextField:
    """Plain-text field holding a ``value`` string."""

    value: str = ""


@dataclass(slots=True)
class EditableRegion:
    """Rich-text region holding an ``inner_html`` string."""

    inner_html: str = ""


class TextFieldSource:
    mode = SessionMode.TEXTFIELD_VALUE

    def __init__(self, field: TextField) -> None:
        self.field = field

    def read_lines(self) -> List[str]:
        return self.field.value.split("\n")

    def write_lines(self, lines: List[str]) -> None:
        self.field.value = "\n".join(lines)


class EditableSource:
    mode = SessionMode.TEXTFIELD_EDITABLE

    def __init__(self, region: EditableRegion) -> None:
        self.region = region

    def read_lines(self) -> List[str]:
        return html_to_lines(self.region.inner_html)

    def write_lines(self, lines: List[str]) -> None:
        self.region.inner_html = lines_to_html(lines)


class ClipboardSource:
    mode = SessionMode.CLIPBOARD_EDIT

    def read_lines(self) -> List[str]:
        return read_clipboard_lines()

    def write_lines(self, lines: List[str]) -> None:
        write_clipboard_lines(lines)


class FileBackedSource:
    """Wraps a text-field or editable source whose contents live in a file."""

    def __init__(self, path: Path, *, editable: bool = False) -> None:
        self.path = path
        text = path.read_text(encoding="utf-8") if path.exists() else ""
        if editable:
            self.inner: TextFieldSource | EditableSource = EditableSource(
                EditableRegion(inner_html=text)
            )
        else:
            self.inner = TextFieldSource(TextField(value=text))
        self.mode = self.inner.mode

    def read_lines(self) -> List[str]:
        return self.inner.read_lines()

    def write_lines(self, lines: List[str]) -> None:
        self.inner.write_lines(lines)
        if isinstance(self.inner, EditableSource):
            self.path.write_text(self.inner.region.inner_html, encoding="utf-8")
        else:
            self.path.write_text(self.inner.field.value, encoding="utf-8")


@dataclass
class PaletteSession:
    """An interpreter bound to the source its buffer was read from."""

    ed: Ed
    source: BufferSource
    mode: SessionMode
    finished: bool = False

    def write_back(self, lines: List[str]) -> None:
        self.source.write_lines(list(lines))
        self.finished = True


def open_session(
    source: BufferSource, config: Optional[SessionConfig] = None
) -> PaletteSession:
    lines = source.read_lines()
    mode = getattr(source, "mode", SessionMode.CLIPBOARD_EDIT)
    ed = Ed(lines, config=config, name=SessionMode(mode).value)
    return PaletteSession(ed=ed, source=source, mode=SessionMode(mode))


__all__ = [
    "SessionMode",
    "TextField",
    "EditableRegion",
    "TextFieldSource",
    "EditableSource",
    "ClipboardSource",
    "FileBackedSource",
    "PaletteSession",
    "open_session",
]
