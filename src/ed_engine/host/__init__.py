"""Host-side collaborators: sources, palette payloads, highlighting."""

from .clipboard import CLIPBOARD_READ_ERROR, read_clipboard_lines, write_clipboard_lines
from .editable import html_to_lines, lines_to_html
from .highlight import HighlightSpan, Highlighter, TextSegment, find_highlights
from .messaging import PalettePayload, highlight_request
from .sources import (
    ClipboardSource,
    EditableRegion,
    EditableSource,
    FileBackedSource,
    PaletteSession,
    SessionMode,
    TextField,
    TextFieldSource,
    open_session,
)

__all__ = [
    "CLIPBOARD_READ_ERROR",
    "read_clipboard_lines",
    "write_clipboard_lines",
    "html_to_lines",
    "lines_to_html",
    "HighlightSpan",
    "Highlighter",
    "TextSegment",
    "find_highlights",
    "PalettePayload",
    "highlight_request",
    "ClipboardSource",
    "EditableRegion",
    "EditableSource",
    "FileBackedSource",
    "PaletteSession",
    "SessionMode",
    "TextField",
    "TextFieldSource",
    "open_session",
]
