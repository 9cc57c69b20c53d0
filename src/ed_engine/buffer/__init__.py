"""Line buffer, cursor state, and host-boundary types."""

from .document import LineBuffer
from .state import BufferState
from .sync import BufferMirror, BufferSource
from .validation import ensure_range, require_lines

__all__ = [
    "LineBuffer",
    "BufferState",
    "BufferMirror",
    "BufferSource",
    "ensure_range",
    "require_lines",
]
