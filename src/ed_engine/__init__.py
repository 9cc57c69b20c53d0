"""UI-agnostic ed line-editor engine."""

from .errors import EdError, ErrorKind
from .interpreter import Ed
from .modes import EdResult
from .runtime import SessionConfig

__all__ = [
    "Ed",
    "EdResult",
    "EdError",
    "ErrorKind",
    "SessionConfig",
    "actions",
    "adapters",
    "buffer",
    "host",
    "modes",
    "parsing",
    "runtime",
]

__version__ = "0.1.0"
