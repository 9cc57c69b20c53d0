"""Mode state variant, result type, and shared mode context.

The concrete modes live in ``command_mode``/``input_mode`` and are wired up by
``ed_engine.modes.mode_manager``.
"""

from .base_mode import INPUT_STATUS, EdResult, Mode, ModeBus, ModeContext
from .state import CommandState, ModeState, PendingOp, TextInputState

__all__ = [
    "EdResult",
    "INPUT_STATUS",
    "Mode",
    "ModeBus",
    "ModeContext",
    "CommandState",
    "TextInputState",
    "ModeState",
    "PendingOp",
]
