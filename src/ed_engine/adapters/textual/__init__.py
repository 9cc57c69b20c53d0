"""Textual host for the ed palette."""

from .controller import PaletteController, PaletteUIHooks

__all__ = ["PaletteController", "PaletteUIHooks"]
