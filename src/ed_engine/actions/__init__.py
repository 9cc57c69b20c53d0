"""Command handlers reused by the interpreter modes."""

from .command import run_command
from .display import advance_line, number_lines, print_lines
from .edit import begin_text_input, commit_text_input, delete_lines, substitute
from .session import (
    quit_hint,
    reset_session,
    show_help,
    toggle_prompt,
    toggle_verbose_errors,
    write_buffer,
)

__all__ = [
    "run_command",
    "advance_line",
    "print_lines",
    "number_lines",
    "begin_text_input",
    "commit_text_input",
    "delete_lines",
    "substitute",
    "quit_hint",
    "reset_session",
    "write_buffer",
    "show_help",
    "toggle_verbose_errors",
    "toggle_prompt",
]
