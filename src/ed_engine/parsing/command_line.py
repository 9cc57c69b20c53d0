"""Split a command line into address text, command letter, and tail."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_COMMAND = "p"


@dataclass(frozen=True, slots=True)
class ParsedCommand:
    """Raw pieces of one command line, before address resolution."""

    address: str
    letter: str
    tail: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.address and not self.letter


def _is_command_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def parse_command_line(text: str) -> ParsedCommand:
    """Find the first letter outside a ``/regex/`` span.

    Everything before it is address text and everything after it is the
    tail. A line with address text but no letter prints.
    """

    inside_regex = False
    for index, char in enumerate(text):
        if char == "/":
            inside_regex = not inside_regex
            continue
        if not inside_regex and _is_command_letter(char):
            return ParsedCommand(
                address=text[:index], letter=char, tail=text[index + 1 :]
            )

    if not text:
        return ParsedCommand(address="", letter="")
    return ParsedCommand(address=text, letter=DEFAULT_COMMAND)


__all__ = ["ParsedCommand", "parse_command_line", "DEFAULT_COMMAND"]
