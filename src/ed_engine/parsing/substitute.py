"""The ``s/pattern/replacement/g`` sub-grammar and replacement expansion.

Pattern and replacement cannot contain ``/``; there is no escape for it.
Replacement text is literal except for the ``$`` references:

``$$``  a literal dollar sign
``$&``  the whole match
``$```  text before the match
``$'``  text after the match
``$n``  capture group ``n`` (one or two digits)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Match, Pattern

from ed_engine.errors import EdError, ErrorKind

from .patterns import compile_pattern

_GRAMMAR = re.compile(r"s/([^/]*)/([^/]*)/(g?)")
_REFERENCE = re.compile(r"\$(\$|&|`|'|\d{1,2})")


@dataclass(frozen=True, slots=True)
class SubstituteSpec:
    pattern_text: str
    replacement: str
    global_: bool = False

    def compile(self) -> Pattern[str]:
        return compile_pattern(self.pattern_text, kind=ErrorKind.INVALID_REGEX)

    def apply(self, pattern: Pattern[str], line: str) -> str:
        count = 0 if self.global_ else 1
        return pattern.sub(make_replacer(self.replacement), line, count=count)


def parse_substitute(tail: str) -> SubstituteSpec:
    """Parse the text following the ``s`` command letter."""

    parts = _GRAMMAR.fullmatch(f"s{tail}")
    if parts is None:
        raise EdError(ErrorKind.INVALID_SUBSTITUTE, detail=tail)
    return SubstituteSpec(
        pattern_text=parts.group(1),
        replacement=parts.group(2),
        global_=parts.group(3) == "g",
    )


def _group_reference(match: Match[str], digits: str) -> str | None:
    groups = match.re.groups
    if len(digits) == 2 and 0 < int(digits) <= groups:
        return match.group(int(digits)) or ""
    if 0 < int(digits[0]) <= groups:
        return (match.group(int(digits[0])) or "") + digits[1:]
    return None


def expand_replacement(match: Match[str], template: str) -> str:
    def substitute(reference: Match[str]) -> str:
        token = reference.group(1)
        if token == "$":
            return "$"
        if token == "&":
            return match.group(0)
        if token == "`":
            return match.string[: match.start()]
        if token == "'":
            return match.string[match.end() :]
        expanded = _group_reference(match, token)
        return reference.group(0) if expanded is None else expanded

    return _REFERENCE.sub(substitute, template)


def make_replacer(template: str) -> Callable[[Match[str]], str]:
    if "$" not in template:
        return lambda _match: template
    return lambda match: expand_replacement(match, template)


__all__ = [
    "SubstituteSpec",
    "parse_substitute",
    "expand_replacement",
    "make_replacer",
]
