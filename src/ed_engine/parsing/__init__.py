"""Command-line, address, and substitute parsing."""

from .address import AddressRange, AddressResolver
from .command_line import ParsedCommand, parse_command_line
from .patterns import compile_pattern
from .substitute import SubstituteSpec, expand_replacement, parse_substitute

__all__ = [
    "AddressRange",
    "AddressResolver",
    "ParsedCommand",
    "parse_command_line",
    "compile_pattern",
    "SubstituteSpec",
    "parse_substitute",
    "expand_replacement",
]
