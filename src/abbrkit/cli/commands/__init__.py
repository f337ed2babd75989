"""
Command system for the abbr command.

Verbs are registered by the modules in ``builtins``; ``parse_args`` turns
a command line into a command object and the registry dispatches it.
"""

from __future__ import annotations

from abbrkit.cli.commands.registry import (
    AbbrCommand,
    CommandContext,
    CommandRegistry,
    command_registry,
)
from abbrkit.cli.commands.loader import load_builtin_commands
from abbrkit.cli.commands.parser import parse_args

__all__ = [
    "AbbrCommand",
    "CommandContext",
    "CommandRegistry",
    "command_registry",
    "load_builtin_commands",
    "parse_args",
]
