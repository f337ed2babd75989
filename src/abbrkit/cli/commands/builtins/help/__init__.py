"""Help command - print usage."""
from __future__ import annotations

from dataclasses import dataclass

from abbrkit.cli.commands.registry import AbbrCommand, CommandContext, command_registry
from abbrkit.cli.usage import format_usage


@dataclass
class Help(AbbrCommand):
    max_args = None


@command_registry.register(
    "help",
    Help,
    "Show this help",
    usage="abbr --help|-h",
    flags=["-h", "--help"],
)
def cmd_help(ctx: CommandContext, command: Help) -> None:
    print(format_usage(command_registry))
