"""Show command - print abbreviations as re-playable abbr commands."""
from __future__ import annotations

from dataclasses import dataclass

from abbrkit.cli.commands.registry import AbbrCommand, CommandContext, command_registry


@dataclass
class Show(AbbrCommand):
    pass


@command_registry.register(
    "show",
    Show,
    "Show all abbreviations in a manner suitable for export and import",
    usage="abbr --show|-s",
    flags=["-s", "--show"],
)
def cmd_show(ctx: CommandContext, command: Show) -> None:
    """Print ``abbr -a -U -- WORD EXPANSION`` lines, universal ones first."""
    for scope, abbr in ctx.store:
        print(f"abbr -a {scope.flag} -- {abbr.word} {abbr.expansion}")
