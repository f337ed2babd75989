"""List command - print every abbreviated word."""
from __future__ import annotations

from dataclasses import dataclass

from abbrkit.cli.commands.registry import AbbrCommand, CommandContext, command_registry
from abbrkit.core import Scope


@dataclass
class ListWords(AbbrCommand):
    pass


@command_registry.register(
    "list",
    ListWords,
    "List all abbreviated words",
    usage="abbr --list|-l",
    flags=["-l", "--list"],
)
def cmd_list(ctx: CommandContext, command: ListWords) -> None:
    for scope in (Scope.SHARED, Scope.SESSION):
        for word in ctx.store.words(scope):
            print(word)
