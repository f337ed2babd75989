"""Add command - define a new abbreviation."""
from __future__ import annotations

from dataclasses import dataclass

from abbrkit.cli.commands.registry import AbbrCommand, CommandContext, command_registry
from abbrkit.core import Scope


@dataclass
class Add(AbbrCommand):
    word: str
    expansion: str

    min_args = 2
    max_args = None
    arg_error = "Requires at least two arguments"

    @classmethod
    def from_args(cls, scope: Scope, args: list[str]) -> "Add":
        # Unquoted multi-word expansions arrive as separate arguments
        return cls(scope, args[0], " ".join(args[1:]))


@command_registry.register(
    "add",
    Add,
    "Add a new abbreviation, causing WORD to be expanded to EXPANSION",
    usage="abbr --add|-a [SCOPE] WORD EXPANSION",
    flags=["-a", "--add"],
)
def cmd_add(ctx: CommandContext, command: Add) -> None:
    ctx.store.set(command.scope, command.word, command.expansion)
