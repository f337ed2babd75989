"""Rename command - move an abbreviation to a new word."""
from __future__ import annotations

from dataclasses import dataclass

from abbrkit.cli.commands.registry import AbbrCommand, CommandContext, command_registry
from abbrkit.core import Scope


@dataclass
class Rename(AbbrCommand):
    old: str
    new: str

    min_args = 2
    max_args = 2
    arg_error = "Requires exactly two arguments"

    @classmethod
    def from_args(cls, scope: Scope, args: list[str]) -> "Rename":
        return cls(scope, args[0], args[1])


@command_registry.register(
    "rename",
    Rename,
    "Rename an abbreviation from OLD_WORD to NEW_WORD, replacing NEW_WORD if it exists",
    usage="abbr --rename|-r [SCOPE] OLD_WORD NEW_WORD",
    flags=["-r", "--rename"],
)
def cmd_rename(ctx: CommandContext, command: Rename) -> None:
    ctx.store.rename(command.scope, command.old, command.new)
