"""Erase command - remove an abbreviation."""
from __future__ import annotations

from dataclasses import dataclass

from abbrkit.cli.commands.registry import AbbrCommand, CommandContext, command_registry
from abbrkit.core import Scope


@dataclass
class Erase(AbbrCommand):
    word: str

    min_args = 1
    max_args = 1
    arg_error = "Expected one argument"

    @classmethod
    def from_args(cls, scope: Scope, args: list[str]) -> "Erase":
        return cls(scope, args[0])


@command_registry.register(
    "erase",
    Erase,
    "Erase the abbreviation WORD",
    usage="abbr --erase|-e [SCOPE] WORD",
    flags=["-e", "--erase"],
)
def cmd_erase(ctx: CommandContext, command: Erase) -> None:
    ctx.store.remove(command.scope, command.word)
