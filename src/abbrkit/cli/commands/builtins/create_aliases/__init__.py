"""Create-aliases command - export abbreviations as zsh global aliases."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from abbrkit.cli.commands.registry import AbbrCommand, CommandContext, command_registry
from abbrkit.core import AbbrError, Scope

logger = logging.getLogger(__name__)


@dataclass
class CreateAliases(AbbrCommand):
    destination: Optional[str] = None

    max_args = 1

    @classmethod
    def from_args(cls, scope: Scope, args: list[str]) -> "CreateAliases":
        return cls(scope, args[0] if args else None)


def alias_definition(word: str, expansion: str) -> str:
    # Close the quote, emit an escaped quote, reopen
    quoted = expansion.replace("'", "'\\''")
    return f"alias -g {word}='{quoted}'"


@command_registry.register(
    "create-aliases",
    CreateAliases,
    "Output alias commands for the abbreviations of SCOPE, or append them to DESTINATION_FILE",
    usage="abbr --create-aliases|-c [SCOPE] [DESTINATION_FILE]",
    flags=["-c", "--create-aliases"],
)
def cmd_create_aliases(ctx: CommandContext, command: CreateAliases) -> None:
    lines = [alias_definition(word, expansion) for word, expansion in ctx.store.items(command.scope)]

    if command.destination is None:
        for line in lines:
            print(line)
        return

    path = Path(command.destination).expanduser()
    try:
        with path.open("a", encoding="utf-8") as f:
            for line in lines:
                f.write(line + "\n")
    except OSError as e:
        raise AbbrError(f"Cannot write {path}: {e.strerror}", flag="-c") from e
    logger.info(f"Appended {len(lines)} alias definitions to {path}")
