"""Git-populate command - import git aliases as g-prefixed abbreviations."""
from __future__ import annotations

from dataclasses import dataclass

from abbrkit.cli.commands.builtins.populate import import_abbreviations
from abbrkit.cli.commands.registry import AbbrCommand, CommandContext, command_registry
from abbrkit.utils import GitAliasSource


@dataclass
class GitPopulate(AbbrCommand):
    pass


@command_registry.register(
    "git-populate",
    GitPopulate,
    "Add abbreviations for all git aliases: WORDs are prefixed with g, EXPANSIONs with git",
    usage="abbr --git-populate|-i [SCOPE]",
    flags=["-i", "--git-populate"],
)
def cmd_git_populate(ctx: CommandContext, command: GitPopulate) -> None:
    source = ctx.git_alias_source or GitAliasSource()
    entries = {f"g{name}": f"git {value}" for name, value in source().items()}
    import_abbreviations(ctx.store, command.scope, entries)
