"""Utility modules for abbrkit."""

from abbrkit.utils.aliases import (
    AliasSource,
    GitAliasSource,
    ShellAliasSource,
    parse_git_aliases,
    parse_shell_aliases,
)

__all__ = [
    "AliasSource",
    "GitAliasSource",
    "ShellAliasSource",
    "parse_git_aliases",
    "parse_shell_aliases",
]
