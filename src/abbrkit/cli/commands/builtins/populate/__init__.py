"""Populate command - import the shell's aliases as abbreviations."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from abbrkit.cli.commands.registry import AbbrCommand, CommandContext, command_registry
from abbrkit.core import AbbreviationStore, ConflictError, Scope, UsageError
from abbrkit.utils import ShellAliasSource

logger = logging.getLogger(__name__)


@dataclass
class Populate(AbbrCommand):
    pass


def import_abbreviations(store: AbbreviationStore, scope: Scope, entries: dict[str, str]) -> int:
    """Add each entry to the scope, skipping words that already exist.

    Returns:
        Number of abbreviations added.
    """
    added = 0
    for word, expansion in entries.items():
        try:
            store.set(scope, word, expansion)
        except (ConflictError, UsageError) as e:
            logger.debug(f"Skipping {word!r}: {e}")
            continue
        added += 1
    logger.info(f"Imported {added} of {len(entries)} {scope.label} abbreviations")
    return added


@command_registry.register(
    "populate",
    Populate,
    "Add abbreviations for all aliases",
    usage="abbr --populate|-p [SCOPE]",
    flags=["-p", "--populate"],
)
def cmd_populate(ctx: CommandContext, command: Populate) -> None:
    source = ctx.alias_source or ShellAliasSource()
    import_abbreviations(ctx.store, command.scope, source())
