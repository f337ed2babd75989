"""
Parser for the abbr command line.

    abbr [VERB] [SCOPE] ARGS...

Options are read until ``--`` or the first positional argument. At most
one verb flag and one scope flag may be given; anything else fails before
a single operation runs.
"""

from __future__ import annotations

from abbrkit.cli.commands.loader import load_builtin_commands
from abbrkit.cli.commands.registry import AbbrCommand, CommandEntry, command_registry
from abbrkit.core import Scope, UsageError

SCOPE_FLAGS = {
    "-g": Scope.SESSION,
    "--global": Scope.SESSION,
    "-U": Scope.SHARED,
    "--universal": Scope.SHARED,
}

END_OF_OPTIONS = "--"


def _is_option(arg: str) -> bool:
    return arg.startswith("-") and arg != "-"


def default_verb(args: list[str]) -> str:
    """Verb used when none is given: add with arguments, show without."""
    return "add" if args else "show"


def parse_args(argv: list[str]) -> AbbrCommand:
    """Parse an abbr command line into a command.

    Args:
        argv: Arguments after ``abbr``.

    Returns:
        The AbbrCommand subclass instance for the selected verb.

    Raises:
        UsageError: Unknown option, two verbs, two scopes, or a wrong
            number of arguments for the verb.
    """
    load_builtin_commands()

    verb: CommandEntry | None = None
    scope: Scope | None = None
    index = 0

    while index < len(argv):
        arg = argv[index]
        if arg == END_OF_OPTIONS:
            index += 1
            break
        if not _is_option(arg):
            break

        if arg in SCOPE_FLAGS:
            if scope is not None:
                raise UsageError("Illegal combination of options")
            scope = SCOPE_FLAGS[arg]
        else:
            entry = command_registry.by_flag(arg)
            if entry is None:
                raise UsageError(f"Unknown option '{arg}'")
            if verb is not None:
                raise UsageError("Illegal combination of options")
            verb = entry
        index += 1

    args = argv[index:]
    if verb is None:
        verb = command_registry.get(default_verb(args))

    verb.command_type.check_args(verb.short_flag, args)
    return verb.command_type.from_args(scope or Scope.SHARED, args)
