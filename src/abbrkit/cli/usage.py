"""
Usage text for the abbr command.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from abbrkit.cli.commands.registry import CommandRegistry

DESCRIPTION = """\
abbr manages abbreviations - user-defined words that are replaced with
longer phrases after they are entered.

For example, a frequently-run command like git checkout can be abbreviated
to gco. After entering gco and pressing [Space], the full text git checkout
will appear in the command line. To prevent expansion, press [Ctrl-Space]
in place of [Space]. [Enter] expands and runs the command line."""

SCOPES = """\
  -g, --global      Session abbreviation, available only in the current shell
  -U, --universal   Universal abbreviation (default), immediately available
                    to all shells and saved across restarts"""

EXAMPLES = """\
  abbr -a -g gco git checkout   Add a global abbreviation gco
  abbr l less                   Add a universal abbreviation l (-a is implied)
  abbr -c ~/aliases             Append alias definitions to ~/aliases
  abbr -e -g gco                Erase the global abbreviation gco
  abbr -r l le                  Rename the universal abbreviation l to le"""

NOTES = """\
WORD cannot contain whitespace. The verb options are mutually exclusive, as
are the scope options. Without a verb, abbr adds when given arguments and
shows otherwise. abbr-expand WORD prints the expansion of WORD: the global
one if it exists, otherwise the universal one."""


def format_usage(registry: "CommandRegistry") -> str:
    """Build the --help text from the registered verbs."""
    synopsis = "\n".join(f"  {entry.usage}" for entry in registry.all_commands())
    options = "\n".join(
        f"  {', '.join(entry.flags):<22}{entry.description}"
        for entry in registry.all_commands()
    )
    return (
        "abbr: fish shell-like abbreviations\n\n"
        f"Synopsis\n{synopsis}\n\n"
        f"Description\n{DESCRIPTION}\n\n"
        f"Options\n{options}\n\n"
        f"Scope\n{SCOPES}\n\n"
        f"Examples\n{EXAMPLES}\n\n"
        f"Internals\n{NOTES}"
    )
