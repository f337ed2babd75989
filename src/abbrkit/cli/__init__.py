"""
CLI module for the abbrkit package.

Provides the abbr command, the abbr-expand helper, the expansion key
bindings and the interactive abbr-shell.
"""

from abbrkit.cli.abbr import expand_main, main, run_abbr
from abbrkit.cli.hook import create_abbreviation_bindings, expand_buffer
from abbrkit.cli.shell import repl, run_line

__all__ = [
    "main",
    "expand_main",
    "run_abbr",
    "create_abbreviation_bindings",
    "expand_buffer",
    "repl",
    "run_line",
]
