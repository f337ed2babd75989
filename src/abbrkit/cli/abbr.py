#!/usr/bin/env python3
"""
CLI entry points for the abbr and abbr-expand commands.

Each invocation is its own process, so global (session) abbreviations only
live for the duration of the command. Use abbr-shell for a long-running
session.
"""

from __future__ import annotations

import sys

from abbrkit.cli.commands import CommandContext, command_registry, parse_args
from abbrkit.config import Config, get_config
from abbrkit.core import AbbrError, AbbreviationStore, InitializationError, resolve
from abbrkit.logging import configure_file_logging

HELP_HINT = "For help run abbr --help"


def report_error(error: AbbrError) -> None:
    """Print an error the way abbr reports it."""
    print(error.format(), file=sys.stderr)
    print(HELP_HINT, file=sys.stderr)


def open_store(cfg: Config) -> AbbreviationStore:
    """Open the abbreviation store configured by cfg.

    Raises:
        InitializationError: If the universals or snapshot file cannot be
            created.
    """
    return AbbreviationStore.open(cfg.source_path, cfg.snapshot_file)


def setup_logging(cfg: Config) -> None:
    try:
        configure_file_logging(cfg.get("log_level"))
    except OSError as e:
        print(f"Warning: file logging disabled ({e})", file=sys.stderr)


def run_abbr(argv: list[str], ctx: CommandContext) -> int:
    """Parse and run one abbr command line.

    Args:
        argv: Arguments after ``abbr``.
        ctx: Store and alias sources the command runs against.

    Returns:
        0 on success, 1 if the command failed.
    """
    try:
        command = parse_args(argv)
        command_registry.execute(ctx, command)
    except AbbrError as e:
        report_error(e)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the abbr CLI."""
    argv = sys.argv[1:] if argv is None else argv
    cfg = get_config()
    setup_logging(cfg)

    try:
        store = open_store(cfg)
    except InitializationError as e:
        report_error(e)
        return 1

    return run_abbr(argv, CommandContext(store))


def expand_main(argv: list[str] | None = None) -> int:
    """Main entry point for abbr-expand: print the expansion of one word."""
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print("abbr-expand requires exactly one argument", file=sys.stderr)
        return 1

    cfg = get_config()
    setup_logging(cfg)
    try:
        store = open_store(cfg)
        expansion = resolve(store, argv[0])
    except InitializationError as e:
        report_error(e)
        return 1

    if expansion is None:
        return 1
    print(expansion)
    return 0


if __name__ == "__main__":
    sys.exit(main())
