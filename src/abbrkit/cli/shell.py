#!/usr/bin/env python3
"""
Interactive shell with abbreviation expansion (abbr-shell command).

Lines starting with ``abbr`` run in-process, so global abbreviations live
as long as the shell. Every other line runs through the system shell.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
import sys
from pathlib import Path
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.auto_suggest import AutoSuggestFromHistory
from prompt_toolkit.history import FileHistory
from prompt_toolkit.key_binding import KeyBindings, merge_key_bindings

from abbrkit.cli.abbr import open_store, run_abbr, setup_logging
from abbrkit.cli.commands import CommandContext
from abbrkit.cli.hook import create_abbreviation_bindings
from abbrkit.config import Config, get_config
from abbrkit.core import AbbreviationStore, InitializationError
from abbrkit.logging import log_exception

logger = logging.getLogger(__name__)

EXIT_COMMANDS = {"exit", "quit"}

# ANSI escape codes for colored text
GREY = "\033[90m"
RESET = "\033[0m"


def feedback(msg: str) -> None:
    """Print feedback message in grey to stderr."""
    print(f"{GREY}{msg}{RESET}", file=sys.stderr)


def run_line(line: str, ctx: Optional[CommandContext]) -> int:
    """Run one command line.

    Args:
        line: The accepted input line.
        ctx: Command context, or None when abbreviations are unavailable.

    Returns:
        Exit status of the command.
    """
    try:
        argv = shlex.split(line)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if argv and argv[0] == "abbr":
        if ctx is None:
            feedback("abbr: abbreviations are unavailable in this session")
            return 1
        return run_abbr(argv[1:], ctx)

    shell = os.environ.get("SHELL") or None
    try:
        return subprocess.run(line, shell=True, executable=shell).returncode
    except OSError as e:
        print(f"Error running command: {e}", file=sys.stderr)
        return 1


def build_key_bindings(store: Optional[AbbreviationStore], cfg: Config) -> KeyBindings:
    bindings = KeyBindings()

    @bindings.add("c-c")
    def _(event):
        """Handle Ctrl+C - cancel current input."""
        event.app.current_buffer.reset()

    if store is None or not cfg.get("default_bindings"):
        return bindings
    return merge_key_bindings([bindings, create_abbreviation_bindings(store)])


def repl(store: Optional[AbbreviationStore], cfg: Config) -> int:
    """Run the interactive shell until exit or Ctrl+D.

    Args:
        store: Abbreviation store, or None to run without expansion.
        cfg: Loaded configuration.
    """
    history_file = Path(cfg.get("history_file")).expanduser()
    history_file.parent.mkdir(parents=True, exist_ok=True)

    session: PromptSession = PromptSession(
        history=FileHistory(str(history_file)),
        auto_suggest=AutoSuggestFromHistory(),
        key_bindings=build_key_bindings(store, cfg),
        enable_history_search=True,
    )
    ctx = CommandContext(store) if store is not None else None

    status = 0
    while True:
        try:
            line = session.prompt("abbr$ ").strip()
        except KeyboardInterrupt:
            continue
        except EOFError:
            break

        if not line:
            continue
        if line in EXIT_COMMANDS:
            break
        status = run_line(line, ctx)

    return status


def main() -> int:
    """Main entry point for the abbr-shell CLI."""
    cfg = get_config()
    setup_logging(cfg)

    store: Optional[AbbreviationStore] = None
    try:
        store = open_store(cfg)
    except InitializationError as e:
        # The shell stays usable, only without abbreviations
        feedback(log_exception(e, "Abbreviations disabled"))

    return repl(store, cfg)


if __name__ == "__main__":
    sys.exit(main())
