"""
Alias sources used to bulk-import abbreviations.

``ShellAliasSource`` asks the user's shell for its aliases and
``GitAliasSource`` asks git for its configured aliases. Both return a plain
name -> command mapping.
"""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from typing import Callable

logger = logging.getLogger(__name__)

AliasSource = Callable[[], dict[str, str]]


def parse_shell_aliases(output: str) -> dict[str, str]:
    """Parse the output of the shell's ``alias`` builtin.

    Handles the zsh form ``name='value'`` and the bash form
    ``alias name='value'``.
    """
    aliases: dict[str, str] = {}
    for line in output.splitlines():
        line = line.strip()
        if line.startswith("alias "):
            line = line[len("alias "):].lstrip()
        name, sep, value = line.partition("=")
        if not sep or not name:
            continue
        try:
            words = shlex.split(value)
        except ValueError as e:
            logger.warning(f"Skipping alias {name!r}: {e}")
            continue
        # Quoting can keep leading whitespace, e.g. `alias x='  ls'`
        aliases[name] = " ".join(words).lstrip()
    return aliases


def parse_git_aliases(output: str) -> dict[str, str]:
    """Parse ``git config --get-regexp ^alias\\.`` output."""
    aliases: dict[str, str] = {}
    for line in output.splitlines():
        key, _, value = line.partition(" ")
        if not key.startswith("alias.") or not value:
            continue
        aliases[key[len("alias."):]] = value.lstrip()
    return aliases


def _run(cmd: list[str]) -> str | None:
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=10)
    except (OSError, subprocess.TimeoutExpired) as e:
        logger.warning(f"Could not run {cmd[0]}: {e}")
        return None
    return result.stdout


class ShellAliasSource:
    """Aliases defined in the user's interactive shell."""

    def __init__(self, shell: str | None = None):
        self.shell = shell or os.environ.get("SHELL", "/bin/sh")

    def __call__(self) -> dict[str, str]:
        output = _run([self.shell, "-i", "-c", "alias"])
        return parse_shell_aliases(output) if output else {}


class GitAliasSource:
    """Aliases from the user's git configuration."""

    def __call__(self) -> dict[str, str]:
        output = _run(["git", "config", "--get-regexp", r"^alias\."])
        return parse_git_aliases(output) if output else {}
