"""
Command loader - discovers and loads the builtin abbr verbs.

Each verb lives in its own subdirectory of ``builtins`` with an
__init__.py that registers itself with the command registry:

    # builtins/list/__init__.py
    from abbrkit.cli.commands.registry import command_registry

    @command_registry.register("list", List, "List words", flags=["-l", "--list"])
    def cmd_list(ctx, command):
        ...
"""

from __future__ import annotations

import logging
from importlib import import_module
from pathlib import Path

logger = logging.getLogger(__name__)

# Package builtins directory
PACKAGE_BUILTINS_DIR = Path(__file__).parent / "builtins"
BUILTINS_PACKAGE = f"{__package__}.builtins"

_loaded = False


def discover_commands(commands_dir: Path) -> list[str]:
    """
    Discover command packages in the given directory.

    Args:
        commands_dir: Directory to search

    Returns:
        Sorted names of subdirectories holding an __init__.py.
    """
    if not commands_dir.is_dir():
        logger.warning(f"Commands path is not a directory: {commands_dir}")
        return []

    names = []
    for subdir in sorted(commands_dir.iterdir()):
        if not subdir.is_dir():
            continue
        # Skip hidden and private directories
        if subdir.name.startswith((".", "_")):
            continue
        if (subdir / "__init__.py").exists():
            names.append(subdir.name)
        else:
            logger.debug(f"Skipping {subdir.name}: no __init__.py")
    return names


def load_builtin_commands() -> int:
    """
    Import every builtin command once.

    Returns:
        Number of command modules imported by this call.
    """
    global _loaded
    if _loaded:
        return 0

    total_loaded = 0
    for name in discover_commands(PACKAGE_BUILTINS_DIR):
        import_module(f"{BUILTINS_PACKAGE}.{name}")
        total_loaded += 1
        logger.debug(f"Loaded command: {name}")

    _loaded = True
    return total_loaded
