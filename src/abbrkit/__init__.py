"""
abbrkit - fish shell-like abbreviations.

Abbreviations are words that expand into longer phrases as you type. They
live in one of two scopes: global abbreviations belong to the running
session, universal abbreviations are saved to disk and shared by every
running session.

Example usage:
    from abbrkit import AbbreviationStore, Scope, resolve

    store = AbbreviationStore.open(source_path, snapshot_path)
    store.set(Scope.SHARED, "gco", "git checkout")
    resolve(store, "gco")  # -> "git checkout"
"""

__version__ = "0.1.0"

from abbrkit.core import (
    AbbrError,
    Abbreviation,
    AbbreviationStore,
    ConflictError,
    InitializationError,
    NotFoundError,
    Scope,
    UniversalSync,
    UsageError,
    expand_text,
    extract_word,
    resolve,
)

__all__ = [
    # Version
    "__version__",
    # Store
    "AbbreviationStore",
    "UniversalSync",
    "Abbreviation",
    "Scope",
    # Expansion
    "expand_text",
    "extract_word",
    "resolve",
    # Exceptions
    "AbbrError",
    "UsageError",
    "NotFoundError",
    "ConflictError",
    "InitializationError",
]
