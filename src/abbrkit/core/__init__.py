"""
Core module for the abbrkit package.

Provides the two-scope abbreviation store, its file synchronization and the
expansion matcher.
"""

from abbrkit.core.datamodels import Abbreviation, Scope, UniversalSnapshot
from abbrkit.core.exceptions import (
    AbbrError,
    ConflictError,
    InitializationError,
    NotFoundError,
    UsageError,
)
from abbrkit.core.expand import DELIMITERS, expand_text, extract_word, resolve
from abbrkit.core.store import AbbreviationStore, validate
from abbrkit.core.sync import UniversalSync

__all__ = [
    # Store
    "AbbreviationStore",
    "UniversalSync",
    "validate",
    # Models
    "Abbreviation",
    "Scope",
    "UniversalSnapshot",
    # Expansion
    "DELIMITERS",
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
