"""
Abbreviation store with a session scope and a shared scope.

The session scope is a plain dict owned by this process. The shared scope
is a cache of the universals file: every operation on it refreshes the
cache from the snapshot first, and every mutation flushes it back before
returning.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from pydantic import ValidationError

from abbrkit.core.datamodels import Abbreviation, Scope
from abbrkit.core.exceptions import ConflictError, NotFoundError, UsageError
from abbrkit.core.sync import UniversalSync

logger = logging.getLogger(__name__)


def validate(word: str, expansion: str) -> Abbreviation:
    """Validate a word/expansion pair.

    Raises:
        UsageError: If the word is empty or contains whitespace, or the
            expansion is empty, starts with whitespace or contains a
            line break.
    """
    try:
        return Abbreviation(word=word, expansion=expansion)
    except ValidationError as e:
        raise UsageError(f"Invalid abbreviation {word!r}: {e.errors()[0]['msg']}") from e


class AbbreviationStore:
    """Word to expansion mapping in two scopes."""

    def __init__(self, sync: UniversalSync | None = None):
        self.sync = sync
        self._session: dict[str, str] = {}
        self._shared: dict[str, str] = {}

    @classmethod
    def open(cls, source_path: Path, snapshot_path: Path) -> "AbbreviationStore":
        """Create a store and load the shared scope from disk.

        Raises:
            InitializationError: If the universals or snapshot file cannot
                be created.
        """
        store = cls(UniversalSync(source_path, snapshot_path))
        store._shared = store.sync.start()
        return store

    def refresh(self) -> None:
        """Pick up shared abbreviations flushed by other processes."""
        if self.sync is not None:
            self._shared = self.sync.refresh()

    def _scope(self, scope: Scope) -> dict[str, str]:
        if scope is Scope.SHARED:
            self.refresh()
            return self._shared
        return self._session

    def _commit(self, scope: Scope, abbreviations: dict[str, str]) -> None:
        """Replace a scope's contents, flushing the shared scope first.

        Nothing changes in memory if the flush fails.
        """
        if scope is Scope.SHARED:
            if self.sync is not None:
                self.sync.flush(abbreviations)
            self._shared = abbreviations
        else:
            self._session = abbreviations

    def get(self, scope: Scope, word: str) -> str | None:
        return self._scope(scope).get(word)

    def set(self, scope: Scope, word: str, expansion: str) -> None:
        """Add an abbreviation.

        Raises:
            ConflictError: If the word already exists in the scope.
            UsageError: If the word or expansion is invalid.
            InitializationError: If the shared scope cannot be written.
        """
        validate(word, expansion)
        abbreviations = dict(self._scope(scope))
        if word in abbreviations:
            raise ConflictError(f"A {scope.label} abbreviation {word} already exists", flag="-a")
        abbreviations[word] = expansion
        self._commit(scope, abbreviations)
        logger.debug(f"Added {scope.label} abbreviation {word!r}")

    def remove(self, scope: Scope, word: str) -> None:
        """Erase an abbreviation.

        Raises:
            NotFoundError: If the word does not exist in the scope.
            InitializationError: If the shared scope cannot be written.
        """
        abbreviations = dict(self._scope(scope))
        if word not in abbreviations:
            raise NotFoundError(f"No {scope.label} abbreviation named {word}", flag="-e")
        del abbreviations[word]
        self._commit(scope, abbreviations)
        logger.debug(f"Erased {scope.label} abbreviation {word!r}")

    def rename(self, scope: Scope, old: str, new: str) -> None:
        """Rename an abbreviation.

        An existing abbreviation named ``new`` is overwritten without a
        conflict check, unlike :meth:`set`.

        Raises:
            NotFoundError: If ``old`` does not exist in the scope.
            UsageError: If ``new`` is not a valid word.
            InitializationError: If the shared scope cannot be written.
        """
        abbreviations = dict(self._scope(scope))
        if old not in abbreviations:
            raise NotFoundError(f"No {scope.label} abbreviation named {old}", flag="-r")
        validate(new, abbreviations[old])
        abbreviations[new] = abbreviations.pop(old)
        self._commit(scope, abbreviations)
        logger.debug(f"Renamed {scope.label} abbreviation {old!r} to {new!r}")

    def items(self, scope: Scope) -> list[tuple[str, str]]:
        return list(self._scope(scope).items())

    def words(self, scope: Scope) -> list[str]:
        return list(self._scope(scope))

    def __iter__(self) -> Iterator[tuple[Scope, Abbreviation]]:
        """Iterate over every abbreviation, shared scope first."""
        for scope in (Scope.SHARED, Scope.SESSION):
            for word, expansion in self.items(scope):
                yield scope, Abbreviation(word=word, expansion=expansion)
