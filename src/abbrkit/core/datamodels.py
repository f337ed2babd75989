"""
Pydantic models for abbreviations, scopes and the universal snapshot.
"""

from __future__ import annotations

import re
from enum import Enum

from pydantic import BaseModel, Field, field_validator

_WHITESPACE = re.compile(r"\s")


class Scope(str, Enum):
    """Where an abbreviation lives.

    SESSION is private to the running process (``-g``/``--global``).
    SHARED is persisted and visible to every process (``-U``/``--universal``).
    """

    SESSION = "session"
    SHARED = "shared"

    @property
    def label(self) -> str:
        """Name used in messages and in ``abbr --show`` output."""
        return "global" if self is Scope.SESSION else "universal"

    @property
    def flag(self) -> str:
        return "-g" if self is Scope.SESSION else "-U"


class Abbreviation(BaseModel):
    """A word and the phrase it expands to."""

    word: str
    expansion: str

    @field_validator("word")
    @classmethod
    def _check_word(cls, value: str) -> str:
        if not value or _WHITESPACE.search(value):
            raise ValueError("word must be non-empty and contain no whitespace")
        return value

    @field_validator("expansion")
    @classmethod
    def _check_expansion(cls, value: str) -> str:
        # Must survive a round trip through a `WORD EXPANSION` line
        if not value:
            raise ValueError("expansion must be non-empty")
        if value[0].isspace():
            raise ValueError("expansion cannot start with whitespace")
        if "\n" in value or "\r" in value:
            raise ValueError("expansion cannot contain line breaks")
        return value

    def to_line(self) -> str:
        """Render as a line of the universals source file."""
        return f"{self.word} {self.expansion}"

    @classmethod
    def from_line(cls, line: str) -> "Abbreviation | None":
        """Parse a ``WORD EXPANSION`` line.

        The first run of whitespace separates the word from the expansion,
        the rest of the line is kept verbatim. Returns None for lines that
        have no expansion.
        """
        line = line.rstrip("\r\n").lstrip()
        parts = re.split(r"\s+", line, maxsplit=1)
        if len(parts) < 2 or not parts[1]:
            return None
        return cls(word=parts[0], expansion=parts[1])


class UniversalSnapshot(BaseModel):
    """Serialized image of the shared scope, exchanged between processes."""

    abbreviations: dict[str, str] = Field(default_factory=dict)
