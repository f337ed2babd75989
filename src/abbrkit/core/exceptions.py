"""
Exception classes for abbreviation management.
"""

from __future__ import annotations


class AbbrError(Exception):
    """Base exception for abbreviation errors.

    Args:
        message: Human readable description.
        flag: The command-line flag the error belongs to (e.g. "-a"), used
            when the error is printed as ``abbr -a: message``.
    """

    def __init__(self, message: str, flag: str | None = None):
        super().__init__(message)
        self.flag = flag

    def format(self) -> str:
        """Format the error the way the abbr command prints it."""
        prefix = f"abbr {self.flag}" if self.flag else "abbr"
        return f"{prefix}: {self}"


class UsageError(AbbrError):
    """Bad or conflicting options, wrong argument count, or an invalid word."""


class NotFoundError(AbbrError):
    """Abbreviation not found in the requested scope."""


class ConflictError(AbbrError):
    """Abbreviation already exists in the requested scope."""


class InitializationError(AbbrError):
    """The store could not create its directories or files."""
