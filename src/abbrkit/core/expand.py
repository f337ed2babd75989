"""
Expansion matching.

The word to expand is the text between the last delimiter before the
cursor and the cursor itself.
"""

from __future__ import annotations

import re

from abbrkit.core.datamodels import Scope
from abbrkit.core.store import AbbreviationStore

# Characters that end a word: space , ; | & newline tab
DELIMITERS = " ,;|&\n\t"

_WORD_AT_END = re.compile(f"[^{re.escape(DELIMITERS)}]*\\Z")


def extract_word(text_before_cursor: str) -> str:
    """Return the maximal delimiter-free suffix of the text.

    Examples:
        >>> extract_word("git gco")
        'gco'
        >>> extract_word("echo a,gco")
        'gco'
        >>> extract_word("ls ")
        ''
    """
    match = _WORD_AT_END.search(text_before_cursor)
    return match.group(0) if match else ""


def resolve(store: AbbreviationStore, word: str) -> str | None:
    """Return the expansion for word, session scope first."""
    if not word:
        return None
    expansion = store.get(Scope.SESSION, word)
    if expansion is None:
        expansion = store.get(Scope.SHARED, word)
    return expansion


def expand_text(store: AbbreviationStore, text_before_cursor: str) -> tuple[str, str] | None:
    """Find the abbreviation that ends the text.

    Returns:
        Tuple of (word, expansion), or None if the word before the cursor
        is empty or not an abbreviation.
    """
    word = extract_word(text_before_cursor)
    expansion = resolve(store, word)
    if expansion is None:
        return None
    return word, expansion
