"""
Key bindings that expand abbreviations as the user types.

- Space expands the word before the cursor, then inserts a space.
- Ctrl+Space inserts a plain space.
- Enter expands, clears any auto-suggestion, then accepts the line.

While incremental search is active the roles of Space and Ctrl+Space are
swapped: Space is literal and Ctrl+Space expands.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from prompt_toolkit.filters import is_searching
from prompt_toolkit.key_binding import KeyBindings

from abbrkit.core import AbbrError, expand_text

if TYPE_CHECKING:
    from prompt_toolkit.buffer import Buffer
    from prompt_toolkit.key_binding import KeyPressEvent

    from abbrkit.core import AbbreviationStore

logger = logging.getLogger(__name__)


def expand_buffer(buffer: "Buffer", store: "AbbreviationStore") -> bool:
    """Replace the abbreviation before the cursor with its expansion.

    Returns:
        True if the buffer was changed.
    """
    match = expand_text(store, buffer.document.text_before_cursor)
    if match is None:
        return False
    word, expansion = match
    buffer.delete_before_cursor(count=len(word))
    buffer.insert_text(expansion)
    return True


def _expand(event: "KeyPressEvent", store: "AbbreviationStore") -> None:
    try:
        changed = expand_buffer(event.app.current_buffer, store)
    except AbbrError as e:
        # Keep the prompt alive; the key still does its non-expanding part
        logger.warning(f"Expansion unavailable: {e}")
        return
    if changed:
        # Redraw so syntax highlighting picks up the new text
        event.app.invalidate()


def expand_and_continue(event: "KeyPressEvent", store: "AbbreviationStore") -> None:
    """Expand the current word, then insert a space."""
    _expand(event, store)
    event.app.current_buffer.insert_text(" ")


def expand_and_accept(event: "KeyPressEvent", store: "AbbreviationStore") -> None:
    """Expand the current word, then submit the line."""
    _expand(event, store)
    buffer = event.app.current_buffer
    buffer.suggestion = None
    buffer.validate_and_handle()


def literal_space(event: "KeyPressEvent") -> None:
    event.app.current_buffer.insert_text(" ")


def create_abbreviation_bindings(store: "AbbreviationStore") -> KeyBindings:
    """Build the default expansion key bindings for a prompt session."""
    bindings = KeyBindings()

    @bindings.add(" ", filter=~is_searching)
    def _(event):
        """Space expands abbreviations."""
        expand_and_continue(event, store)

    @bindings.add("c-space", filter=~is_searching)
    def _(event):
        """Ctrl+Space is a normal space."""
        literal_space(event)

    @bindings.add("enter", filter=~is_searching)
    def _(event):
        """Enter expands and accepts."""
        expand_and_accept(event, store)

    @bindings.add("c-space", filter=is_searching)
    def _(event):
        """During incremental search Ctrl+Space expands."""
        expand_and_continue(event, store)

    @bindings.add(" ", filter=is_searching)
    def _(event):
        """During incremental search Space is a normal space."""
        literal_space(event)

    return bindings
