"""
Helpers for editing a tasting note's ordered descriptor list.

A note stores its own copies of descriptor strings (``nose.characteristics``
and ``palate.flavorCharacteristics``). Any text is accepted, known to the
catalog or not. Every helper returns a new list and leaves its input alone.
"""

from typing import Sequence

from .search import SearchIndex


def add_descriptor(tags: Sequence[str], raw: str) -> list[str]:
    """Append a trimmed descriptor unless it is blank or already present."""
    descriptor = raw.strip()
    if not descriptor or descriptor in tags:
        return list(tags)
    return [*tags, descriptor]


def remove_descriptor(tags: Sequence[str], descriptor: str) -> list[str]:
    """Drop every occurrence of ``descriptor``."""
    return [t for t in tags if t != descriptor]


def toggle_descriptor(tags: Sequence[str], descriptor: str) -> list[str]:
    """Remove the descriptor if selected, otherwise append it."""
    if descriptor in tags:
        return remove_descriptor(tags, descriptor)
    return [*tags, descriptor]


def suggest(index: SearchIndex, tags: Sequence[str], query: str) -> list[str]:
    """Autocomplete suggestions for a tag input, skipping tags already entered."""
    return index.search_excluding(query, tags)


__all__ = ["add_descriptor", "remove_descriptor", "suggest", "toggle_descriptor"]
