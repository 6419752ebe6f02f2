from __future__ import annotations

from collections.abc import Sequence

from .entities import Note


def filter_notes(notes: Sequence[Note], query: str | None) -> tuple[Note, ...]:
    """Notes whose title or content contains ``query``, case-insensitively, in collection order.

    An empty or all-whitespace query returns every note. The input is never mutated.
    """
    if not query or not query.strip():
        return tuple(notes)
    needle = query.lower()
    return tuple(n for n in notes if needle in n.title.lower() or needle in n.content.lower())


def resolve_active_note(notes: Sequence[Note], selected_id: str | None) -> Note | None:
    if selected_id is None:
        return None
    for note in notes:
        if note.id == selected_id:
            return note
    return None
