from __future__ import annotations

import logging
from datetime import datetime

from ..util import new_note_id, next_timestamp, utc_now
from .entities import Note, NoteStoreState
from .ports import Clock, IdFactory

logger = logging.getLogger("scratchpad.store")


def create_note(state: NoteStoreState, *, note_id: str, now: datetime) -> NoteStoreState:
    note = Note(id=note_id, title="", content="", created_at=now, updated_at=now)
    return NoteStoreState(notes=(note, *state.notes), selected_id=note.id)


def update_note(
    state: NoteStoreState,
    note_id: str,
    *,
    now: datetime,
    title: str | None = None,
    content: str | None = None,
) -> NoteStoreState:
    """Apply the supplied fields to one note.

    Returns ``state`` itself when the id is unknown or nothing would change, so
    callers can tell a no-op apart by identity.
    """
    for idx, note in enumerate(state.notes):
        if note.id != note_id:
            continue
        title_changed = title is not None and title != note.title
        content_changed = content is not None and content != note.content
        if not (title_changed or content_changed):
            return state
        updated = note.with_fields(
            title=title,
            content=content,
            updated_at=next_timestamp(note.updated_at, now),
        )
        notes = state.notes[:idx] + (updated,) + state.notes[idx + 1 :]
        return NoteStoreState(notes=notes, selected_id=state.selected_id)
    return state


def delete_note(state: NoteStoreState, note_id: str) -> NoteStoreState:
    if note_id not in state.ids():
        return state
    notes = tuple(n for n in state.notes if n.id != note_id)
    selected_id = None if state.selected_id == note_id else state.selected_id
    return NoteStoreState(notes=notes, selected_id=selected_id)


def select_note(state: NoteStoreState, note_id: str | None) -> NoteStoreState:
    if state.selected_id == note_id:
        return state
    return NoteStoreState(notes=state.notes, selected_id=note_id)


class NoteStore:
    def __init__(self, *, clock: Clock = utc_now, id_factory: IdFactory = new_note_id) -> None:
        self.clock = clock
        self.id_factory = id_factory
        self.state = NoteStoreState()
        self.version = 0
        self._issued: set[str] = set()

    @property
    def notes(self) -> tuple[Note, ...]:
        return self.state.notes

    @property
    def selected_id(self) -> str | None:
        return self.state.selected_id

    def _commit(self, new_state: NoteStoreState) -> bool:
        if new_state is self.state:
            return False
        self.state = new_state
        self.version += 1
        return True

    def _fresh_id(self) -> str:
        note_id = self.id_factory()
        while note_id in self._issued:
            note_id = self.id_factory()
        self._issued.add(note_id)
        return note_id

    def create(self) -> Note:
        note_id = self._fresh_id()
        self._commit(create_note(self.state, note_id=note_id, now=self.clock()))
        logger.debug("note_create", extra={"id": note_id, "version": self.version})
        return self.state.notes[0]

    def update(self, note_id: str, *, title: str | None = None, content: str | None = None) -> bool:
        changed = self._commit(update_note(self.state, note_id, now=self.clock(), title=title, content=content))
        logger.debug("note_update", extra={"id": note_id, "changed": changed, "version": self.version})
        return changed

    def delete(self, note_id: str) -> bool:
        changed = self._commit(delete_note(self.state, note_id))
        logger.debug("note_delete", extra={"id": note_id, "changed": changed, "version": self.version})
        return changed

    def select(self, note_id: str | None) -> str | None:
        self._commit(select_note(self.state, note_id))
        logger.debug("note_select", extra={"id": note_id, "version": self.version})
        return self.state.selected_id
