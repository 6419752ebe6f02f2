from __future__ import annotations

import threading
from dataclasses import dataclass

from .domain.editor import CommitTrigger, EditorSession
from .domain.entities import Note
from .domain.projections import filter_notes, resolve_active_note
from .domain.store import NoteStore


@dataclass(frozen=True)
class EditorView:
    note_id: str | None
    title: str
    content: str
    dirty: bool


@dataclass(frozen=True)
class SessionView:
    query: str
    notes: tuple[Note, ...]
    selected_id: str | None
    active_note: Note | None
    editor: EditorView


class NotepadSession:
    """Owns the note store, the search box text and the editor draft for one app instance.

    Every event funnels through here and runs to completion under one lock, so an event
    always sees the state left by the one before it. After each store mutation the active
    note is re-resolved and the editor is re-synced, so a selection change always resets
    the draft.
    """

    def __init__(self, store: NoteStore | None = None) -> None:
        self.store = store or NoteStore()
        self.editor = EditorSession()
        self.query = ""
        self._lock = threading.RLock()
        self._visible_key: tuple[int, str] | None = None
        self._visible: tuple[Note, ...] = ()

    def _refresh(self) -> None:
        self.editor.sync(self.active_note())

    @property
    def selected_id(self) -> str | None:
        with self._lock:
            return self.store.selected_id

    def active_note(self) -> Note | None:
        with self._lock:
            return resolve_active_note(self.store.notes, self.store.selected_id)

    def visible_notes(self, query: str | None = None) -> tuple[Note, ...]:
        with self._lock:
            key = (self.store.version, self.query if query is None else query)
            if key != self._visible_key:
                self._visible = filter_notes(self.store.notes, key[1])
                self._visible_key = key
            return self._visible

    def get_note(self, note_id: str) -> Note | None:
        with self._lock:
            return resolve_active_note(self.store.notes, note_id)

    def create_note(self) -> Note:
        with self._lock:
            note = self.store.create()
            self._refresh()
            return note

    def update_note(self, note_id: str, *, title: str | None = None, content: str | None = None) -> bool:
        with self._lock:
            changed = self.store.update(note_id, title=title, content=content)
            if changed and self.editor.note_id == note_id:
                self.editor.stage(title=title, content=content)
            self._refresh()
            return changed

    def delete_note(self, note_id: str) -> bool:
        with self._lock:
            changed = self.store.delete(note_id)
            self._refresh()
            return changed

    def select_note(self, note_id: str | None) -> str | None:
        with self._lock:
            selected = self.store.select(note_id)
            self._refresh()
            return selected

    def set_query(self, query: str) -> str:
        with self._lock:
            self.query = query
            return self.query

    def stage_edit(self, *, title: str | None = None, content: str | None = None) -> EditorView:
        with self._lock:
            self.editor.stage(title=title, content=content)
            return self.editor_view()

    def commit_edit(self, trigger: CommitTrigger = "save") -> bool:
        with self._lock:
            changed = self.editor.commit(self.store, trigger)
            self._refresh()
            return changed

    def editor_view(self) -> EditorView:
        with self._lock:
            note = self.get_note(self.editor.note_id) if self.editor.note_id else None
            return EditorView(
                note_id=self.editor.note_id,
                title=self.editor.title,
                content=self.editor.content,
                dirty=self.editor.is_dirty(note),
            )

    def view(self) -> SessionView:
        with self._lock:
            return SessionView(
                query=self.query,
                notes=self.visible_notes(),
                selected_id=self.store.selected_id,
                active_note=self.active_note(),
                editor=self.editor_view(),
            )
