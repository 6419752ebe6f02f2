from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

from .entities import Note
from .projections import resolve_active_note
from .store import NoteStore

logger = logging.getLogger("scratchpad.editor")

CommitTrigger = Literal["blur", "save"]


@dataclass
class EditorSession:
    """Staged title/content for the note open in the editor.

    There is one draft at a time: switching to another note throws away
    whatever was staged for the previous one.
    """

    note_id: str | None = None
    title: str = ""
    content: str = ""

    def sync(self, note: Note | None) -> bool:
        new_id = note.id if note is not None else None
        if new_id == self.note_id:
            return False
        self.note_id = new_id
        self.title = note.title if note is not None else ""
        self.content = note.content if note is not None else ""
        return True

    def stage(self, *, title: str | None = None, content: str | None = None) -> None:
        if self.note_id is None:
            return
        if title is not None:
            self.title = title
        if content is not None:
            self.content = content

    def is_dirty(self, note: Note | None) -> bool:
        if note is None or note.id != self.note_id:
            return False
        return self.title != note.title or self.content != note.content

    def commit(self, store: NoteStore, trigger: CommitTrigger = "save") -> bool:
        if self.note_id is None:
            return False
        note = resolve_active_note(store.notes, self.note_id)
        if not self.is_dirty(note):
            return False
        changed = store.update(self.note_id, title=self.title, content=self.content)
        logger.debug("editor_commit", extra={"id": self.note_id, "trigger": trigger, "changed": changed})
        return changed
