from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from scratchpad_api.domain.entities import Note
from scratchpad_api.session import EditorView
from scratchpad_api.util import rfc3339

TITLE_MAX_CHARS = 64


class NoteOut(BaseModel):
    id: str
    title: str
    content: str
    created_at: str
    updated_at: str
    edited: bool = False

    @classmethod
    def from_note(cls, note: Note) -> NoteOut:
        return cls(
            id=note.id,
            title=note.title,
            content=note.content,
            created_at=rfc3339(note.created_at),
            updated_at=rfc3339(note.updated_at),
            edited=note.edited,
        )


class NoteSummaryOut(BaseModel):
    id: str
    title: str
    created_at: str
    updated_at: str
    selected: bool = False

    @classmethod
    def from_note(cls, note: Note, selected_id: str | None) -> NoteSummaryOut:
        return cls(
            id=note.id,
            title=note.title,
            created_at=rfc3339(note.created_at),
            updated_at=rfc3339(note.updated_at),
            selected=note.id == selected_id,
        )


class NoteListOut(BaseModel):
    items: list[NoteSummaryOut] = Field(default_factory=list)
    next_cursor: Optional[int] = None
    query: str = ""


class NoteCreateOut(BaseModel):
    note: NoteOut
    selected_id: str


class NoteUpdateIn(BaseModel):
    title: Optional[str] = Field(default=None, max_length=TITLE_MAX_CHARS)
    content: Optional[str] = None


class NoteUpdateOut(BaseModel):
    changed: bool
    note: NoteOut


class NoteDeleteOut(BaseModel):
    ok: bool = True
    deleted: bool
    selected_id: Optional[str] = None


class SelectionIn(BaseModel):
    note_id: Optional[str] = None


class SelectionOut(BaseModel):
    selected_id: Optional[str] = None
    note: Optional[NoteOut] = None


class SearchIn(BaseModel):
    query: str = ""


class SearchOut(BaseModel):
    query: str
    match_count: int


class EditorOut(BaseModel):
    note_id: Optional[str] = None
    title: str = ""
    content: str = ""
    dirty: bool = False

    @classmethod
    def from_view(cls, view: EditorView) -> EditorOut:
        return cls(note_id=view.note_id, title=view.title, content=view.content, dirty=view.dirty)


class EditorStageIn(BaseModel):
    title: Optional[str] = Field(default=None, max_length=TITLE_MAX_CHARS)
    content: Optional[str] = None


class EditorCommitIn(BaseModel):
    trigger: Literal["blur", "save"] = "save"


class EditorCommitOut(BaseModel):
    committed: bool
    editor: EditorOut
    note: Optional[NoteOut] = None


class ViewOut(BaseModel):
    query: str
    notes: list[NoteSummaryOut] = Field(default_factory=list)
    selected_id: Optional[str] = None
    active_note: Optional[NoteOut] = None
    editor: EditorOut
