import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from scratchpad_api.dependencies import get_session
from scratchpad_api.domain.schemas import (
    EditorCommitIn,
    EditorCommitOut,
    EditorOut,
    EditorStageIn,
    NoteCreateOut,
    NoteDeleteOut,
    NoteListOut,
    NoteOut,
    NoteSummaryOut,
    NoteUpdateIn,
    NoteUpdateOut,
    SearchIn,
    SearchOut,
    SelectionIn,
    SelectionOut,
    ViewOut,
)
from scratchpad_api.session import NotepadSession

router = APIRouter()
logger = logging.getLogger("scratchpad.api")


def _rid(request: Request) -> str:
    return getattr(request.state, "request_id", "")


def _selection_out(session: NotepadSession) -> SelectionOut:
    active = session.active_note()
    return SelectionOut(
        selected_id=session.selected_id,
        note=NoteOut.from_note(active) if active else None,
    )


@router.get("/health")
def health():
    return {"ok": True}


@router.get("/notes", response_model=NoteListOut)
def list_notes(
    limit: int = Query(100, ge=1, le=500),
    cursor: int = Query(0, ge=0),
    q: Optional[str] = None,
    session: NotepadSession = Depends(get_session),
):
    items = session.visible_notes(q)
    page = items[cursor : cursor + limit]
    next_cursor = cursor + limit if cursor + limit < len(items) else None
    selected_id = session.selected_id
    return NoteListOut(
        items=[NoteSummaryOut.from_note(n, selected_id) for n in page],
        next_cursor=next_cursor,
        query=session.query if q is None else q,
    )


@router.post("/notes", response_model=NoteCreateOut)
def create_note(request: Request, session: NotepadSession = Depends(get_session)):
    note = session.create_note()
    logger.info("note_create", extra={"rid": _rid(request), "id": note.id})
    return NoteCreateOut(note=NoteOut.from_note(note), selected_id=note.id)


@router.get("/notes/{note_id}", response_model=NoteOut)
def get_note(note_id: str, session: NotepadSession = Depends(get_session)):
    note = session.get_note(note_id)
    if note is None:
        raise HTTPException(status_code=404, detail="note_not_found")
    return NoteOut.from_note(note)


@router.put("/notes/{note_id}", response_model=NoteUpdateOut)
def update_note(
    note_id: str,
    payload: NoteUpdateIn,
    request: Request,
    session: NotepadSession = Depends(get_session),
):
    changed = session.update_note(note_id, title=payload.title, content=payload.content)
    note = session.get_note(note_id)
    if note is None:
        raise HTTPException(status_code=404, detail="note_not_found")
    logger.info("note_update", extra={"rid": _rid(request), "id": note_id, "changed": changed})
    return NoteUpdateOut(changed=changed, note=NoteOut.from_note(note))


@router.delete("/notes/{note_id}", response_model=NoteDeleteOut)
def delete_note(note_id: str, request: Request, session: NotepadSession = Depends(get_session)):
    deleted = session.delete_note(note_id)
    logger.info("note_delete", extra={"rid": _rid(request), "id": note_id, "deleted": deleted})
    return NoteDeleteOut(deleted=deleted, selected_id=session.selected_id)


@router.get("/selection", response_model=SelectionOut)
def get_selection(session: NotepadSession = Depends(get_session)):
    return _selection_out(session)


@router.put("/selection", response_model=SelectionOut)
def select_note(payload: SelectionIn, request: Request, session: NotepadSession = Depends(get_session)):
    session.select_note(payload.note_id)
    logger.info("note_select", extra={"rid": _rid(request), "id": payload.note_id})
    return _selection_out(session)


@router.get("/search", response_model=SearchOut)
def get_search(session: NotepadSession = Depends(get_session)):
    return SearchOut(query=session.query, match_count=len(session.visible_notes()))


@router.put("/search", response_model=SearchOut)
def set_search(payload: SearchIn, session: NotepadSession = Depends(get_session)):
    query = session.set_query(payload.query)
    return SearchOut(query=query, match_count=len(session.visible_notes()))


@router.get("/editor", response_model=EditorOut)
def get_editor(session: NotepadSession = Depends(get_session)):
    return EditorOut.from_view(session.editor_view())


@router.patch("/editor", response_model=EditorOut)
def stage_editor(payload: EditorStageIn, session: NotepadSession = Depends(get_session)):
    view = session.stage_edit(title=payload.title, content=payload.content)
    return EditorOut.from_view(view)


@router.post("/editor/commit", response_model=EditorCommitOut)
def commit_editor(payload: EditorCommitIn, request: Request, session: NotepadSession = Depends(get_session)):
    committed = session.commit_edit(payload.trigger)
    note = session.active_note()
    logger.info(
        "editor_commit",
        extra={"rid": _rid(request), "id": session.editor.note_id, "trigger": payload.trigger, "committed": committed},
    )
    return EditorCommitOut(
        committed=committed,
        editor=EditorOut.from_view(session.editor_view()),
        note=NoteOut.from_note(note) if note else None,
    )


@router.get("/view", response_model=ViewOut)
def view(session: NotepadSession = Depends(get_session)):
    snapshot = session.view()
    return ViewOut(
        query=snapshot.query,
        notes=[NoteSummaryOut.from_note(n, snapshot.selected_id) for n in snapshot.notes],
        selected_id=snapshot.selected_id,
        active_note=NoteOut.from_note(snapshot.active_note) if snapshot.active_note else None,
        editor=EditorOut.from_view(snapshot.editor),
    )
