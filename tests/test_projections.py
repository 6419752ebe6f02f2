from __future__ import annotations

import pytest
from conftest import T0

from scratchpad_api.domain.entities import Note
from scratchpad_api.domain.projections import filter_notes, resolve_active_note


def _note(note_id: str, title: str, content: str = "") -> Note:
    return Note(id=note_id, title=title, content=content, created_at=T0, updated_at=T0)


NOTES = [
    _note("1", "Groceries", "milk, eggs"),
    _note("2", "Work", "Quarterly MILKSHAKE review"),
    _note("3", "Ideas", "nothing dairy here"),
    _note("4", "Milk run", ""),
]


@pytest.mark.parametrize("query", ["", "   ", "\t\n", None])
def test_blank_query_returns_everything_in_order(query) -> None:
    assert list(filter_notes(NOTES, query)) == NOTES


@pytest.mark.parametrize(
    ("query", "expected"),
    [
        ("milk", ["1", "2", "4"]),
        ("MILK", ["1", "2", "4"]),
        ("work", ["2"]),
        ("dairy", ["3"]),
        ("eggs", ["1"]),
        ("absent", []),
    ],
)
def test_filter_matches_title_or_content(query: str, expected: list[str]) -> None:
    assert [n.id for n in filter_notes(NOTES, query)] == expected


def test_filter_keeps_inner_whitespace_significant() -> None:
    assert [n.id for n in filter_notes(NOTES, "milk,")] == ["1"]
    assert [n.id for n in filter_notes(NOTES, " run")] == ["4"]


def test_filter_does_not_mutate_input() -> None:
    notes = list(NOTES)
    filter_notes(notes, "milk")
    assert notes == NOTES


def test_filter_is_stable_for_same_inputs() -> None:
    assert filter_notes(NOTES, "milk") == filter_notes(list(NOTES), "milk")


def test_resolve_active_note() -> None:
    assert resolve_active_note(NOTES, "3") is NOTES[2]


@pytest.mark.parametrize(
    ("notes", "selected_id"),
    [([], None), ([], "1"), (NOTES, None), (NOTES, "deleted")],
)
def test_resolve_active_note_returns_none(notes, selected_id) -> None:
    assert resolve_active_note(notes, selected_id) is None
