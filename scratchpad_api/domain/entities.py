from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime


@dataclass(frozen=True)
class Note:
    id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    @property
    def edited(self) -> bool:
        return self.updated_at != self.created_at

    def with_fields(self, *, updated_at: datetime, title: str | None = None, content: str | None = None) -> Note:
        return replace(
            self,
            title=self.title if title is None else title,
            content=self.content if content is None else content,
            updated_at=updated_at,
        )


@dataclass(frozen=True)
class NoteStoreState:
    notes: tuple[Note, ...] = ()
    selected_id: str | None = None

    def ids(self) -> list[str]:
        return [n.id for n in self.notes]
