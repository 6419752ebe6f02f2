from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

T0 = datetime(2025, 1, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, start: datetime = T0) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float = 1.0) -> datetime:
        self.now = self.now + timedelta(seconds=seconds)
        return self.now


class SequentialIds:
    def __init__(self, values: list[str] | None = None) -> None:
        self.values = list(values or [])
        self.counter = 0

    def __call__(self) -> str:
        if self.values:
            return self.values.pop(0)
        self.counter += 1
        return f"note-{self.counter}"


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()
