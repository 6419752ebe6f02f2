from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    def __call__(self) -> datetime:
        ...


@runtime_checkable
class IdFactory(Protocol):
    def __call__(self) -> str:
        ...
