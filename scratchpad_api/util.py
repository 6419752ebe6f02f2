from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def rfc3339(dt: datetime) -> str:
    return dt.astimezone(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")


def new_note_id() -> str:
    return str(uuid.uuid4())


def next_timestamp(previous: datetime, now: datetime) -> datetime:
    """Return ``now`` unless the clock has not moved past ``previous``."""
    if now > previous:
        return now
    return previous + timedelta(microseconds=1)
