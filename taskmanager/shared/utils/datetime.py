"""Timestamps are timezone-aware UTC everywhere in taskmanager."""

from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Normalize to aware UTC; a naive value is read as UTC, never local time.

    Applied to due dates on the way in and to every timestamp read back from
    the store, since SQLite hands back naive values.
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)
