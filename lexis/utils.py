"""Utility functions for lexis."""

import re
from datetime import datetime, timedelta


def midnight(moment: datetime) -> datetime:
    """Truncate a datetime to the start of its calendar day."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def due_date(now: datetime, days: int) -> datetime:
    """Midnight of the day that is `days` after `now`."""
    return midnight(now + timedelta(days=days))


def local_naive(moment: datetime) -> datetime:
    """Convert an aware datetime to naive local time; naive values pass through."""
    if moment.tzinfo is None:
        return moment
    return moment.astimezone().replace(tzinfo=None)


def to_timestamp(moment: datetime | None) -> int | None:
    """Convert a datetime to epoch milliseconds."""
    if moment is None:
        return None
    return int(moment.timestamp() * 1000)


def from_timestamp(value) -> datetime | None:
    """Parse epoch milliseconds, an ISO-8601 string or a datetime."""
    if value is None or value == '':
        return None
    if isinstance(value, datetime):
        return local_naive(value)
    if isinstance(value, str):
        return local_naive(datetime.fromisoformat(value))
    return datetime.fromtimestamp(value / 1000)


def split_words(text: str) -> list[str]:
    """Split text on whitespace, dropping empty tokens."""
    if not text:
        return []
    return [w for w in re.split(r'\s+', text.strip()) if w]
