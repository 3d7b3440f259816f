"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime

# Exceptions the calendar capability and parsers raise for bad input.
# Anything else is a programming error and propagates.
RECOVERABLE_ERRORS: tuple[type[Exception], ...] = (
    ValueError,
    TypeError,
    OverflowError,
    KeyError,
)


def now_utc() -> datetime:
    """Current instant as an aware UTC datetime."""
    return datetime.now(UTC)


def ensure_aware(dt: datetime) -> datetime:
    """Treat a naive datetime as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt
