"""Puzzle release schedule.

Puzzles unlock at midnight US Eastern Standard Time. The schedule is a
fixed UTC-5 offset; daylight saving rules never apply in December.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

RELEASE_TZ = timezone(timedelta(hours=-5), name="UTC-05:00")


def release_boundary(year: int, day: int) -> datetime:
    """Return the instant the input for (`year`, `day`) becomes available."""

    return datetime(year, 12, day, tzinfo=RELEASE_TZ)


def is_released(year: int, day: int, *, now: datetime | None = None) -> bool:
    """Return True once `now` has reached the release boundary."""

    current = now if now is not None else datetime.now(UTC)
    return current >= release_boundary(year, day)


__all__ = ["RELEASE_TZ", "is_released", "release_boundary"]
