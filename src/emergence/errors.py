"""Error taxonomy for input retrieval."""

from __future__ import annotations

from pathlib import Path


class EmergenceError(Exception):
    """Base class for every error raised by emergence."""


class ConfigurationError(EmergenceError, RuntimeError):
    """Raised at construction time when the client cannot be configured."""


class InvalidDay(EmergenceError, ValueError):
    """Raised for day 0 (or below); puzzle days are 1-indexed."""

    def __init__(self, day: int) -> None:
        super().__init__(f"Advent of Code days are 1-indexed, day {day} does not exist.")
        self.day = day


class OutOfRange(EmergenceError, ValueError):
    """Raised for days after the 25th."""

    def __init__(self, day: int) -> None:
        super().__init__(f"Advent of Code stops after the 25th, day {day} does not exist.")
        self.day = day


class NotYetReleased(EmergenceError):
    """Raised when a fetch is attempted before the puzzle unlocks."""

    def __init__(self, day: int) -> None:
        super().__init__(f"Refusing to fetch input for day {day}, as it has not yet been released.")
        self.day = day


class TransportError(EmergenceError):
    """The request did not complete (DNS, connection, timeout)."""


class RemoteError(EmergenceError):
    """The service answered with a non-success status."""

    def __init__(self, message: str, *, status_code: int | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class StorageError(EmergenceError):
    """A cache read or write failed for a reason other than absence.

    When raised after a successful fetch, ``text`` holds the fetched input
    so callers may use it even though it was not cached.
    """

    def __init__(self, message: str, *, path: Path, text: str | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.text = text


__all__ = [
    "ConfigurationError",
    "EmergenceError",
    "InvalidDay",
    "NotYetReleased",
    "OutOfRange",
    "RemoteError",
    "StorageError",
    "TransportError",
]
