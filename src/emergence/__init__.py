"""Fetch and cache Advent of Code puzzle inputs."""

from emergence.client import AoC
from emergence.errors import (
    ConfigurationError,
    EmergenceError,
    InvalidDay,
    NotYetReleased,
    OutOfRange,
    RemoteError,
    StorageError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "AoC",
    "ConfigurationError",
    "EmergenceError",
    "InvalidDay",
    "NotYetReleased",
    "OutOfRange",
    "RemoteError",
    "StorageError",
    "TransportError",
]
