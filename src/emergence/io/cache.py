"""Local cache helpers for puzzle inputs."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from emergence.errors import StorageError

logger = logging.getLogger(__name__)


def cache_key(year: int, day: int) -> Path:
    """Return the relative path identifying the input for (`year`, `day`)."""
    return Path(str(year)) / f"day{day:02d}.txt"


def cache_path_for(year: int, day: int, *, root: Path) -> Path:
    """Return the path where the input should be stored under `root`."""
    return root / cache_key(year, day)


def read_cached(path: Path) -> str | None:
    """Return the cached text at `path`, or None if nothing is cached."""
    try:
        with path.open("r", encoding="utf-8", newline="") as handle:
            return handle.read()
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageError(f"Could not read cached input {path}: {exc}", path=path) from exc


def write_cached(path: Path, text: str) -> Path:
    """Persist `text` verbatim at `path`.

    Content goes to a temporary sibling first and is renamed into place, so
    readers never observe a partially written file.
    """
    tmp_path: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".download")
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(text)
        os.replace(tmp_path, path)
        tmp_path = None
    except OSError as exc:
        raise StorageError(f"Could not write cached input {path}: {exc}", path=path) from exc
    finally:
        if tmp_path is not None:
            Path(tmp_path).unlink(missing_ok=True)
    logger.debug("Cached %d characters at %s", len(text), path)
    return path


__all__ = ["cache_key", "cache_path_for", "read_cached", "write_cached"]
