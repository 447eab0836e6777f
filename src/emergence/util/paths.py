"""Path utilities centralising cache layout decisions."""

from __future__ import annotations

from pathlib import Path

from emergence.errors import ConfigurationError

DEFAULT_CACHE_DIRNAME = ".aoc"


def cache_root(path: str | Path) -> Path:
    """Return the resolved cache root."""
    return Path(path).expanduser().resolve()


def default_cache_dir() -> Path:
    """Return ``~/.aoc`` for the current user."""
    try:
        home = Path.home()
    except RuntimeError as exc:
        raise ConfigurationError(
            "Could not determine the home directory of the current user. "
            "Set $HOME or pass an explicit cache directory."
        ) from exc
    return home / DEFAULT_CACHE_DIRNAME


__all__ = ["DEFAULT_CACHE_DIRNAME", "cache_root", "default_cache_dir"]
