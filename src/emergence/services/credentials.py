"""Session token discovery."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

TOKEN_ENV_VAR = "TOKEN"
TOKENFILE_NAME = "tokenfile"

logger = logging.getLogger(__name__)


def find_tokenfile(start: Path | None = None) -> Path | None:
    """Return the nearest ``tokenfile`` at or above `start`, if any.

    The search begins in `start` (the working directory by default) and
    walks up through each parent until the filesystem root.
    """
    current = (start if start is not None else Path.cwd()).resolve()
    while True:
        candidate = current / TOKENFILE_NAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def resolve_token(
    *,
    environ: Mapping[str, str] | None = None,
    start: Path | None = None,
) -> str | None:
    """Return the session token from ``$TOKEN`` or the nearest ``tokenfile``.

    The environment variable wins. File content has trailing whitespace
    trimmed. Returns None when neither source yields a value.
    """
    env = os.environ if environ is None else environ
    token = env.get(TOKEN_ENV_VAR)
    if token:
        logger.debug("Using token from $%s", TOKEN_ENV_VAR)
        return token

    path = find_tokenfile(start)
    if path is None:
        return None
    try:
        token = path.read_text(encoding="utf-8").rstrip()
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read %s: %s", path, exc)
        return None
    if not token:
        return None
    logger.debug("Using token from %s", path)
    return token


__all__ = ["TOKENFILE_NAME", "TOKEN_ENV_VAR", "find_tokenfile", "resolve_token"]
