"""Read-through cache for puzzle inputs.

:class:`AoC` is the main entry point::

    aoc = AoC.new(2020)
    text = aoc.read_or_fetch(1)

Inputs are looked up under ``<cache_dir>/<year>/dayNN.txt`` first and only
fetched from the service on a miss, once the puzzle has been released.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

from pydantic import ValidationError

from emergence.config.models import ClientConfig, ServiceConfig
from emergence.errors import ConfigurationError, InvalidDay, NotYetReleased, OutOfRange, StorageError
from emergence.io.cache import cache_path_for, read_cached, write_cached
from emergence.io.fetcher import fetch_input
from emergence.services.credentials import TOKEN_ENV_VAR, TOKENFILE_NAME, resolve_token
from emergence.services.release import is_released
from emergence.util.paths import default_cache_dir

LAST_DAY = 25

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(UTC)


class AoC:
    """Fetches and caches inputs for a single event year."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        service: ServiceConfig | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._config = config
        self._service = service or ServiceConfig()
        self._clock = clock or _utcnow

    @classmethod
    def with_path_and_token(
        cls,
        year: int,
        path: str | Path,
        token: str,
        *,
        service: ServiceConfig | None = None,
        clock: Clock | None = None,
    ) -> "AoC":
        """Build a client from an explicit cache directory and token."""

        try:
            config = ClientConfig(year=year, cache_dir=Path(path).expanduser(), token=token)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid client configuration: {exc}") from exc
        return cls(config, service=service, clock=clock)

    @classmethod
    def with_path(
        cls,
        year: int,
        path: str | Path,
        *,
        service: ServiceConfig | None = None,
        clock: Clock | None = None,
    ) -> "AoC":
        """Build a client at `path`, reading the token from ``$TOKEN`` or a ``tokenfile``."""

        token = resolve_token()
        if token is None:
            raise ConfigurationError(
                f"Could not read token from ${TOKEN_ENV_VAR} or find a ./{TOKENFILE_NAME} in this "
                "directory or any parent. Set the token in one of these locations or use "
                "AoC.with_path_and_token."
            )
        return cls.with_path_and_token(year, path, token, service=service, clock=clock)

    @classmethod
    def new(
        cls,
        year: int,
        *,
        service: ServiceConfig | None = None,
        clock: Clock | None = None,
    ) -> "AoC":
        """Build a client caching under ``~/.aoc`` with a discovered token."""

        return cls.with_path(year, default_cache_dir(), service=service, clock=clock)

    @property
    def year(self) -> int:
        return self._config.year

    @property
    def cache_dir(self) -> Path:
        return self._config.cache_dir

    @property
    def service(self) -> ServiceConfig:
        return self._service

    def read_or_fetch(self, day: int) -> str:
        """Return the input for `day`, fetching and caching it on a miss.

        Raises:
            InvalidDay: `day` is 0 or negative.
            OutOfRange: `day` is after the 25th.
            NotYetReleased: not cached and the puzzle is still locked.
            TransportError: the request did not complete.
            RemoteError: the service answered with a non-success status.
            StorageError: the cache could not be read, or the fetched text
                could not be written (available as ``exc.text``).
        """
        validate_day(day)

        cached = self.read(day)
        if cached is not None:
            logger.debug("Cache hit for %s day %02d", self.year, day)
            return cached

        logger.info("Cache miss for %s day %02d", self.year, day)
        text = self.fetch(day)
        try:
            self.write(day, text)
        except StorageError as exc:
            exc.text = text
            raise
        return text

    get = read_or_fetch

    def read(self, day: int) -> str | None:
        """Return the cached input for `day`, or None when absent."""
        return read_cached(self.loc(day))

    def fetch(self, day: int) -> str:
        """Fetch the input for `day` from the service, bypassing the cache."""
        validate_day(day)
        if not is_released(self.year, day, now=self._clock()):
            raise NotYetReleased(day)
        return fetch_input(self.year, day, token=self._config.token, service=self._service)

    def write(self, day: int, text: str) -> Path:
        """Store `text` as the cached input for `day`."""
        return write_cached(self.loc(day), text)

    def loc(self, day: int) -> Path:
        """The location of the cached input (or where it would be cached) for `day`."""
        validate_day(day)
        return cache_path_for(self.year, day, root=self.cache_dir)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(year={self.year}, cache_dir={str(self.cache_dir)!r})"


def validate_day(day: int) -> None:
    """Reject days outside 1-25 before any I/O happens."""
    if day <= 0:
        raise InvalidDay(day)
    if day > LAST_DAY:
        raise OutOfRange(day)


__all__ = ["AoC", "LAST_DAY", "validate_day"]
