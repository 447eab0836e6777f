"""Pydantic models describing client configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "https://adventofcode.com"
DEFAULT_USER_AGENT = "emergence (+https://github.com/Sciencentistguy/emergence)"


class ServiceConfig(BaseModel):
    """Remote service endpoint and request identity."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = Field(default=30, gt=0)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def input_url(self, year: int, day: int) -> str:
        """Return the input endpoint for a puzzle."""

        return f"{self.base_url}/{year}/day/{day}/input"


class ClientConfig(BaseModel):
    """Immutable (year, cache directory, token) triple owned by one client."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(ge=1, lt=3000)
    cache_dir: Path
    token: str = Field(min_length=1, repr=False)


class Settings(BaseModel):
    """Optional user settings read from a YAML/TOML/JSON file."""

    model_config = ConfigDict(extra="forbid")

    service: ServiceConfig = Field(default_factory=ServiceConfig)
    cache_dir: Optional[Path] = None
    year: Optional[int] = Field(default=None, ge=1, lt=3000)
    log_path: Optional[Path] = None


__all__ = [
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "ServiceConfig",
    "Settings",
]
