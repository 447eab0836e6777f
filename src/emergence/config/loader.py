"""Settings loading entry points."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import ValidationError

from emergence.errors import ConfigurationError

from .models import Settings

CONFIG_ENV_VAR = "EMERGENCE_CONFIG"


def load_settings(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> Settings:
    """Load user settings, applying optional overrides.

    Without an explicit ``path`` the file named by ``$EMERGENCE_CONFIG`` is
    used; with neither, built-in defaults apply.
    """

    if path is None:
        env_path = os.getenv(CONFIG_ENV_VAR)
        path = Path(env_path).expanduser() if env_path else None

    data: dict[str, Any] = {}
    if path is not None:
        data = _expect_mapping(_read_structured_file(path), path)

    if overrides:
        data = _deep_merge(data, _expand_override_keys(overrides))

    try:
        return Settings.model_validate(data)
    except ValidationError as exc:
        source = path if path is not None else "overrides"
        raise ConfigurationError(f"Invalid settings in {source}: {exc}") from exc


def _expect_mapping(payload: Any, source: Path) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigurationError(f"Expected mapping data in {source}, got {type(payload)!r}.")
    return dict(payload)


def _read_structured_file(path: Path) -> Any:
    """Return the parsed contents of a YAML/TOML/JSON file."""

    if not path.exists():
        raise ConfigurationError(f"Config file {path} does not exist.")

    suffix = path.suffix.lower()
    if suffix not in {".yaml", ".yml", ".toml", ".json"}:
        raise ConfigurationError(f"Unsupported config format for {path}")

    try:
        text = path.read_text(encoding="utf-8")
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(text) or {}
        if suffix == ".toml":
            return tomllib.loads(text)
        return json.loads(text)
    except (OSError, yaml.YAMLError, tomllib.TOMLDecodeError, json.JSONDecodeError) as exc:
        raise ConfigurationError(f"Could not read config file {path}: {exc}") from exc


def _deep_merge(base: Mapping[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge two mappings returning a new dictionary."""

    result: dict[str, Any] = dict(base)
    for key, value in extra.items():
        if key in result and isinstance(result[key], Mapping) and isinstance(value, Mapping):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _expand_override_keys(overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Support dotted-notation overrides like ``service.timeout_seconds``."""

    result: dict[str, Any] = {}
    for key, value in overrides.items():
        if isinstance(key, str) and "." in key:
            *parents, leaf = key.split(".")
            nested: dict[str, Any] = {leaf: value}
            for segment in reversed(parents):
                nested = {segment: nested}
            result = _deep_merge(result, nested)
        else:
            result = _deep_merge(result, {key: value})
    return result


__all__ = ["CONFIG_ENV_VAR", "load_settings"]
