"""Configuration models and loaders for emergence."""

from .loader import CONFIG_ENV_VAR, load_settings
from .models import DEFAULT_BASE_URL, DEFAULT_USER_AGENT, ClientConfig, ServiceConfig, Settings

__all__ = [
    "CONFIG_ENV_VAR",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_USER_AGENT",
    "ServiceConfig",
    "Settings",
    "load_settings",
]
