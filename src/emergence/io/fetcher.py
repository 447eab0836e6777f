"""Raw input fetch from the puzzle service."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import requests

from emergence.config.models import ServiceConfig
from emergence.errors import RemoteError, TransportError

logger = logging.getLogger(__name__)


def request_headers(token: str, *, user_agent: str) -> Mapping[str, str]:
    """Return the headers identifying the session and the client."""
    return {
        "Cookie": f"session={token}",
        "User-Agent": user_agent,
    }


def fetch_input(year: int, day: int, *, token: str, service: ServiceConfig) -> str:
    """Download the input text for (`year`, `day`).

    Issues exactly one GET; there is no retry. Release gating is the
    caller's responsibility.
    """
    url = service.input_url(year, day)
    logger.info("Fetching %s", url)

    try:
        response = requests.get(
            url,
            headers=dict(request_headers(token, user_agent=service.user_agent)),
            timeout=service.timeout_seconds,
        )
    except requests.RequestException as exc:
        raise TransportError(f"Request to {url} failed: {exc}") from exc

    try:
        response.raise_for_status()
    except requests.HTTPError as exc:
        raise RemoteError(
            f"{url} returned HTTP {response.status_code}",
            status_code=response.status_code,
            url=url,
        ) from exc

    return response.text


__all__ = ["fetch_input", "request_headers"]
