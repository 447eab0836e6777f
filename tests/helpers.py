from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

import requests

from emergence import AoC

YEAR = 2020
TOKEN = "TESTTOKEN"
SAMPLE_INPUT = "1721\n979\n366\n299\n675\n1456\n"

# Every 2020 puzzle has been released by this instant.
AFTER_EVENT = datetime(2021, 1, 1, tzinfo=UTC)


class DummyResponse:
    def __init__(self, text: str, status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}", response=self)  # type: ignore[arg-type]


def make_client(root: Path, *, year: int = YEAR, now: datetime = AFTER_EVENT) -> AoC:
    """Build a client with a fixed clock and explicit token."""

    return AoC.with_path_and_token(year, root, TOKEN, clock=lambda: now)
