from __future__ import annotations

import unittest
from unittest.mock import patch

import requests

from emergence.config import ServiceConfig
from emergence.errors import RemoteError, TransportError
from emergence.io.fetcher import fetch_input, request_headers
from tests.helpers import DummyResponse


class FetcherTests(unittest.TestCase):
    def test_request_headers(self) -> None:
        headers = request_headers("abc", user_agent="tests")
        self.assertEqual(headers, {"Cookie": "session=abc", "User-Agent": "tests"})

    def test_fetch_input_issues_single_get(self) -> None:
        service = ServiceConfig(base_url="https://example.com/", user_agent="tests", timeout_seconds=5)

        with patch(
            "emergence.io.fetcher.requests.get", return_value=DummyResponse("payload\n")
        ) as mock_get:
            text = fetch_input(2021, 9, token="abc", service=service)

        self.assertEqual(text, "payload\n")
        mock_get.assert_called_once_with(
            "https://example.com/2021/day/9/input",
            headers={"Cookie": "session=abc", "User-Agent": "tests"},
            timeout=5,
        )

    def test_fetch_input_raises_remote_error_for_status(self) -> None:
        with patch(
            "emergence.io.fetcher.requests.get", return_value=DummyResponse("", status_code=404)
        ):
            with self.assertRaises(RemoteError) as ctx:
                fetch_input(2020, 1, token="abc", service=ServiceConfig())

        self.assertEqual(ctx.exception.status_code, 404)
        self.assertEqual(ctx.exception.url, "https://adventofcode.com/2020/day/1/input")

    def test_fetch_input_raises_transport_error(self) -> None:
        with patch("emergence.io.fetcher.requests.get", side_effect=requests.Timeout("slow")):
            with self.assertRaises(TransportError) as ctx:
                fetch_input(2020, 1, token="abc", service=ServiceConfig())

        self.assertIsInstance(ctx.exception.__cause__, requests.Timeout)


if __name__ == "__main__":
    unittest.main()
