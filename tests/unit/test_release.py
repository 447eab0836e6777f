from __future__ import annotations

import unittest
from datetime import UTC, datetime, timedelta

from emergence.services.release import is_released, release_boundary


class ReleaseScheduleTests(unittest.TestCase):
    def test_boundary_is_midnight_utc_minus_five(self) -> None:
        boundary = release_boundary(2020, 1)
        self.assertEqual(boundary.utcoffset(), timedelta(hours=-5))
        self.assertEqual(boundary.astimezone(UTC), datetime(2020, 12, 1, 5, 0, tzinfo=UTC))

    def test_boundary_per_day(self) -> None:
        self.assertEqual(
            release_boundary(2023, 25).astimezone(UTC),
            datetime(2023, 12, 25, 5, 0, tzinfo=UTC),
        )

    def test_is_released_at_exact_boundary(self) -> None:
        boundary = datetime(2020, 12, 1, 5, 0, tzinfo=UTC)
        self.assertFalse(is_released(2020, 1, now=boundary - timedelta(seconds=1)))
        self.assertTrue(is_released(2020, 1, now=boundary))
        self.assertTrue(is_released(2020, 1, now=boundary + timedelta(days=400)))

    def test_future_year_not_released(self) -> None:
        self.assertFalse(is_released(2999, 1))

    def test_past_year_released(self) -> None:
        self.assertTrue(is_released(2015, 25))


if __name__ == "__main__":
    unittest.main()
