"""Unit tests for app.core.rate_limit.AuthRateLimiter."""

import time
import unittest

from starlette.requests import Request

from app.core.rate_limit import AuthRateLimiter


def request_from(host: str) -> Request:
    return Request(
        {
            "type": "http",
            "method": "POST",
            "path": "/api/login",
            "headers": [],
            "client": (host, 50000),
        }
    )


class TestAuthRateLimiter(unittest.TestCase):
    def setUp(self) -> None:
        self.limiter = AuthRateLimiter(max_attempts=3, window_seconds=900)

    def test_allows_up_to_limit_then_refuses(self) -> None:
        request = request_from("10.0.0.1")
        results = [self.limiter.hit(request) for _ in range(4)]
        self.assertEqual(results, [True, True, True, False])

    def test_clients_are_independent(self) -> None:
        for _ in range(3):
            self.limiter.hit(request_from("10.0.0.1"))
        self.assertFalse(self.limiter.hit(request_from("10.0.0.1")))
        self.assertTrue(self.limiter.hit(request_from("10.0.0.2")))

    def test_reset_clears_all_clients(self) -> None:
        request = request_from("10.0.0.1")
        for _ in range(3):
            self.limiter.hit(request)
        self.limiter.reset()
        self.assertTrue(self.limiter.hit(request))

    def test_message_uses_window_minutes(self) -> None:
        self.assertTrue(self.limiter.message.endswith("please try again after 15 minutes"))


class TestAuthRateLimiterWindow(unittest.TestCase):
    """Short real windows; the storage expires entries on wall-clock time."""

    def setUp(self) -> None:
        self.limiter = AuthRateLimiter(max_attempts=2, window_seconds=1)

    def test_refused_attempts_do_not_extend_the_block(self) -> None:
        request = request_from("10.0.0.1")
        self.assertTrue(self.limiter.hit(request))
        self.assertTrue(self.limiter.hit(request))
        for _ in range(5):
            self.assertFalse(self.limiter.hit(request))
        time.sleep(1.2)
        self.assertTrue(self.limiter.hit(request))

    def test_stale_clients_are_dropped_from_storage(self) -> None:
        for i in range(200):
            self.limiter.hit(request_from(f"10.1.{i // 256}.{i % 256}"))
        time.sleep(1.2)
        # A fresh hit schedules the storage's expiry sweep.
        self.limiter.hit(request_from("192.0.2.1"))

        deadline = time.monotonic() + 3
        while time.monotonic() < deadline and self._clients_with_entries() > 1:
            time.sleep(0.05)
        self.assertLessEqual(self._clients_with_entries(), 1)

    def _clients_with_entries(self) -> int:
        return sum(1 for entries in list(self.limiter.storage.events.values()) if entries)


if __name__ == "__main__":
    unittest.main()
