"""Shared base class for API tests: fresh in-memory schema and a TestClient per test."""

import unittest
from datetime import UTC, datetime, timedelta

from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.database import SessionLocal, engine
from app.core.rate_limit import get_auth_rate_limiter
from app.main import app
from app.models import Base

API = settings.API_V1_PREFIX
STRONG_PASSWORD = "Secret#123"


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime | None = None) -> None:
        self.now = now or datetime(2026, 1, 5, 12, 0, tzinfo=UTC)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


class ApiTestCase(unittest.TestCase):
    """Creates all tables before each test and drops them after."""

    def setUp(self) -> None:
        Base.metadata.create_all(bind=engine)
        app.state.auth_limiter = get_auth_rate_limiter()
        app.state.auth_limiter.reset()
        self.client = TestClient(app)
        self.db = SessionLocal()

    def tearDown(self) -> None:
        self.db.close()
        app.dependency_overrides.clear()
        app.state.auth_limiter = get_auth_rate_limiter()
        Base.metadata.drop_all(bind=engine)

    def register(self, username: str, password: str = STRONG_PASSWORD):
        return self.client.post(
            f"{API}/register", json={"username": username, "password": password}
        )

    def login(self, username: str, password: str = STRONG_PASSWORD):
        return self.client.post(
            f"{API}/login", json={"username": username, "password": password}
        )

    def auth_headers(self, username: str) -> dict[str, str]:
        """Register and log in username; return a Bearer header for it."""
        self.register(username)
        response = self.login(username)
        self.assertEqual(response.status_code, 200, response.text)
        return {"Authorization": f"Bearer {response.json()['token']}"}

    def create_meal(self, meal_date: str = "2026-01-05", menu: str = "Green curry, rice") -> int:
        response = self.client.post(f"{API}/meals", json={"date": meal_date, "menu": menu})
        self.assertEqual(response.status_code, 201, response.text)
        return response.json()["id"]
