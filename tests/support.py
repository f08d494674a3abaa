"""Shared helpers: settings and an app wired to a throwaway in-memory SQLite database."""

import unittest

from fastapi.testclient import TestClient

from taskapi.core.config import Settings
from taskapi.main import create_app

TEST_SECRET = "test-secret-not-for-production-use"


def make_settings(**overrides: object) -> Settings:
    """Build Settings that ignore .env; in-memory SQLite unless overridden."""
    values: dict[str, object] = {
        "APP_ENV": "dev",
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET": TEST_SECRET,
        "DB_CREATE_TABLES": True,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class ApiTestCase(unittest.TestCase):
    """Fresh application and database per test; lifespan runs so tables exist."""

    def setUp(self) -> None:
        self.app = create_app(make_settings())
        self.client = TestClient(self.app)
        self.client.__enter__()
        self.addCleanup(self.client.__exit__, None, None, None)

    def signup(self, email: str = "a@x.com", password: str = "pw") -> str:
        resp = self.client.post("/api/auth/signup", json={"email": email, "password": password})
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()["token"]

    def create_task(self, token: str, title: str = "t1", description: str = "d1") -> dict:
        resp = self.client.post(
            "/api/tasks",
            json={"title": title, "description": description},
            headers=bearer(token),
        )
        self.assertEqual(resp.status_code, 201, resp.text)
        return resp.json()

    def list_tasks(self, token: str) -> list[dict]:
        resp = self.client.get("/api/tasks", headers=bearer(token))
        self.assertEqual(resp.status_code, 200, resp.text)
        return resp.json()
