"""API tests for signup, login and the bearer-token gate on task routes."""

import unittest
from datetime import UTC, datetime, timedelta
from unittest.mock import patch

from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from taskapi.core.security import create_access_token, verify_access_token
from tests.support import TEST_SECRET, ApiTestCase, bearer

PROTECTED_ROUTES = [
    ("post", "/api/tasks", {"title": "t", "description": "d"}),
    ("get", "/api/tasks", None),
    ("put", "/api/tasks/1", {"title": "t", "description": "d"}),
    ("delete", "/api/tasks/1", None),
]


class TestSignup(ApiTestCase):
    def test_signup_returns_usable_token(self) -> None:
        token = self.signup("a@x.com", "pw")
        self.assertEqual(verify_access_token(token, TEST_SECRET), 1)
        self.assertEqual(self.list_tasks(token), [])

    def test_signup_then_login_with_same_credentials(self) -> None:
        self.signup("user@example.com", "correct horse")
        resp = self.client.post(
            "/api/auth/login",
            json={"email": "user@example.com", "password": "correct horse"},
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(set(resp.json()), {"token"})
        self.assertEqual(self.list_tasks(resp.json()["token"]), [])

    def test_duplicate_email_is_conflict(self) -> None:
        self.signup("a@x.com", "pw")
        resp = self.client.post("/api/auth/signup", json={"email": "a@x.com", "password": "other"})
        self.assertEqual(resp.status_code, 409)
        self.assertEqual(resp.json(), {"error": "Email already registered"})

    def test_duplicate_signup_keeps_first_password(self) -> None:
        self.signup("a@x.com", "pw")
        self.client.post("/api/auth/signup", json={"email": "a@x.com", "password": "other"})
        resp = self.client.post("/api/auth/login", json={"email": "a@x.com", "password": "pw"})
        self.assertEqual(resp.status_code, 200)

    def test_store_failure_is_generic_500(self) -> None:
        failure = OperationalError("INSERT INTO users", {}, Exception("database is locked"))
        with patch.object(Session, "commit", side_effect=failure):
            resp = self.client.post("/api/auth/signup", json={"email": "a@x.com", "password": "pw"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Something went wrong!"})

    def test_missing_fields_rejected(self) -> None:
        for body in ({}, {"email": "a@x.com"}, {"password": "pw"}, {"email": "", "password": "pw"}):
            with self.subTest(body=body):
                resp = self.client.post("/api/auth/signup", json=body)
                self.assertEqual(resp.status_code, 422)
                self.assertEqual(resp.json()["error"], "Invalid request body")


class TestLogin(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.signup("a@x.com", "pw")

    def test_wrong_password_and_unknown_email_look_identical(self) -> None:
        wrong_pw = self.client.post("/api/auth/login", json={"email": "a@x.com", "password": "nope"})
        unknown = self.client.post("/api/auth/login", json={"email": "b@x.com", "password": "pw"})
        self.assertEqual(wrong_pw.status_code, 401)
        self.assertEqual(unknown.status_code, 401)
        self.assertEqual(wrong_pw.json(), {"error": "Invalid credentials"})
        self.assertEqual(unknown.json(), wrong_pw.json())

    def test_login_token_identifies_user(self) -> None:
        self.signup("b@x.com", "pw2")
        resp = self.client.post("/api/auth/login", json={"email": "b@x.com", "password": "pw2"})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(verify_access_token(resp.json()["token"], TEST_SECRET), 2)


class TestAuthGate(ApiTestCase):
    def _call(self, method: str, path: str, body: dict | None, headers: dict[str, str]):
        kwargs: dict = {"headers": headers}
        if body is not None:
            kwargs["json"] = body
        return getattr(self.client, method)(path, **kwargs)

    def assert_rejected_everywhere(self, headers: dict[str, str]) -> None:
        for method, path, body in PROTECTED_ROUTES:
            with self.subTest(method=method, path=path):
                resp = self._call(method, path, body, headers)
                self.assertEqual(resp.status_code, 401)
                self.assertEqual(resp.json(), {"error": "Unauthorized or invalid token"})
                self.assertEqual(resp.headers.get("www-authenticate"), "Bearer")

    def test_missing_header(self) -> None:
        self.assert_rejected_everywhere({})

    def test_wrong_scheme(self) -> None:
        token = self.signup()
        self.assert_rejected_everywhere({"Authorization": f"Basic {token}"})

    def test_garbage_token(self) -> None:
        self.assert_rejected_everywhere(bearer("garbage"))

    def test_token_older_than_one_hour(self) -> None:
        self.signup()
        issued = datetime.now(UTC) - timedelta(hours=1, seconds=30)
        self.assert_rejected_everywhere(bearer(create_access_token(1, TEST_SECRET, now=issued)))

    def test_token_signed_with_another_secret(self) -> None:
        self.signup()
        self.assert_rejected_everywhere(bearer(create_access_token(1, "another-secret")))

    def test_auth_routes_do_not_require_token(self) -> None:
        resp = self.client.post("/api/auth/login", json={"email": "nobody@x.com", "password": "pw"})
        self.assertEqual(resp.json(), {"error": "Invalid credentials"})


if __name__ == "__main__":
    unittest.main()
