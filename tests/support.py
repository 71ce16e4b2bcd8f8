"""Shared fixtures for the HTTP tests: app factory settings and a TestCase with a seeded admin."""

import re
import unittest

from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app

ADMIN = {"username": "admin", "password": "p4$$w0Rd"}
NEW_USER = {"username": "new-user", "password": "some-passsss", "scope": ["user"]}


def make_settings(**overrides: object) -> Settings:
    values = {"APP_ENV": "test", "USER_STORE_BACKEND": "memory", "BCRYPT_ROUNDS": 4}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class ApiTestCase(unittest.TestCase):
    """Fresh app per test with a seeded admin account."""

    settings_overrides: dict = {}

    def setUp(self) -> None:
        self.app = create_app(make_settings(**self.settings_overrides))
        self.context = self.app.state.context
        self.admin_id = self.context.credential_store.create(
            ADMIN["username"], ADMIN["password"], ["user", "admin"]
        )
        self.client = TestClient(self.app)

    def tearDown(self) -> None:
        self.client.close()
        self.context.close()

    def login(self, username: str, password: str) -> None:
        res = self.client.post("/login", json={"username": username, "password": password})
        self.assertEqual(res.status_code, 200, res.text)

    def login_admin(self) -> None:
        self.login(ADMIN["username"], ADMIN["password"])

    def create_user(self, payload: dict) -> int:
        res = self.client.post("/api/users", json=payload)
        self.assertEqual(res.status_code, 201, res.text)
        match = re.match(r"^Created user with id (\d+)$", res.json()["message"])
        self.assertIsNotNone(match)
        return int(match.group(1))


