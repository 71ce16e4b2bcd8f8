"""Tests for the create_user CLI."""

import unittest
from unittest.mock import patch

from app.core.config import Settings
from app.core.context import build_context
from app.scripts.create_user import main


class TestCreateUserScript(unittest.TestCase):
    def setUp(self) -> None:
        self.context = build_context(
            Settings(_env_file=None, USER_STORE_BACKEND="memory", BCRYPT_ROUNDS=4)
        )
        patcher = patch("app.scripts.create_user.build_context", return_value=self.context)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_creates_admin(self) -> None:
        self.assertEqual(main(["admin", "s3cret-pw", "--scope", "user", "admin"]), 0)
        user = self.context.credential_store.validate_credentials("admin", "s3cret-pw")
        self.assertIsNotNone(user)
        self.assertEqual(user.scope, ["user", "admin"])

    def test_default_scope_is_user(self) -> None:
        self.assertEqual(main(["alice", "s3cret-pw"]), 0)
        self.assertEqual(
            self.context.credential_store.validate_credentials("alice", "s3cret-pw").scope,
            ["user"],
        )

    def test_existing_username_fails(self) -> None:
        self.assertEqual(main(["alice", "s3cret-pw"]), 0)
        self.assertEqual(main(["alice", "other-pw"]), 1)

    def test_invalid_lengths_fail(self) -> None:
        self.assertEqual(main(["al", "s3cret-pw"]), 1)
        self.assertEqual(main(["alice", "pw"]), 1)
        self.assertEqual(self.context.repository.count(), 0)
