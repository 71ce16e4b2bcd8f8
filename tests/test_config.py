"""Unit tests for app.core.config.Settings validation."""

import unittest

from pydantic import ValidationError

from app.core.config import DEFAULT_SESSION_SECRET, Settings

GOOD_SECRET = "x" * 40


def _settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestDefaults(unittest.TestCase):
    def test_session_defaults(self) -> None:
        fields = Settings.model_fields
        self.assertEqual(fields["SESSION_TTL_SECONDS"].default, 24 * 60 * 60)
        self.assertEqual(fields["SESSION_COOKIE_NAME"].default, "session")
        self.assertFalse(fields["SESSION_COOKIE_SECURE"].default)

    def test_bcrypt_rounds_default(self) -> None:
        self.assertEqual(Settings.model_fields["BCRYPT_ROUNDS"].default, 10)

    def test_open_registration_off_by_default(self) -> None:
        self.assertFalse(Settings.model_fields["OPEN_REGISTRATION"].default)


class TestDatabaseUrl(unittest.TestCase):
    def test_accepts_postgres_and_sqlite(self) -> None:
        for url in (
            "postgresql://u:p@localhost:5432/users",
            "postgresql+psycopg2://u:p@db/users",
            "sqlite://",
            "sqlite:///./users.db",
        ):
            self.assertEqual(_settings(DATABASE_URL=url).DATABASE_URL, url)

    def test_strips_whitespace(self) -> None:
        self.assertEqual(_settings(DATABASE_URL="  sqlite://  ").DATABASE_URL, "sqlite://")

    def test_rejects_other_schemes(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="mysql://u:p@localhost/users")

    def test_rejects_empty(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(DATABASE_URL="   ")


class TestSessionSettings(unittest.TestCase):
    def test_short_secret_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(SESSION_SECRET="too-short")

    def test_default_secret_rejected_in_prod(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(APP_ENV="prod", SESSION_SECRET=DEFAULT_SESSION_SECRET)

    def test_custom_secret_accepted_in_prod(self) -> None:
        s = _settings(APP_ENV="prod", SESSION_SECRET=GOOD_SECRET)
        self.assertEqual(s.SESSION_SECRET.get_secret_value(), GOOD_SECRET)

    def test_ttl_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(SESSION_TTL_SECONDS=10)
        with self.assertRaises(ValidationError):
            _settings(SESSION_TTL_SECONDS=8 * 24 * 60 * 60)

    def test_blank_cookie_name_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(SESSION_COOKIE_NAME=" ")


class TestBcryptRounds(unittest.TestCase):
    def test_bounds(self) -> None:
        self.assertEqual(_settings(BCRYPT_ROUNDS=4).BCRYPT_ROUNDS, 4)
        with self.assertRaises(ValidationError):
            _settings(BCRYPT_ROUNDS=3)
        with self.assertRaises(ValidationError):
            _settings(BCRYPT_ROUNDS=17)

    def test_unknown_backend_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            _settings(USER_STORE_BACKEND="mongo")
