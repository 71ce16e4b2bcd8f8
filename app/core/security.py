"""Password hashing and credential input limits."""

import bcrypt

# Cost factor used when none is configured.
DEFAULT_BCRYPT_ROUNDS = 10

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 3
USERNAME_MAX_LEN = 50
PASSWORD_MIN_LEN = 3
PASSWORD_MAX_LEN = 50
# The login form accepts slightly shorter passwords than registration.
LOGIN_PASSWORD_MIN_LEN = 2

# Flat scope tags; authorization checks set intersection, never hierarchy.
SCOPES = ("user", "admin")
DEFAULT_SCOPE = ["user"]


def hash_password(plain_password: str, rounds: int = DEFAULT_BCRYPT_ROUNDS) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors with multi-byte input.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    try:
        pw_bytes = plain_password.encode("utf-8")[:72]
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False
