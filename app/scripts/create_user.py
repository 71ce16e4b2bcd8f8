"""
Create a user (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD [--scope user admin]
Example:
  python -m app.scripts.create_user admin your-secure-password --scope user admin
"""
import argparse
import sys

from app.core.config import get_settings
from app.core.context import build_context
from app.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    SCOPES,
    USERNAME_MAX_LEN,
    USERNAME_MIN_LEN,
)
from app.services.exceptions import UsernameTakenError


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a user account from the command line.")
    parser.add_argument("username", help=f"Username ({USERNAME_MIN_LEN}-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("--scope", nargs="+", default=["user"], choices=SCOPES)
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not (USERNAME_MIN_LEN <= len(username) <= USERNAME_MAX_LEN):
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print(
            f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.",
            file=sys.stderr,
        )
        return 1
    scope = list(dict.fromkeys(args.scope))

    context = build_context(get_settings())
    try:
        user_id = context.credential_store.create(username, args.password, scope)
    except UsernameTakenError:
        print(f"User '{username}' already exists.", file=sys.stderr)
        return 1
    finally:
        context.close()
    print(f"Created user '{username}' with id {user_id} and scope {scope}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
