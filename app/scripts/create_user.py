"""
Create a user without going through the HTTP API (e.g. to seed a kitchen admin).
Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD
Example:
  python -m app.scripts.create_user chef1 'Str0ng!Pass'
"""
import argparse
import logging
import sys

from app.core.database import SessionLocal
from app.core.exceptions import ConflictError
from app.core.security import hash_password, is_strong_password, is_valid_username
from app.schemas.auth import PASSWORD_RULE_MESSAGE, USERNAME_RULE_MESSAGE
from app.services.users import create_user

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Daily Menu API user.")
    parser.add_argument("username", help="Username (3-20 letters or digits)")
    parser.add_argument("password", help="Password (8+ chars with upper, lower, digit, symbol)")
    args = parser.parse_args(argv)

    if not is_valid_username(args.username):
        print(USERNAME_RULE_MESSAGE, file=sys.stderr)
        return 1
    if not is_strong_password(args.password):
        print(PASSWORD_RULE_MESSAGE, file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user_id = create_user(db, args.username, hash_password(args.password))
    except ConflictError:
        print(f"User '{args.username}' already exists.", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception("Failed to create user: %s", e)
        return 1
    finally:
        db.close()
    print(f"Created user '{args.username}' with id {user_id}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
