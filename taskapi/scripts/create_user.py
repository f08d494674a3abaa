"""
Create a user without going through the HTTP API. Run from project root:
  python -m taskapi.scripts.create_user EMAIL PASSWORD
Example:
  python -m taskapi.scripts.create_user ops@example.com your-secure-password
"""
import argparse
import logging
import sys

from dotenv import load_dotenv

from taskapi.core.config import get_settings
from taskapi.core.context import AppContext
from taskapi.core.logging_setup import configure_logging
from taskapi.core.security import EMAIL_MAX_LEN, PASSWORD_MAX_LEN, PASSWORD_MIN_LEN, hash_password
from taskapi.models import User

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Task API user.")
    parser.add_argument("email", help=f"Email (1-{EMAIL_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    args = parser.parse_args(argv)

    email = args.email.strip()
    if not email or len(email) > EMAIL_MAX_LEN:
        print("Invalid email length.", file=sys.stderr)
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print(f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    settings = get_settings()
    context = AppContext.from_settings(settings)
    if settings.DB_CREATE_TABLES:
        context.create_tables()
    db = context.session_factory()
    try:
        existing = db.query(User).filter(User.email == email).first()
        if existing:
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        user = User(email=email, password_hash=hash_password(args.password))
        db.add(user)
        db.commit()
        logger.info("Created user_id=%s", user.id)
        print(f"Created user '{email}' with id {user.id}.")
        return 0
    finally:
        db.close()
        context.dispose()


if __name__ == "__main__":
    load_dotenv()
    configure_logging()
    sys.exit(main())
