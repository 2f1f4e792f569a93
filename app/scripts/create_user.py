"""
Create a user without going through the HTTP API (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user NAME EMAIL PASSWORD [athlete|admin]
Example:
  python -m app.scripts.create_user "Head Coach" coach@example.com your-secure-password admin
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.core.errors import DuplicateEmailError
from app.core.logging_setup import configure_logging
from app.core.security import PASSWORD_MAX_LEN
from app.models.user import Role
from app.services.users import UserStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Fitness Tracker user.")
    parser.add_argument("name", help="Display name (1-255 chars)")
    parser.add_argument("email", help="Email address, used to log in")
    parser.add_argument("password", help=f"Password (1-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument(
        "role",
        nargs="?",
        default=Role.ATHLETE.value,
        choices=[r.value for r in Role],
    )
    args = parser.parse_args(argv)
    configure_logging()

    name = args.name.strip()
    email = args.email.strip().lower()
    if not name or len(name) > 255:
        print("Invalid name length.", file=sys.stderr)
        return 1
    if not email or len(email) > 255:
        print("Invalid email length.", file=sys.stderr)
        return 1
    if not args.password or len(args.password) > PASSWORD_MAX_LEN:
        print(f"Password must be 1-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        user = UserStore(db).create(
            name=name, email=email, password=args.password, role=Role(args.role)
        )
    except DuplicateEmailError:
        print(f"User '{email}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{email}' (id={user.id}) with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
