"""
Create a portal user from the command line. Run from project root:
  python -m app.scripts.create_user USERNAME PASSWORD [--name NAME] [--role ROLE] [--department DEPT]
Example:
  python -m app.scripts.create_user jdoe a-long-password --name "Jane Doe" --role officer
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.core.errors import BadRequestError, DuplicateKeyError
from app.schemas.auth import RegisterRequest
from app.services.auth import register_user


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Road Damage Portal user.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("password", help="Password (8-128 chars)")
    parser.add_argument("--name", default="", help="Display name (defaults to username)")
    parser.add_argument("--role", default="officer", help="Role, e.g. admin or officer")
    parser.add_argument("--department", default="Public Services")
    args = parser.parse_args(argv)

    body = RegisterRequest(
        username=args.username,
        password=args.password,
        name=args.name or args.username,
        role=args.role,
        department=args.department,
    )
    db = SessionLocal()
    try:
        user = register_user(db, body)
    except (BadRequestError, DuplicateKeyError) as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.username}' with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
