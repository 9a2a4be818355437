"""
Create a user from the command line. Run from project root:
  python -m app.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user Alice alice@example.com your-secure-password admin
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.core.errors import AppError
from app.schemas.auth import USER_ROLES
from app.schemas.users import UserCreateRequest
from app.services.users import create_user


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create an Inventory API user.")
    parser.add_argument("name", help="Display name")
    parser.add_argument("email", help="Email (must be unique)")
    parser.add_argument("password", help="Password")
    parser.add_argument("role", nargs="?", default="user", choices=USER_ROLES)
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        user = create_user(
            db,
            UserCreateRequest(
                name=args.name.strip(),
                email=args.email.strip(),
                password=args.password,
                role=args.role,
            ),
        )
    except AppError as e:
        print(f"{e.message}.", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.email}' (id={user.id}) with role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
