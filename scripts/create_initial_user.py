"""Utility script to create an initial user in the database."""

from __future__ import annotations

import argparse
from getpass import getpass

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.users.create_user import create_user
from app.domain.entities import Role
from app.infrastructure.database import SessionLocal, initialize_database


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create an initial user for the learning platform API.",
    )
    parser.add_argument("--first-name", default="Platform", help="First name (default: Platform)")
    parser.add_argument("--last-name", default="Admin", help="Last name (default: Admin)")
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Login email (default: admin@example.com)",
    )
    parser.add_argument(
        "--role",
        default=Role.ADMIN.value,
        choices=[role.value for role in Role],
        help="Role assigned to the user (default: admin)",
    )
    parser.add_argument(
        "--password",
        default=None,
        help="User password. Prompted interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Password for the new user: ")
    if not password:
        raise SystemExit("No valid password was provided.")

    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            first_name=args.first_name,
            last_name=args.last_name,
            email=args.email,
            password=password,
            role=args.role,
        )
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Could not create the user: {exc}") from exc
    finally:
        session.close()

    print(f"User {user.email} created with id {user.id} and role {user.role.value}.")


if __name__ == "__main__":
    main()
