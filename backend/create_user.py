"""
Manage logins in the users table (the auth tables live outside the API).

Run: cd backend && python create_user.py create <username> <password> [--disabled]
     cd backend && python create_user.py disable <username>
     cd backend && python create_user.py enable <username>
"""
import argparse

from gymlog.db import SessionLocal
from gymlog.repositories.user_repo import UserRepository
from gymlog.security import hash_password


def build_parser():
    parser = argparse.ArgumentParser(description="Manage gymlog logins.")
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="add a new login")
    create.add_argument("username")
    create.add_argument("password")
    create.add_argument("--disabled", action="store_true", help="create the account disabled")

    # Disabling also cuts off tokens already issued to the user
    for name in ("enable", "disable"):
        toggle = sub.add_parser(name, help=f"{name} an existing login")
        toggle.add_argument("username")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    with SessionLocal() as db:
        repo = UserRepository(db)
        if args.command == "create":
            try:
                user = repo.create(
                    username=args.username,
                    password_hash=hash_password(args.password),
                    enabled=not args.disabled,
                )
            except ValueError as e:
                if str(e) == "username_already_exists":
                    parser.exit(1, f"user {args.username!r} already exists\n")
                raise
            print(f"Created user {user.username} (enabled={user.enabled})")
            return

        user = repo.set_enabled(args.username, enabled=args.command == "enable")
        if user is None:
            parser.exit(1, f"no such user {args.username!r}\n")
        print(f"User {user.username} enabled={user.enabled}")


if __name__ == "__main__":
    main()
