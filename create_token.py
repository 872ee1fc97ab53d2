#!/usr/bin/env python3
"""
Issue an access token for a user of the Event Ticketing API.

Creates the user in the configured database if the email is unknown,
then prints a bearer token for it.

Usage:
    python create_token.py --email admin@example.com --name Admin --role superadmin --days 365
"""

import argparse

from ticketing_api.app.core.db import init_db
from ticketing_api.app.core.security import ROLES, create_access_token
from ticketing_api.app.schemas.user import UserCreate
from ticketing_api.app.services.user_service import UserService


def main() -> None:
    ap = argparse.ArgumentParser(description="Create a user if needed and print an access token.")
    ap.add_argument("--email", required=True, help="User email")
    ap.add_argument("--name", default="Admin", help="Display name for a newly created user")
    ap.add_argument("--role", default="user", choices=ROLES, help="Role for a newly created user")
    ap.add_argument("--days", type=int, default=365, help="Token lifetime in days")
    args = ap.parse_args()

    init_db()
    user = UserService.get_user_by_email(args.email)
    if user is None:
        user = UserService.create_user(UserCreate(name=args.name, email=args.email, role=args.role))
    elif user.role != args.role:
        print(f"[i] Existing user {user.email} keeps role '{user.role}'")

    token = create_access_token({"sub": str(user.id)}, expires_delta=args.days * 24 * 60 * 60)
    print(token)


if __name__ == "__main__":
    main()
