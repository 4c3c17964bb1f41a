#!/usr/bin/env python3
"""
Generate a bearer token for local testing of the Users API
Signed with JWT_SECRET from the environment / .env
"""

import argparse
from datetime import timedelta

from users_api.auth.security import create_access_token


def generate_dev_token(username: str, role: str = "USER", hours: int = 24) -> str:
    """Signed access token carrying the username claim the API checks"""
    return create_access_token(
        {"sub": username, "username": username, "role": role},
        expires_delta=timedelta(hours=hours),
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate a Users API bearer token")
    parser.add_argument("username")
    parser.add_argument("--role", default="USER", choices=["ADMIN", "USER"])
    parser.add_argument("--hours", type=int, default=24, help="token lifetime")
    args = parser.parse_args(argv)

    token = generate_dev_token(args.username, role=args.role, hours=args.hours)

    print("=" * 80)
    print(f"🔐 Bearer token for {args.username} ({args.role}, {args.hours}h)")
    print("=" * 80)
    print(token)
    print("-" * 80)
    print("Try it:")
    print(f'  curl -H "Authorization: Bearer {token}" http://localhost:8083/users/{args.username}')
    print("=" * 80)
    return token


if __name__ == "__main__":
    main()
