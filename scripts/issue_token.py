"""Register a provider identity and print a bearer token for it.

Stands in for the OAuth login flow during local development: the user
row is found (or created on first run) by provider + provider id, and a
JWT for that user is printed for use as ``Authorization: Bearer <token>``.

Usage:
    python scripts/issue_token.py --provider-id 1234 --name "Ada"
    python scripts/issue_token.py --provider github --provider-id octocat
"""

import argparse
import asyncio
import os
import sys

# Add backend to path so we can import pixsearch modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "backend"))

from pixsearch.db.session import async_session_factory, engine
from pixsearch.models import Base
from pixsearch.services.auth_service import AuthService, create_access_token


async def issue_token(provider: str, provider_id: str, name: str) -> str:
    """Find-or-create the user and return a fresh access token.

    Idempotent: running it again for the same identity reuses the user.
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session_factory() as session:
        service = AuthService(session)
        user = await service.get_or_create_user(provider, provider_id, name)
        await session.commit()

    print(f"\n  User: {user.name} ({user.provider}:{user.provider_id})")
    print(f"  Id:   {user.id}\n")
    return create_access_token(user.id)


def main():
    parser = argparse.ArgumentParser(description="Issue a PixSearch access token")
    parser.add_argument("--provider", default="google", help="Identity provider name")
    parser.add_argument("--provider-id", required=True, help="Subject id at the provider")
    parser.add_argument("--name", default="", help="Display name for a new user")
    args = parser.parse_args()

    token = asyncio.run(issue_token(args.provider, args.provider_id, args.name))
    print(token)


if __name__ == "__main__":
    main()
