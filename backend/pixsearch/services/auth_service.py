"""Identity support: JWT tokens and user lookup.

Establishing an identity (the OAuth handshake) happens elsewhere; this
module only mints and reads the bearer tokens that carry it.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pixsearch.config import settings
from pixsearch.core.exceptions import PersistenceError
from pixsearch.models.user import User


def create_access_token(user_id: uuid.UUID) -> str:
    """Create a JWT access token for the given user ID."""
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES
    )
    payload = {
        "sub": str(user_id),
        "exp": expire,
        "iat": datetime.now(timezone.utc),
    }
    return jwt.encode(payload, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> Optional[str]:
    """Decode a JWT token and return the user ID string, or None if invalid."""
    try:
        payload = jwt.decode(
            token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
        return payload.get("sub")
    except JWTError:
        return None


class AuthService:
    """User lookup and provider-identity registration."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user_by_id(self, user_id: uuid.UUID) -> Optional[User]:
        """Fetch user by ID.

        Raises:
            PersistenceError: If the users table cannot be read
        """
        stmt = select(User).where(User.id == user_id)
        try:
            result = await self.db.execute(stmt)
        except SQLAlchemyError as e:
            raise PersistenceError("read") from e
        return result.scalar_one_or_none()

    async def get_or_create_user(self, provider: str, provider_id: str, name: str) -> User:
        """Return the user for a provider identity, creating it on first sight."""
        stmt = select(User).where(
            User.provider == provider,
            User.provider_id == provider_id,
        )
        result = await self.db.execute(stmt)
        user = result.scalar_one_or_none()
        if user:
            return user

        user = User(provider=provider, provider_id=provider_id, name=name or f"{provider} user")
        self.db.add(user)
        await self.db.flush()
        return user
