"""FastAPI dependency injection providers."""

import uuid
from functools import lru_cache
from typing import AsyncGenerator, Callable, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from pixsearch.core.exceptions import AuthorizationError
from pixsearch.db.session import async_session_factory
from pixsearch.models.user import User
from pixsearch.providers.base import BaseImageProvider
from pixsearch.providers.unsplash import UnsplashImageProvider
from pixsearch.services.auth_service import AuthService, decode_access_token
from pixsearch.services.event_store import EventStore

_bearer_scheme = HTTPBearer(auto_error=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session for request-scoped usage.

    The session is automatically committed on success or rolled back on error.
    Always closed after the request completes.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


def get_session_factory() -> Callable[[], AsyncSession]:
    return async_session_factory


async def get_event_store(
    db: AsyncSession = Depends(get_db),
    session_factory: Callable[[], AsyncSession] = Depends(get_session_factory),
) -> EventStore:
    """Event store reading on the request session and writing on its own."""
    return EventStore(db, session_factory=session_factory)


@lru_cache
def get_image_provider() -> BaseImageProvider:
    """One adapter per process; it holds no per-request state."""
    return UnsplashImageProvider()


async def _resolve_user(
    credentials: Optional[HTTPAuthorizationCredentials],
    db: AsyncSession,
) -> Optional[User]:
    if not credentials:
        return None

    user_id_str = decode_access_token(credentials.credentials)
    if not user_id_str:
        return None

    try:
        user_id = uuid.UUID(user_id_str)
    except ValueError:
        return None

    service = AuthService(db)
    return await service.get_user_by_id(user_id)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Extract and validate JWT token, return the authenticated user.

    Raises AuthorizationError (401) if token is missing/invalid or user not found.
    """
    if not credentials:
        raise AuthorizationError()

    user = await _resolve_user(credentials, db)
    if not user:
        raise AuthorizationError("Invalid or expired token")
    return user


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(_bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> Optional[User]:
    """Like get_current_user but returns None instead of raising 401."""
    return await _resolve_user(credentials, db)
