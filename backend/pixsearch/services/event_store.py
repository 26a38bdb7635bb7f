"""Event store: the append-only log of search events.

This is the only shared mutable resource. Writes are single-row inserts
committed before ``record`` returns; concurrency safety is left to the
database.
"""

from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

import structlog
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pixsearch.core.exceptions import PersistenceError
from pixsearch.models.search_event import SearchEvent

logger = structlog.get_logger(__name__)

_last_timestamp: Optional[datetime] = None


def next_timestamp() -> datetime:
    """Return the current UTC time, never earlier than the previous call."""
    global _last_timestamp
    now = datetime.now(timezone.utc)
    if _last_timestamp is not None and now < _last_timestamp:
        now = _last_timestamp
    _last_timestamp = now
    return now


class EventStore:
    """Durable storage of SearchEvent rows."""

    def __init__(
        self,
        db: AsyncSession,
        session_factory: Optional[Callable[[], AsyncSession]] = None,
    ):
        """Initialize event store.

        Args:
            db: Async database session used for reads
            session_factory: When given, each ``record`` runs on its own
                session from this factory, so closing the request session
                cannot interrupt a write that is already in flight
        """
        self.db = db
        self.session_factory = session_factory
        self.logger = logger.bind(service="event_store")

    async def record(
        self,
        user_id: str,
        term: str,
        timestamp: Optional[datetime] = None,
    ) -> int:
        """Append one immutable search event and commit it.

        Args:
            user_id: Opaque identity key
            term: Already-validated search term
            timestamp: Event time; assigned by the server when omitted

        Returns:
            The new event's sequence id

        Raises:
            PersistenceError: If the insert or commit fails
        """
        event = SearchEvent(
            user_id=user_id,
            term=term,
            timestamp=timestamp or next_timestamp(),
        )
        if self.session_factory is None:
            await self._insert(self.db, event)
        else:
            async with self.session_factory() as session:
                await self._insert(session, event)

        self.logger.debug("event_recorded", event_id=event.id, user_id=user_id, term=term)
        return event.id

    async def _insert(self, session: AsyncSession, event: SearchEvent) -> None:
        try:
            session.add(event)
            await session.commit()
        except SQLAlchemyError as e:
            self.logger.error("event_record_failed", user_id=event.user_id, error=str(e))
            await session.rollback()
            raise PersistenceError("write") from e

    async def list_by_user(self, user_id: str, limit: int) -> List[SearchEvent]:
        """Most recent events for one user, newest first.

        Ties on timestamp are broken by sequence id, newest first.
        """
        try:
            result = await self.db.execute(
                select(SearchEvent)
                .where(SearchEvent.user_id == user_id)
                .order_by(SearchEvent.timestamp.desc(), SearchEvent.id.desc())
                .limit(limit)
            )
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            self.logger.error("event_list_failed", user_id=user_id, error=str(e))
            raise PersistenceError("read") from e

    async def count_grouped_by_term(self) -> Dict[str, int]:
        """Full scan: number of events per exact term."""
        try:
            result = await self.db.execute(
                select(SearchEvent.term, func.count(SearchEvent.id))
                .group_by(SearchEvent.term)
            )
            return {term: count for term, count in result.all()}
        except SQLAlchemyError as e:
            self.logger.error("event_count_failed", error=str(e))
            raise PersistenceError("read") from e
