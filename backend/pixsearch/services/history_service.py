"""Per-user search history."""

from typing import List

from pixsearch.config import settings
from pixsearch.core.exceptions import ValidationError
from pixsearch.services.event_store import EventStore


class HistoryService:
    """Reads a user's own events, newest first."""

    def __init__(self, store: EventStore):
        self.store = store

    async def history_for(self, user_id: str, limit: int = settings.HISTORY_LIMIT) -> List[dict]:
        """Return up to ``limit`` history entries for ``user_id``.

        ``user_id`` must come from the authenticated identity, never from
        client input.

        Raises:
            ValidationError: If limit is zero or negative
        """
        if limit <= 0:
            raise ValidationError("limit must be positive")

        events = await self.store.list_by_user(user_id, limit)
        return [{"term": e.term, "timestamp": e.timestamp} for e in events]
