"""Global top-terms leaderboard computed from the event log."""

from typing import List

import structlog

from pixsearch.services.event_store import EventStore

logger = structlog.get_logger(__name__)


class AggregationService:
    """Counts search events per term on every call; nothing is cached."""

    def __init__(self, store: EventStore):
        self.store = store
        self.logger = logger.bind(service="aggregation_service")

    async def top_terms(self, n: int) -> List[dict]:
        """Get the ``n`` most frequently searched terms.

        Sorted by count descending, then term ascending so equal counts
        come back in a stable order.

        Args:
            n: Maximum number of terms to return

        Returns:
            List of dicts with 'term' and 'count' keys
        """
        if n <= 0:
            return []

        counts = await self.store.count_grouped_by_term()
        ranked = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))

        top = [{"term": term, "count": count} for term, count in ranked[:n]]
        self.logger.info("top_terms_computed", requested=n, distinct=len(counts), returned=len(top))
        return top
