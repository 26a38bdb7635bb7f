"""Services module for business logic and data operations.

Services hold the search core: the event store, the two read views over
it, and the orchestrator that records a search and fetches its images.
"""

from pixsearch.services.event_store import EventStore
from pixsearch.services.aggregation_service import AggregationService
from pixsearch.services.history_service import HistoryService
from pixsearch.services.search_service import SearchResult, SearchService

__all__ = [
    "EventStore",
    "AggregationService",
    "HistoryService",
    "SearchResult",
    "SearchService",
]
