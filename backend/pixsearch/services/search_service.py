"""Search orchestration: validate, record, fetch, compose.

Each request runs the four steps in order and stops at the first failure.
The event is committed before the provider is called and is not rolled
back if the provider then fails: "the user searched for X" holds either
way.
"""

import asyncio
from dataclasses import dataclass, field
from typing import List

import structlog

from pixsearch.core.exceptions import ValidationError
from pixsearch.providers.base import BaseImageProvider, ImageDescriptor
from pixsearch.services.event_store import EventStore

logger = structlog.get_logger(__name__)


@dataclass
class SearchResult:
    """Successful search response."""

    message: str
    images: List[ImageDescriptor] = field(default_factory=list)


def normalize_term(term: str) -> str:
    """Trim a raw term, rejecting blanks.

    Raises:
        ValidationError: If nothing is left after trimming
    """
    normalized = (term or "").strip()
    if not normalized:
        raise ValidationError("term is required")
    return normalized


class SearchService:
    """Entry point for ``POST /search``."""

    def __init__(self, store: EventStore, provider: BaseImageProvider):
        """Initialize search service.

        Args:
            store: Event store the search is recorded in
            provider: Image provider queried after recording
        """
        self.store = store
        self.provider = provider
        self.logger = logger.bind(service="search_service")

    async def search(self, user_id: str, term: str) -> SearchResult:
        """Run one search for ``user_id``.

        Raises:
            ValidationError: Empty term; nothing recorded or fetched
            PersistenceError: Event not recorded; provider not called
            ProviderError: Event recorded, images unavailable
        """
        try:
            normalized = normalize_term(term)
        except ValidationError:
            self.logger.info("empty_search_term", user_id=user_id)
            raise

        # Once issued, the write runs to completion even if the client goes away
        event_id = await asyncio.shield(self.store.record(user_id, normalized))
        self.logger.info("search_recorded", event_id=event_id, user_id=user_id, term=normalized)

        images = await self.provider.search(normalized)

        self.logger.info(
            "search_completed",
            user_id=user_id,
            term=normalized,
            results=len(images),
        )
        return SearchResult(
            message=f"You searched for '{normalized}' -- {len(images)} results.",
            images=images,
        )
