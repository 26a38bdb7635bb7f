"""Top searches API endpoint."""

from fastapi import APIRouter, Depends

from pixsearch.config import settings
from pixsearch.dependencies import get_event_store
from pixsearch.schemas import TopSearchesResponse, TopTermResponse
from pixsearch.services.aggregation_service import AggregationService
from pixsearch.services.event_store import EventStore

router = APIRouter()


@router.get("/top-searches", response_model=TopSearchesResponse)
async def get_top_searches(store: EventStore = Depends(get_event_store)):
    """Get the most frequently searched terms across all users.

    Recomputed from the event log on every request.
    """
    service = AggregationService(store)
    top = await service.top_terms(settings.TOP_SEARCHES_LIMIT)

    return TopSearchesResponse(top=[TopTermResponse(**t) for t in top])
