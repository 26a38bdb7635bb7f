"""Search API endpoint."""

from fastapi import APIRouter, Depends

from pixsearch.dependencies import get_current_user, get_event_store, get_image_provider
from pixsearch.models.user import User
from pixsearch.providers.base import BaseImageProvider
from pixsearch.schemas import ImageResponse, SearchRequest, SearchResponse
from pixsearch.services.event_store import EventStore
from pixsearch.services.search_service import SearchService

router = APIRouter()


@router.post("/search", response_model=SearchResponse)
async def search(
    body: SearchRequest,
    current_user: User = Depends(get_current_user),
    store: EventStore = Depends(get_event_store),
    provider: BaseImageProvider = Depends(get_image_provider),
):
    """Record the search for the current user and return matching images.

    The search is recorded before images are fetched, so a provider failure
    still leaves the event in history and in the top-searches counts.
    """
    service = SearchService(store, provider)
    result = await service.search(user_id=str(current_user.id), term=body.term)

    return SearchResponse(
        message=result.message,
        images=[
            ImageResponse(id=img.id, thumbnail_url=img.thumbnail_url, alt_text=img.alt_text)
            for img in result.images
        ],
    )
