"""Search history API endpoint."""

from fastapi import APIRouter, Depends

from pixsearch.config import settings
from pixsearch.dependencies import get_current_user, get_event_store
from pixsearch.models.user import User
from pixsearch.schemas import HistoryEntryResponse, HistoryResponse
from pixsearch.services.event_store import EventStore
from pixsearch.services.history_service import HistoryService

router = APIRouter()


@router.get("/history", response_model=HistoryResponse)
async def get_history(
    current_user: User = Depends(get_current_user),
    store: EventStore = Depends(get_event_store),
):
    """Get the current user's most recent searches, newest first."""
    service = HistoryService(store)
    entries = await service.history_for(str(current_user.id), limit=settings.HISTORY_LIMIT)

    return HistoryResponse(history=[HistoryEntryResponse(**e) for e in entries])
