"""Current-identity endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends

from pixsearch.dependencies import get_optional_user
from pixsearch.models.user import User
from pixsearch.schemas import MeResponse, UserBrief

router = APIRouter()


@router.get("/me", response_model=MeResponse)
async def get_me(current_user: Optional[User] = Depends(get_optional_user)):
    """Get the current user, or ``{"user": null}`` when not signed in."""
    if not current_user:
        return MeResponse(user=None)
    return MeResponse(user=UserBrief.model_validate(current_user))
