"""Auth Pydantic schemas."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class UserBrief(BaseModel):
    """Public user info for the ``/me`` view."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    provider: str


class MeResponse(BaseModel):
    user: Optional[UserBrief] = None
