"""Search Pydantic schemas for request/response validation."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SearchRequest(BaseModel):
    """Body of ``POST /search``. Emptiness is checked by the service after trimming."""

    term: str = Field(max_length=500)


class ImageResponse(BaseModel):
    """One image descriptor, serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: str
    thumbnail_url: str
    alt_text: str


class SearchResponse(BaseModel):
    message: str
    images: List[ImageResponse]


class HistoryEntryResponse(BaseModel):
    """A user's own past search."""

    term: str
    timestamp: datetime


class HistoryResponse(BaseModel):
    history: List[HistoryEntryResponse]


class TopTermResponse(BaseModel):
    """Global search frequency for one term."""

    term: str
    count: int


class TopSearchesResponse(BaseModel):
    top: List[TopTermResponse]
