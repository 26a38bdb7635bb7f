"""Pydantic schemas for the PixSearch API.

All request/response models are defined here for easy import.
"""

from pixsearch.schemas.common import ErrorResponse
from pixsearch.schemas.search import (
    HistoryEntryResponse,
    HistoryResponse,
    ImageResponse,
    SearchRequest,
    SearchResponse,
    TopSearchesResponse,
    TopTermResponse,
)
from pixsearch.schemas.auth import MeResponse, UserBrief
from pixsearch.schemas.health import HealthCheckResponse

__all__ = [
    # Common
    "ErrorResponse",
    # Search
    "SearchRequest",
    "SearchResponse",
    "ImageResponse",
    "HistoryEntryResponse",
    "HistoryResponse",
    "TopTermResponse",
    "TopSearchesResponse",
    # Auth
    "MeResponse",
    "UserBrief",
    # Health
    "HealthCheckResponse",
]
