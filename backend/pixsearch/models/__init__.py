"""SQLAlchemy models for PixSearch.

All models are imported here so ``Base.metadata`` knows every table.
"""

from pixsearch.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from pixsearch.models.user import User
from pixsearch.models.search_event import SearchEvent

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDPrimaryKeyMixin",
    "User",
    "SearchEvent",
]
