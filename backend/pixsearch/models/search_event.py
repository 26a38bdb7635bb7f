"""Append-only log of search events."""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from pixsearch.models.base import Base


class SearchEvent(Base):
    """One durable record of a user submitting a term.

    Rows are immutable once inserted. ``id`` is a monotonically assigned
    sequence and doubles as the tie-breaker when two events share a
    timestamp.
    """

    __tablename__ = "search_events"

    # SQLite only autoincrements INTEGER PRIMARY KEY
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    user_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
        comment="Opaque identity key of the searching user"
    )
    term: Mapped[str] = mapped_column(
        String(500),
        nullable=False,
        index=True,
        comment="Trimmed search term, stored verbatim (case-sensitive)"
    )
    timestamp: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Server-assigned time of the search"
    )

    __table_args__ = (
        Index("ix_search_events_user_timestamp", "user_id", "timestamp"),
    )

    def __repr__(self) -> str:
        return f"<SearchEvent(id={self.id}, user_id='{self.user_id}', term='{self.term}')>"
