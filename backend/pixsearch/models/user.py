"""User model for the identity collaborator."""

from sqlalchemy import String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from pixsearch.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class User(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Principal established by an external OAuth provider.

    The search core only ever reads ``id`` (as an opaque string key);
    the remaining columns exist for the ``/me`` view.
    """

    __tablename__ = "users"

    provider: Mapped[str] = mapped_column(
        String(32), nullable=False,
        comment="OAuth provider name, e.g. 'google'"
    )
    provider_id: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True,
        comment="Subject identifier issued by the provider"
    )
    name: Mapped[str] = mapped_column(
        String(255), nullable=False,
        comment="Display name"
    )

    __table_args__ = (
        UniqueConstraint("provider", "provider_id", name="uq_user_provider_identity"),
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, provider='{self.provider}', name='{self.name}')>"
