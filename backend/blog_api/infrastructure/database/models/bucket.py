"""SQLAlchemy ORM models for the bucketed key-value layout."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey, LargeBinary
from sqlalchemy.orm import Mapped, mapped_column

from blog_api.infrastructure.database.base import Base


class BucketModel(Base):
    """ORM model — one row per user namespace."""

    __tablename__ = "buckets"

    name: Mapped[bytes] = mapped_column(LargeBinary, primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<BucketModel(name={self.name!r})>"


class EntryModel(Base):
    """ORM model — one serialized article keyed by (bucket, title bytes)."""

    __tablename__ = "entries"

    bucket: Mapped[bytes] = mapped_column(
        LargeBinary,
        ForeignKey("buckets.name", ondelete="CASCADE"),
        primary_key=True,
    )
    key: Mapped[bytes] = mapped_column(LargeBinary, primary_key=True)
    value: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)

    def __repr__(self) -> str:
        return f"<EntryModel(bucket={self.bucket!r}, key={self.key!r})>"
