"""Follow model."""

import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import backref, relationship

from social_backend.db.base import Base


class Follow(Base):
    """Directed follow edge between two users."""

    __tablename__ = "follows"
    __table_args__ = (
        UniqueConstraint("follower_id", "following_id", name="uq_follows_pair"),
        CheckConstraint("follower_id != following_id", name="ck_follows_not_self"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    follower_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    following_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)

    # Relationships
    follower = relationship(
        "User",
        foreign_keys=[follower_id],
        backref=backref("following_edges", cascade="all, delete-orphan", passive_deletes=True),
    )
    following = relationship(
        "User",
        foreign_keys=[following_id],
        backref=backref("follower_edges", cascade="all, delete-orphan", passive_deletes=True),
    )

    def __repr__(self) -> str:
        return f"<Follow(follower_id={self.follower_id}, following_id={self.following_id})>"
