"""Hashtag model and its association with posts."""

import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, String, Table, Uuid
from sqlalchemy.orm import relationship

from social_backend.db.base import Base

post_hashtags = Table(
    "post_hashtags",
    Base.metadata,
    Column("post_id", Uuid, ForeignKey("posts.id", ondelete="CASCADE"), primary_key=True),
    Column("hashtag_id", Uuid, ForeignKey("hashtags.id", ondelete="CASCADE"), primary_key=True),
)


class Hashtag(Base):
    """Hashtag, stored without the leading '#'."""

    __tablename__ = "hashtags"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    name = Column(String(100), unique=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)

    # Relationships
    posts = relationship(
        "Post", secondary=post_hashtags, back_populates="hashtags", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Hashtag(name={self.name})>"
