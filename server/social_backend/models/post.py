"""Post model."""

import uuid
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Text, Uuid
from sqlalchemy.orm import relationship

from social_backend.db.base import Base


class Post(Base):
    """Post published by a user."""

    __tablename__ = "posts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    author_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False
    )

    # Relationships
    author = relationship("User", back_populates="posts")
    likes = relationship(
        "Like", back_populates="post", cascade="all, delete-orphan", passive_deletes=True
    )
    hashtags = relationship(
        "Hashtag", secondary="post_hashtags", back_populates="posts", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, author_id={self.author_id})>"
