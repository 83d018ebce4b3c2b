"""Activity model."""

import uuid
from datetime import datetime
from enum import Enum as PyEnum

from sqlalchemy import JSON, Column, DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import backref, relationship

from social_backend.db.base import Base


class ActivityType(PyEnum):
    """Activity type enumeration."""

    POST_CREATED = "post_created"
    POST_LIKED = "post_liked"
    USER_FOLLOWED = "user_followed"
    HASHTAG_USED = "hashtag_used"


class Activity(Base):
    """Entry in a user's activity feed."""

    __tablename__ = "activities"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(
        Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    activity_type = Column(String(50), nullable=False, index=True)
    post_id = Column(Uuid, ForeignKey("posts.id", ondelete="CASCADE"), nullable=True)
    target_user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=True)
    activity_metadata = Column(JSON, default=dict, nullable=False)
    created_at = Column(DateTime(timezone=True), default=datetime.utcnow, nullable=False, index=True)

    # Relationships
    user = relationship(
        "User",
        foreign_keys=[user_id],
        backref=backref("activities", cascade="all, delete-orphan", passive_deletes=True),
    )
    post = relationship("Post")
    target_user = relationship("User", foreign_keys=[target_user_id])

    def __repr__(self) -> str:
        return f"<Activity(id={self.id}, type={self.activity_type}, user_id={self.user_id})>"
