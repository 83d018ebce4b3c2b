"""Tests for database models."""

import uuid

import pytest
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError

from social_backend.models import (
    Activity,
    ActivityType,
    Follow,
    Hashtag,
    Like,
    Post,
    User,
    post_hashtags,
)


async def make_user(db_session, username: str) -> User:
    user = User(username=username, email=f"{username}@example.com")
    db_session.add(user)
    await db_session.flush()
    return user


@pytest.mark.asyncio
async def test_user_creation(db_session):
    """Test user model creation."""
    user = User(
        username="alice",
        email="alice@example.com",
        display_name="Alice",
        bio="Hello",
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)

    assert user.id is not None
    assert user.username == "alice"
    assert user.display_name == "Alice"
    assert user.created_at is not None
    assert user.updated_at is not None


@pytest.mark.asyncio
async def test_duplicate_username_rejected(db_session, test_user):
    """Usernames are unique."""
    db_session.add(User(username=test_user.username, email="other@example.com"))
    with pytest.raises(IntegrityError):
        await db_session.commit()
    await db_session.rollback()


@pytest.mark.asyncio
async def test_post_with_hashtags(db_session, test_user):
    """Posts link to hashtags through the association table."""
    python = Hashtag(name="python")
    sqlite = Hashtag(name="sqlite")
    post = Post(author_id=test_user.id, content="Hello #python #sqlite", hashtags=[python, sqlite])
    db_session.add(post)
    await db_session.commit()

    assert post.id is not None
    result = await db_session.execute(
        select(func.count()).select_from(post_hashtags).where(post_hashtags.c.post_id == post.id)
    )
    assert result.scalar_one() == 2


@pytest.mark.asyncio
async def test_duplicate_like_rejected(db_session, test_user):
    """A user likes a post at most once."""
    post = Post(author_id=test_user.id, content="Like me")
    db_session.add(post)
    await db_session.flush()

    db_session.add(Like(user_id=test_user.id, post_id=post.id))
    await db_session.commit()

    db_session.add(Like(user_id=test_user.id, post_id=post.id))
    with pytest.raises(IntegrityError):
        await db_session.commit()
    await db_session.rollback()


@pytest.mark.asyncio
async def test_follow_creation(db_session, test_user):
    """Test follow model creation."""
    other = await make_user(db_session, "bob")
    follow = Follow(follower_id=test_user.id, following_id=other.id)
    db_session.add(follow)
    await db_session.commit()

    assert follow.id is not None
    assert follow.follower_id == test_user.id
    assert follow.following_id == other.id


@pytest.mark.asyncio
async def test_self_follow_rejected(db_session, test_user):
    """A user cannot follow themselves."""
    db_session.add(Follow(follower_id=test_user.id, following_id=test_user.id))
    with pytest.raises(IntegrityError):
        await db_session.commit()
    await db_session.rollback()


@pytest.mark.asyncio
async def test_activity_creation(db_session, test_user):
    """Test activity model creation."""
    post = Post(author_id=test_user.id, content="First post")
    db_session.add(post)
    await db_session.flush()

    activity = Activity(
        user_id=test_user.id,
        activity_type=ActivityType.POST_CREATED.value,
        post_id=post.id,
        activity_metadata={"source": "test"},
    )
    db_session.add(activity)
    await db_session.commit()
    await db_session.refresh(activity)

    assert activity.id is not None
    assert activity.activity_type == "post_created"
    assert activity.activity_metadata == {"source": "test"}


@pytest.mark.asyncio
async def test_like_requires_existing_post(db_session, test_user):
    """Foreign keys are enforced."""
    db_session.add(Like(user_id=test_user.id, post_id=uuid.uuid4()))
    with pytest.raises(IntegrityError):
        await db_session.commit()
    await db_session.rollback()


@pytest.mark.asyncio
async def test_deleting_user_cascades_in_database(db_session, test_user):
    """Rows owned by a user go with it."""
    post = Post(author_id=test_user.id, content="Soon gone")
    db_session.add(post)
    await db_session.flush()
    db_session.add(Like(user_id=test_user.id, post_id=post.id))
    await db_session.commit()

    await db_session.execute(delete(User).where(User.id == test_user.id))
    await db_session.commit()

    posts = await db_session.execute(select(func.count()).select_from(Post))
    likes = await db_session.execute(select(func.count()).select_from(Like))
    assert posts.scalar_one() == 0
    assert likes.scalar_one() == 0


@pytest.mark.asyncio
async def test_session_delete_user_removes_owned_rows(db_session, test_user):
    """Deleting a user through the session removes its follows, activities, posts and likes."""
    other = await make_user(db_session, "carol")
    post = Post(author_id=test_user.id, content="Bye #python", hashtags=[Hashtag(name="python")])
    db_session.add(post)
    await db_session.flush()
    db_session.add_all(
        [
            Follow(follower_id=test_user.id, following_id=other.id),
            Follow(follower_id=other.id, following_id=test_user.id),
            Like(user_id=other.id, post_id=post.id),
            Activity(user_id=test_user.id, activity_type=ActivityType.POST_CREATED.value, post_id=post.id),
            Activity(
                user_id=other.id,
                activity_type=ActivityType.USER_FOLLOWED.value,
                target_user_id=test_user.id,
            ),
        ]
    )
    await db_session.commit()

    await db_session.delete(test_user)
    await db_session.commit()

    for entity in (Follow, Activity, Post, Like):
        result = await db_session.execute(select(func.count()).select_from(entity))
        assert result.scalar_one() == 0
    link_count = await db_session.execute(select(func.count()).select_from(post_hashtags))
    assert link_count.scalar_one() == 0
    users = await db_session.execute(select(User.username))
    assert users.scalars().all() == ["carol"]
