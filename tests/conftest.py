from datetime import datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from blog_data.db import Base, create_session_factory, session_scope
from blog_data.db.models import Post, User


@pytest.fixture()
def engine():
    # Single shared in-memory database per test
    eng = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(eng)
    try:
        yield eng
    finally:
        Base.metadata.drop_all(eng)
        eng.dispose()


@pytest.fixture()
def session(engine):
    factory = create_session_factory(engine)
    with session_scope(factory) as s:
        yield s


@pytest.fixture()
def make_post(session):
    """Insert a post with a fixed creation time."""
    from blog_data.repositories import PostRepository

    repo = PostRepository(session)

    def _make(title, created_at=None, published=True, body="body", view=0):
        post = Post(title=title, body=body, is_published=published, view=view)
        if created_at is not None:
            post.created_at = created_at
        return repo.insert(post)

    return _make


@pytest.fixture()
def user(session):
    from blog_data.repositories import UserRepository

    return UserRepository(session).insert(
        User(email="reader@example.com", nick_name="reader", created_at=datetime(2023, 1, 1))
    )
