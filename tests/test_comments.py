from datetime import datetime

import pytest
from sqlalchemy.exc import NoResultFound

from blog_data.db.models import Comment
from blog_data.repositories import CommentRepository


def test_insert_list_and_delete(session, make_post, user):
    post = make_post("p")
    other = make_post("other")
    repo = CommentRepository(session)

    first = repo.insert(Comment(user_id=user.id, post_id=post.id, content="first", created_at=datetime(2023, 1, 1)))
    second = repo.insert(Comment(user_id=user.id, post_id=post.id, content="second", created_at=datetime(2023, 1, 2)))
    repo.insert(Comment(user_id=user.id, post_id=other.id, content="elsewhere"))

    assert [c.content for c in repo.list_by_post_id(str(post.id))] == ["first", "second"]
    assert repo.get(str(second.id)).content == "second"
    assert repo.count() == 3

    repo.delete(first)
    assert repo.count() == 2
    with pytest.raises(NoResultFound):
        repo.get(first.id)


def test_list_by_post_id_rejects_malformed_id(session):
    with pytest.raises(ValueError):
        CommentRepository(session).list_by_post_id("1a")
