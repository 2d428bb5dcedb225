from __future__ import annotations

from typing import List, Union

from sqlalchemy import select

from blog_data.db.models.content import Comment
from .base import BaseRepository, parse_id


class CommentRepository(BaseRepository[Comment]):
    """Repository for post comments."""

    model = Comment

    def get(self, comment_id: Union[str, int]) -> Comment:
        return self.get_by_id(comment_id)

    def list_by_post_id(self, post_id: Union[str, int]) -> List[Comment]:
        pid = parse_id(post_id)
        stmt = select(Comment).where(Comment.post_id == pid).order_by(Comment.created_at, Comment.id)
        return list(self.scalars(stmt))
