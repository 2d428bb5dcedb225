from __future__ import annotations

import logging
from typing import List, Union

from sqlalchemy import delete, func, select

from blog_data.db.models.content import Post, PostTag, Tag
from .base import BaseRepository, parse_id

logger = logging.getLogger(__name__)


class TagRepository(BaseRepository[Tag]):
    """Repository for tags."""

    model = Tag

    def insert(self, tag: Tag) -> Tag:
        """Find-or-create by name; returns the existing row when the name is taken."""
        existing = self.scalar_one_or_none(select(Tag).where(Tag.name == tag.name))
        if existing is not None:
            return existing
        return super().insert(tag)

    def get_by_name(self, name: str) -> Tag:
        return self.scalar_one(select(Tag).where(Tag.name == name))

    def list_with_totals(self) -> List[Tag]:
        """
        Tags with the number of published posts carrying them, set on `Tag.total`.
        Tags without any published post are left out.
        """
        stmt = (
            select(Tag, func.count(Post.id).label("total"))
            .join(PostTag, Tag.id == PostTag.tag_id)
            .join(Post, PostTag.post_id == Post.id)
            .where(Post.is_published.is_(True))
            .group_by(Tag.id)
            .order_by(Tag.id)
        )
        tags = []
        for tag, total in self.execute(stmt):
            tag.total = int(total)
            tags.append(tag)
        return tags

    def list_with_totals_or_empty(self) -> List[Tag]:
        """
        Best-effort variant of list_with_totals for sidebars and other decoration:
        any failure is logged and an empty list is returned instead.
        """
        try:
            return self.list_with_totals()
        except Exception:
            logger.exception("Listing tags failed; returning no tags")
            self.session.rollback()
            return []

    def list_by_post_id(self, post_id: Union[str, int]) -> List[Tag]:
        pid = parse_id(post_id)
        stmt = (
            select(Tag)
            .join(PostTag, Tag.id == PostTag.tag_id)
            .where(PostTag.post_id == pid)
            .order_by(Tag.id)
        )
        return list(self.scalars(stmt))


class PostTagRepository(BaseRepository[PostTag]):
    """Repository for post/tag links."""

    model = PostTag

    def insert(self, post_tag: PostTag) -> PostTag:
        """Find-or-create on the (post_id, tag_id) pair."""
        stmt = select(PostTag).where(
            PostTag.post_id == post_tag.post_id, PostTag.tag_id == post_tag.tag_id
        )
        existing = self.scalar_one_or_none(stmt)
        if existing is not None:
            return existing
        return super().insert(post_tag)

    def delete_by_post_id(self, post_id: int) -> int:
        """Remove every tag link of a post; returns the number of rows removed."""
        result = self.execute(delete(PostTag).where(PostTag.post_id == post_id))
        self.commit()
        return result.rowcount
