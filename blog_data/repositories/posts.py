from __future__ import annotations

import logging
from datetime import date, datetime
from typing import List, Union

from sqlalchemy import extract, func, select, update

from blog_data.db.models.content import Post, PostTag
from blog_data.schemas.content import ArchiveRead
from .base import BaseRepository, parse_id

logger = logging.getLogger(__name__)


class PostRepository(BaseRepository[Post]):
    """Repository for blog posts, including the monthly archive reports."""

    model = Post

    def update(self, post: Post) -> Post:
        """Write title, body and published flag only; view count is untouched."""
        values = {"title": post.title, "body": post.body, "is_published": post.is_published}
        post_id = post.id
        self.discard_changes(post)
        stmt = (
            update(Post)
            .where(Post.id == post_id)
            .values(**values)
            .execution_options(synchronize_session="fetch")
        )
        self.execute(stmt)
        self.commit()
        return self.get_by_id(post_id)

    def list(self, tag: Union[str, int] = "", published: bool = False) -> List[Post]:
        """
        List posts newest first.

        When `tag` is given (a tag id, usually as a string) only posts linked to
        that tag through post_tags are returned.
        """
        stmt = select(Post)
        if tag != "" and tag is not None:
            tag_id = parse_id(tag)
            stmt = stmt.join(PostTag, Post.id == PostTag.post_id).where(PostTag.tag_id == tag_id)
        if published:
            stmt = stmt.where(Post.is_published.is_(True))
        stmt = stmt.order_by(Post.created_at.desc(), Post.id.desc())
        return list(self.scalars(stmt))

    def list_published(self, tag: Union[str, int] = "") -> List[Post]:
        return self.list(tag, True)

    def list_archives(self) -> List[ArchiveRead]:
        """Count published posts per creation month, newest month first."""
        year = extract("year", Post.created_at)
        month = extract("month", Post.created_at)
        stmt = (
            select(year.label("year"), month.label("month"), func.count(Post.id).label("total"))
            .where(Post.is_published.is_(True))
            .group_by(year, month)
            .order_by(year.desc(), month.desc())
        )
        archives = []
        for row in self.execute(stmt):
            y, m = int(row.year), int(row.month)
            archives.append(
                ArchiveRead(archive_date=date(y, m, 1), year=y, month=m, total=int(row.total))
            )
        return archives

    def list_archives_or_empty(self) -> List[ArchiveRead]:
        """
        Best-effort variant of list_archives for sidebars and other decoration:
        any failure is logged and an empty list is returned instead.
        """
        try:
            return self.list_archives()
        except Exception:
            logger.exception("Listing post archives failed; returning no archives")
            self.session.rollback()
            return []

    def list_by_archive(self, year: Union[str, int], month: Union[str, int]) -> List[Post]:
        """Published posts created in the given year/month, newest first."""
        month = str(month)
        if len(month) == 1:
            month = "0" + month
        bucket = datetime.strptime(f"{year}-{month}", "%Y-%m")
        stmt = (
            select(Post)
            .where(
                extract("year", Post.created_at) == bucket.year,
                extract("month", Post.created_at) == bucket.month,
                Post.is_published.is_(True),
            )
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        return list(self.scalars(stmt))
