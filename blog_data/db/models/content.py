from __future__ import annotations

from sqlalchemy import Boolean, Integer, String, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from blog_data.core.text import render_excerpt
from blog_data.db.base import Base, IntPkMixin, TimestampMixin


class Page(IntPkMixin, TimestampMixin, Base):
    """Standalone page (about, links, ...)."""
    __tablename__ = "pages"

    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    body: Mapped[str] = mapped_column(Text, nullable=False, default="")
    view: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="0")


class Post(IntPkMixin, TimestampMixin, Base):
    """Blog post. Tags and comments are loaded separately, never stored inline."""
    __tablename__ = "posts"

    title: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    body: Mapped[str] = mapped_column(Text, nullable=False, default="")
    view: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    is_published: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="0", index=True
    )

    # not mapped
    tags = ()
    comments = ()

    def excerpt(self) -> str:
        return render_excerpt(self.body or "")


class Tag(IntPkMixin, TimestampMixin, Base):
    """Tag attached to posts through post_tags."""
    __tablename__ = "tags"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    # published post count, filled by TagRepository.list_with_totals only
    total = 0


class PostTag(IntPkMixin, TimestampMixin, Base):
    """Association of posts to tags."""
    __tablename__ = "post_tags"
    __table_args__ = (
        UniqueConstraint("post_id", "tag_id", name="uk_post_tag"),
    )

    post_id: Mapped[int] = mapped_column(ForeignKey("posts.id", ondelete="CASCADE"), nullable=False)
    tag_id: Mapped[int] = mapped_column(ForeignKey("tags.id", ondelete="CASCADE"), nullable=False, index=True)


class Comment(IntPkMixin, TimestampMixin, Base):
    """Comment left by a user on a post."""
    __tablename__ = "comments"

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    post_id: Mapped[int] = mapped_column(ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
