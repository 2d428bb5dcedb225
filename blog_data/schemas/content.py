from __future__ import annotations

from datetime import date
from typing import List

from pydantic import BaseModel, Field

from .common import IDModel, Timestamps


class PageRead(IDModel, Timestamps):
    """Page read model."""
    title: str = Field(..., description="Page title")
    body: str = Field(..., description="Markdown body")
    view: int = Field(0, description="View count")
    is_published: bool = Field(..., description="Published flag")

    class Config:
        from_attributes = True


class PostRead(IDModel, Timestamps):
    """Post read model (without tags or comments)."""
    title: str = Field(..., description="Post title")
    body: str = Field(..., description="Markdown body")
    view: int = Field(0, description="View count")
    is_published: bool = Field(..., description="Published flag")

    class Config:
        from_attributes = True


class TagRead(IDModel):
    """Tag read model; total is only meaningful for tag listings."""
    name: str = Field(..., description="Tag name")
    total: int = Field(0, description="Number of published posts with this tag")

    class Config:
        from_attributes = True


class CommentRead(IDModel, Timestamps):
    """Comment read model."""
    user_id: int = Field(..., description="Author id")
    post_id: int = Field(..., description="Post id")
    content: str = Field(..., description="Comment text")

    class Config:
        from_attributes = True


class PostDetail(PostRead):
    """Post with its tags and comments and a plain-text excerpt."""
    excerpt: str = Field(..., description="Sanitized, truncated body")
    tags: List[TagRead] = Field(default_factory=list)
    comments: List[CommentRead] = Field(default_factory=list)


class ArchiveRead(BaseModel):
    """Monthly bucket of published posts."""
    archive_date: date = Field(..., description="First day of the month")
    year: int = Field(..., description="Year")
    month: int = Field(..., ge=1, le=12, description="Month (1-12)")
    total: int = Field(..., ge=0, description="Published posts created that month")
