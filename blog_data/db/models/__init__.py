"""
ORM models for the blog: pages, posts, tags, post/tag links, users and comments.

Importing this package ensures model classes are registered with the Base
metadata for Alembic and runtime usage.
"""

from .content import (  # noqa: F401
    Page,
    Post,
    Tag,
    PostTag,
    Comment,
)
from .users import User  # noqa: F401
