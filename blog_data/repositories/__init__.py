"""
Repository layer for data access.

Repositories encapsulate SQLAlchemy queries for each blog entity. Each one is
constructed with the Session it should use; nothing here holds a global handle.
"""

from .base import BaseRepository, parse_id  # noqa: F401
from .comments import CommentRepository  # noqa: F401
from .pages import PageRepository  # noqa: F401
from .posts import PostRepository  # noqa: F401
from .tags import PostTagRepository, TagRepository  # noqa: F401
from .users import UserRepository  # noqa: F401
