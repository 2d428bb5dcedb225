"""
Public Pydantic schemas returned by services and used by callers of the
data-access layer.
"""

from .content import (  # noqa: F401
    ArchiveRead,
    CommentRead,
    PageRead,
    PostDetail,
    PostRead,
    TagRead,
)
from .users import UserRead  # noqa: F401
