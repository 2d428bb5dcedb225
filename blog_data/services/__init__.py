from .posts import PostService  # noqa: F401
