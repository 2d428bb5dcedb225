from __future__ import annotations

import logging
from typing import Iterable, List, Union

from sqlalchemy.orm import Session

from blog_data.db.models.content import Post, PostTag, Tag
from blog_data.repositories.comments import CommentRepository
from blog_data.repositories.posts import PostRepository
from blog_data.repositories.tags import PostTagRepository, TagRepository
from blog_data.schemas.content import CommentRead, PostDetail, PostRead, TagRead
from blog_data.services.base import BaseService

logger = logging.getLogger(__name__)


class PostService(BaseService):
    """
    Domain service for posts and their tag sets.

    Each repository call commits on its own; a failure part way through a tag
    replacement leaves the statements already issued in place.
    """

    def __init__(self, session: Session) -> None:
        super().__init__(session)
        self.post_repo = PostRepository(session)
        self.tag_repo = TagRepository(session)
        self.post_tag_repo = PostTagRepository(session)
        self.comment_repo = CommentRepository(session)

    # PUBLIC_INTERFACE
    def create_post(self, post: Post, tag_names: Iterable[str] = ()) -> Post:
        """
        Insert a post and link it to the named tags, creating missing tags.

        Parameters:
            post: new Post entity
            tag_names: tag names; blank names and duplicates are skipped
        Returns:
            The persisted Post
        """
        created = self.post_repo.insert(post)
        tags = self._link_tags(created.id, tag_names)
        logger.info("Created post %s with %d tag(s)", created.id, len(tags))
        return created

    # PUBLIC_INTERFACE
    def update_post(self, post: Post, tag_names: Iterable[str] = ()) -> Post:
        """Update title/body/published flag and replace the post's tag set."""
        updated = self.post_repo.update(post)
        removed = self.post_tag_repo.delete_by_post_id(updated.id)
        tags = self._link_tags(updated.id, tag_names)
        logger.info(
            "Updated post %s: replaced %d tag link(s) with %d", updated.id, removed, len(tags)
        )
        return updated

    # PUBLIC_INTERFACE
    def delete_post(self, post: Post) -> None:
        """Delete a post together with its tag links."""
        post_id = post.id
        self.post_repo.delete(post)
        removed = self.post_tag_repo.delete_by_post_id(post_id)
        logger.info("Deleted post %s and %d tag link(s)", post_id, removed)

    # PUBLIC_INTERFACE
    def get_post_detail(self, post_id: Union[str, int]) -> PostDetail:
        """
        Load a post with its tags and comments.

        Raises:
            ValueError: post_id is not a valid id
            NoResultFound: no such post
        """
        post = self.post_repo.get_by_id(post_id)
        post.tags = self.tag_repo.list_by_post_id(post.id)
        post.comments = self.comment_repo.list_by_post_id(post.id)
        return PostDetail(
            **PostRead.model_validate(post).model_dump(),
            excerpt=post.excerpt(),
            tags=[TagRead.model_validate(t) for t in post.tags],
            comments=[CommentRead.model_validate(c) for c in post.comments],
        )

    def _link_tags(self, post_id: int, tag_names: Iterable[str]) -> List[Tag]:
        tags: List[Tag] = []
        seen = set()
        for name in tag_names:
            name = name.strip()
            if not name or name in seen:
                continue
            seen.add(name)
            tag = self.tag_repo.insert(Tag(name=name))
            self.post_tag_repo.insert(PostTag(post_id=post_id, tag_id=tag.id))
            tags.append(tag)
        return tags
