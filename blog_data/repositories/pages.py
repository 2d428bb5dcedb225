from __future__ import annotations

from typing import List

from sqlalchemy import select, update

from blog_data.db.models.content import Page
from .base import BaseRepository


class PageRepository(BaseRepository[Page]):
    """Repository for standalone pages."""

    model = Page

    def update(self, page: Page) -> Page:
        """Write title, body and published flag only; other columns are untouched."""
        values = {"title": page.title, "body": page.body, "is_published": page.is_published}
        page_id = page.id
        self.discard_changes(page)
        stmt = (
            update(Page)
            .where(Page.id == page_id)
            .values(**values)
            .execution_options(synchronize_session="fetch")
        )
        self.execute(stmt)
        self.commit()
        return self.get_by_id(page_id)

    def list(self, published: bool) -> List[Page]:
        stmt = select(Page)
        if published:
            stmt = stmt.where(Page.is_published.is_(True))
        stmt = stmt.order_by(Page.id)
        return list(self.scalars(stmt))

    def list_published(self) -> List[Page]:
        return self.list(True)
