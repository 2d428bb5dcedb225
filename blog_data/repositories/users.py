from __future__ import annotations

from typing import List, Optional, Union

from sqlalchemy import func, inspect, select, update

from blog_data.db.models.users import User
from .base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for users with local and GitHub logins."""

    model = User

    def update(self, user: User) -> User:
        """
        Overwrite every column with the values held by `user`.

        Attributes left unset on `user` are written as NULL, or as the column
        default for NOT NULL columns. Raises NoResultFound if the row is gone.
        """
        values = {}
        for attr in inspect(User).column_attrs:
            if attr.key in ("id", "created_at", "updated_at"):
                continue
            column = attr.columns[0]
            value = getattr(user, attr.key)
            if value is None and not column.nullable and column.default is not None:
                value = column.default.arg
            values[attr.key] = value
        return self._update_columns(user, values)

    def get(self, user_id: Union[str, int]) -> User:
        return self.get_by_id(user_id)

    def get_by_username(self, username: str) -> User:
        """Look a user up by login email; raises NoResultFound when absent."""
        return self.scalar_one(select(User).where(User.email == username))

    def first_or_create(self, user: User) -> User:
        """
        Return the user bound to `user.github_login_id`, creating it if needed.
        Without a GitHub id there is nothing to match on, so a new user is created.
        """
        if not user.github_login_id:
            return self.insert(user)
        stmt = select(User).where(User.github_login_id == user.github_login_id)
        existing = self.scalar_one_or_none(stmt)
        if existing is not None:
            return existing
        return self.insert(user)

    def update_profile(self, user: User, avatar_url: str, nick_name: str) -> User:
        """Update avatar and nickname; empty values leave the stored column as is."""
        values = {}
        if avatar_url:
            values["avatar_url"] = avatar_url
        if nick_name:
            values["nick_name"] = nick_name
        return self._update_columns(user, values)

    def update_email(self, user: User, email: str) -> User:
        return self._update_columns(user, {"email": email})

    def update_github_id(self, user: User, github_login_id: str) -> User:
        return self._update_columns(user, {"github_login_id": github_login_id})

    def list_users(self) -> List[User]:
        """All non-admin users."""
        stmt = select(User).where(User.is_admin.is_(False)).order_by(User.id)
        return list(self.scalars(stmt))

    def count(self, is_admin: Optional[bool] = None) -> int:
        stmt = select(func.count(User.id))
        if is_admin is not None:
            stmt = stmt.where(User.is_admin.is_(is_admin))
        return int(self.scalar_one(stmt))

    def _update_columns(self, user: User, values: dict) -> User:
        user_id = user.id
        if values:
            self.discard_changes(user)
            stmt = (
                update(User)
                .where(User.id == user_id)
                .values(**values)
                .execution_options(synchronize_session="fetch")
            )
            self.execute(stmt)
            self.commit()
        return self.get_by_id(user_id)
