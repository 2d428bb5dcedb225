from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from blog_data.db.base import Base, IntPkMixin, TimestampMixin


class User(IntPkMixin, TimestampMixin, Base):
    """
    Blog user. Local credentials (email or telephone + password) and a GitHub
    login bind to the same record. The unique columns are nullable, so several
    users may leave any of them empty.
    """
    __tablename__ = "users"

    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, unique=True)
    telephone: Mapped[Optional[str]] = mapped_column(String(32), nullable=True, unique=True)
    password: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    verify_state: Mapped[str] = mapped_column(String(8), nullable=False, default="0", server_default="0")
    secret_key: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    out_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    github_login_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True, unique=True)
    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default="0")
    avatar_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    nick_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
