from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import IDModel, Timestamps


class UserRead(IDModel, Timestamps):
    """User read model. Password and secret key are never exposed."""
    email: Optional[str] = Field(None)
    telephone: Optional[str] = Field(None)
    verify_state: str = Field("0", description="Email verification state")
    out_time: Optional[datetime] = Field(None, description="Expiry of the secret key")
    github_login_id: Optional[str] = Field(None)
    is_admin: bool = Field(False)
    avatar_url: Optional[str] = Field(None)
    nick_name: Optional[str] = Field(None)

    class Config:
        from_attributes = True
