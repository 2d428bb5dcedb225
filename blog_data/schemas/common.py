from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class IDModel(BaseModel):
    """Base schema exposing an integer primary key."""
    id: int = Field(..., description="Unique identifier")


class Timestamps(BaseModel):
    """Common created/updated timestamp fields."""
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
