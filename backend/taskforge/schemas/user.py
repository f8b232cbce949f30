"""User Schemas — public profile; the password hash never leaves the service."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    username: str
    role: str
    full_name: str | None = None
    profile_picture: str | None = None
    bio: str | None = None
    is_active: bool
    is_online: bool
    created_at: datetime
