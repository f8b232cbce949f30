"""Project Schemas — create/update bodies and the project response with members.

Invariants:
    - owner_id is never taken from the body; it is always the caller
    - Members are exposed without credentials
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from taskforge.core.domain_types import ProjectStatus
from taskforge.schemas.common import PartialUpdate


class ProjectCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str = Field(max_length=200)
    description: str | None = None
    due_date: datetime | None = None


class ProjectUpdate(PartialUpdate):
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    status: ProjectStatus | None = None
    due_date: datetime | None = None


class ProjectMemberAdd(BaseModel):
    model_config = ConfigDict(extra="ignore")

    user_id: UUID


class ProjectMember(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    username: str
    full_name: str | None = None


class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str | None = None
    status: str
    due_date: datetime | None = None
    owner_id: UUID
    members: list[ProjectMember] = []
    created_at: datetime
    updated_at: datetime
