"""Task Schemas — create/update bodies and response for project tasks."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from taskforge.core.domain_types import TaskStatus
from taskforge.schemas.common import PartialUpdate


class TaskCreate(BaseModel):
    model_config = ConfigDict(extra="ignore", use_enum_values=True)

    title: str = Field(max_length=300)
    project_id: UUID
    description: str | None = None
    status: TaskStatus = Field(TaskStatus.TODO, validate_default=True)
    due_date: datetime | None = None
    assignee_id: UUID | None = None


class TaskUpdate(PartialUpdate):
    # project_id is not updatable: a task never moves between projects
    title: str | None = Field(None, min_length=1, max_length=300)
    description: str | None = None
    status: TaskStatus | None = None
    due_date: datetime | None = None
    assignee_id: UUID | None = None


class TaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str | None = None
    description: str | None = None
    status: str
    due_date: datetime | None = None
    project_id: UUID | None = None
    assignee_id: UUID | None = None
