"""Custom Entity Schemas — partial-update bodies and responses for the nine custom entities.

Invariants:
    - Update schemas: every field optional, at least min_length=1 when sent;
      null means unchanged (schemas/common.py)
    - Response schemas expose the id plus every persisted column
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from taskforge.schemas.common import PartialUpdate


class _Response(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID


# --- Field --------------------------------------------------------------------

class CustomFieldUpdate(PartialUpdate):
    name: str | None = Field(None, min_length=1, max_length=200)
    value: str | None = Field(None, min_length=1, max_length=2000)


class CustomFieldResponse(_Response):
    name: str
    value: str


# --- Name-only entities (label, status, tag, project) -------------------------

class CustomNameUpdate(PartialUpdate):
    name: str | None = Field(None, min_length=1, max_length=200)


class CustomNameResponse(_Response):
    name: str


# --- Priority -----------------------------------------------------------------

class CustomPriorityUpdate(PartialUpdate):
    level: str | None = Field(None, min_length=1, max_length=100)


class CustomPriorityResponse(_Response):
    level: str


# --- Recurring ----------------------------------------------------------------

class CustomRecurringUpdate(PartialUpdate):
    pattern: str | None = Field(None, min_length=1, max_length=200)


class CustomRecurringResponse(_Response):
    pattern: str


# --- Reminder -----------------------------------------------------------------

class CustomReminderUpdate(PartialUpdate):
    time: str | None = Field(None, min_length=1, max_length=100)


class CustomReminderResponse(_Response):
    time: str


# --- Assignee -----------------------------------------------------------------

class AssigneeUser(BaseModel):
    """User as embedded in an assignee listing (no credentials)."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    username: str
    full_name: str | None = None
    profile_picture: str | None = None


class CustomAssigneeUpdate(PartialUpdate):
    user_id: UUID | None = None


class CustomAssigneeResponse(_Response):
    user_id: UUID
    user: AssigneeUser | None = None
