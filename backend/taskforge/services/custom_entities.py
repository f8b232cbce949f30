"""Custom Entity Registry — one descriptor per custom entity, one repository class for all.

Invariants:
    - Slugs are unique and form the URL segment under /api/v1/custom/
    - Every descriptor carries the create RuleSet, the create/update/response
      schemas, and the repository class to use
    - Assignees are always read with their user loaded

Design Decisions:
    - Descriptor table over nine service modules: the contract is identical,
      only model, rules and schemas differ
"""

from dataclasses import dataclass
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from taskforge.core import rule_sets
from taskforge.core.validation import RuleSet
from taskforge.models.custom import (
    CustomAssignee,
    CustomField,
    CustomLabel,
    CustomPriority,
    CustomProject,
    CustomRecurring,
    CustomReminder,
    CustomStatus,
    CustomTag,
)
from taskforge.schemas.custom import (
    CustomAssigneeResponse,
    CustomAssigneeUpdate,
    CustomFieldResponse,
    CustomFieldUpdate,
    CustomNameResponse,
    CustomNameUpdate,
    CustomPriorityResponse,
    CustomPriorityUpdate,
    CustomRecurringResponse,
    CustomRecurringUpdate,
    CustomReminderResponse,
    CustomReminderUpdate,
)
from taskforge.services.repository import CrudRepository


class AssigneeRepository(CrudRepository[CustomAssignee]):
    eager = ("user",)


# Create bodies — parsed after the rule pipeline has passed

class _Create(BaseModel):
    model_config = ConfigDict(extra="ignore")


class CustomFieldCreate(_Create):
    name: str = Field(max_length=200)
    value: str = Field(max_length=2000)


class CustomNameCreate(_Create):
    name: str = Field(max_length=200)


class CustomPriorityCreate(_Create):
    level: str = Field(max_length=100)


class CustomRecurringCreate(_Create):
    pattern: str = Field(max_length=200)


class CustomReminderCreate(_Create):
    time: str = Field(max_length=100)


class CustomAssigneeCreate(_Create):
    user_id: UUID


@dataclass(frozen=True)
class CustomEntity:
    slug: str
    label: str
    model: type
    create_rules: RuleSet
    create_schema: type[BaseModel]
    update_schema: type[BaseModel]
    response_schema: type[BaseModel]
    repository: type[CrudRepository] = CrudRepository


CUSTOM_FIELDS = CustomEntity(
    "fields", "Custom field", CustomField, rule_sets.CUSTOM_FIELD_CREATE,
    CustomFieldCreate, CustomFieldUpdate, CustomFieldResponse,
)
CUSTOM_LABELS = CustomEntity(
    "labels", "Custom label", CustomLabel, rule_sets.CUSTOM_NAME_CREATE,
    CustomNameCreate, CustomNameUpdate, CustomNameResponse,
)
CUSTOM_PRIORITIES = CustomEntity(
    "priorities", "Custom priority", CustomPriority, rule_sets.CUSTOM_PRIORITY_CREATE,
    CustomPriorityCreate, CustomPriorityUpdate, CustomPriorityResponse,
)
CUSTOM_STATUSES = CustomEntity(
    "statuses", "Custom status", CustomStatus, rule_sets.CUSTOM_NAME_CREATE,
    CustomNameCreate, CustomNameUpdate, CustomNameResponse,
)
CUSTOM_TAGS = CustomEntity(
    "tags", "Custom tag", CustomTag, rule_sets.CUSTOM_NAME_CREATE,
    CustomNameCreate, CustomNameUpdate, CustomNameResponse,
)
CUSTOM_RECURRINGS = CustomEntity(
    "recurrings", "Custom recurring", CustomRecurring, rule_sets.CUSTOM_RECURRING_CREATE,
    CustomRecurringCreate, CustomRecurringUpdate, CustomRecurringResponse,
)
CUSTOM_REMINDERS = CustomEntity(
    "reminders", "Custom reminder", CustomReminder, rule_sets.CUSTOM_REMINDER_CREATE,
    CustomReminderCreate, CustomReminderUpdate, CustomReminderResponse,
)
CUSTOM_PROJECTS = CustomEntity(
    "projects", "Custom project", CustomProject, rule_sets.CUSTOM_NAME_CREATE,
    CustomNameCreate, CustomNameUpdate, CustomNameResponse,
)
CUSTOM_ASSIGNEES = CustomEntity(
    "assignees", "Custom assignee", CustomAssignee, rule_sets.CUSTOM_ASSIGNEE_CREATE,
    CustomAssigneeCreate, CustomAssigneeUpdate, CustomAssigneeResponse,
    repository=AssigneeRepository,
)

CUSTOM_ENTITIES: tuple[CustomEntity, ...] = (
    CUSTOM_FIELDS,
    CUSTOM_LABELS,
    CUSTOM_PRIORITIES,
    CUSTOM_STATUSES,
    CUSTOM_TAGS,
    CUSTOM_RECURRINGS,
    CUSTOM_REMINDERS,
    CUSTOM_PROJECTS,
    CUSTOM_ASSIGNEES,
)


def repository_for(entity: CustomEntity, db) -> CrudRepository:
    return entity.repository(db, entity.model)
