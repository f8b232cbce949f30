"""Domain Types — identity and enum types shared across layers.

Invariants:
    - CallerIdentity is immutable once attached to a request
    - Enum values match what is persisted in the database
"""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID


@dataclass(frozen=True)
class CallerIdentity:
    """Authenticated caller, set on request.state.user by the auth layer."""
    id: UUID
    role: str


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


class ProjectStatus(str, Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"
