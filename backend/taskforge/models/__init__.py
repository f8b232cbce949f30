"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the owner of notifications, projects and assigned tasks

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
    - The nine custom entities share one module: same shape, one or two
      required text columns each
"""

from taskforge.models.user import User  # noqa: F401
from taskforge.models.project import Project  # noqa: F401
from taskforge.models.task import Task  # noqa: F401
from taskforge.models.notification import Notification  # noqa: F401
from taskforge.models.task_metrics import TaskMetrics  # noqa: F401
from taskforge.models.custom import (  # noqa: F401
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
