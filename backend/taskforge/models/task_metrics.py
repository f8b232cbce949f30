"""TaskMetrics ORM — nine independent per-task counters, all starting at zero."""

import uuid

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from taskforge.db.base import Base

COUNTER_FIELDS = (
    "comments_count",
    "attachments_count",
    "subtasks_count",
    "dependencies_count",
    "reminders_count",
    "recurring_count",
    "custom_fields_count",
    "custom_statuses_count",
    "custom_priorities_count",
)


class TaskMetrics(Base):
    __tablename__ = "task_metrics"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    comments_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    attachments_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    subtasks_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    dependencies_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    reminders_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    recurring_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    custom_fields_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    custom_statuses_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    custom_priorities_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
