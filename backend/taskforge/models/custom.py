"""Custom Entity ORMs — user-defined labels, statuses, priorities and friends.

Invariants:
    - Each entity has a UUID primary key and its required text column(s)
    - CustomAssignee always references an existing user (user_id FK)
    - No cross-entity constraints beyond what the schema declares

Design Decisions:
    - All nine in one module: identical shape, the repository layer treats
      them uniformly (services/custom_entities.py)
"""

import uuid

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from taskforge.db.base import Base


def _pk():
    return mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )


class CustomField(Base):
    __tablename__ = "custom_fields"

    id: Mapped[uuid.UUID] = _pk()
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    value: Mapped[str] = mapped_column(String(2000), nullable=False)


class CustomLabel(Base):
    __tablename__ = "custom_labels"

    id: Mapped[uuid.UUID] = _pk()
    name: Mapped[str] = mapped_column(String(200), nullable=False)


class CustomPriority(Base):
    __tablename__ = "custom_priorities"

    id: Mapped[uuid.UUID] = _pk()
    level: Mapped[str] = mapped_column(String(100), nullable=False)


class CustomStatus(Base):
    __tablename__ = "custom_statuses"

    id: Mapped[uuid.UUID] = _pk()
    name: Mapped[str] = mapped_column(String(200), nullable=False)


class CustomTag(Base):
    __tablename__ = "custom_tags"

    id: Mapped[uuid.UUID] = _pk()
    name: Mapped[str] = mapped_column(String(200), nullable=False)


class CustomRecurring(Base):
    __tablename__ = "custom_recurrings"

    id: Mapped[uuid.UUID] = _pk()
    pattern: Mapped[str] = mapped_column(String(200), nullable=False)


class CustomReminder(Base):
    __tablename__ = "custom_reminders"

    id: Mapped[uuid.UUID] = _pk()
    time: Mapped[str] = mapped_column(String(100), nullable=False)


class CustomProject(Base):
    __tablename__ = "custom_projects"

    id: Mapped[uuid.UUID] = _pk()
    name: Mapped[str] = mapped_column(String(200), nullable=False)


class CustomAssignee(Base):
    """Assignee shortcut — points at a user, listed with the user loaded."""
    __tablename__ = "custom_assignees"

    id: Mapped[uuid.UUID] = _pk()
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )

    user: Mapped["User"] = relationship("User")
