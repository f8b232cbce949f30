"""Persisted Shapes — tests for column defaults and relationships.

Tests cover:
    - TaskMetrics counters all default to zero
    - User defaults (role, flags, timestamps)
    - User reference collections: projects, notifications, tasks
"""

from sqlalchemy import select
from sqlalchemy.orm import selectinload

from taskforge.models.notification import Notification
from taskforge.models.project import Project
from taskforge.models.task import Task
from taskforge.models.task_metrics import COUNTER_FIELDS, TaskMetrics
from taskforge.models.user import User


async def test_task_metrics_counters_default_to_zero(test_db):
    metrics = TaskMetrics()
    test_db.add(metrics)
    await test_db.commit()
    await test_db.refresh(metrics)
    assert len(COUNTER_FIELDS) == 9
    for name in COUNTER_FIELDS:
        assert getattr(metrics, name) == 0, name


async def test_task_metrics_counters_are_independent(test_db):
    metrics = TaskMetrics(comments_count=3)
    test_db.add(metrics)
    await test_db.commit()
    await test_db.refresh(metrics)
    assert metrics.comments_count == 3
    assert metrics.attachments_count == 0


async def test_user_defaults(test_db, seed_user):
    assert seed_user.role == "user"
    assert seed_user.is_active is True
    assert seed_user.is_online is False
    assert seed_user.created_at is not None
    assert seed_user.last_login is None


async def test_user_reference_collections(test_db, seed_user):
    project = Project(name="Launch", owner_id=seed_user.id)
    test_db.add(project)
    await test_db.flush()
    test_db.add(Task(title="Write docs", project_id=project.id, assignee_id=seed_user.id))
    test_db.add(Notification(user_id=seed_user.id, content="Assigned"))
    await test_db.commit()

    result = await test_db.execute(
        select(User)
        .where(User.id == seed_user.id)
        .options(
            selectinload(User.projects),
            selectinload(User.notifications),
            selectinload(User.tasks),
        )
        .execution_options(populate_existing=True),
    )
    user = result.scalar_one()
    assert [p.name for p in user.projects] == ["Launch"]
    assert [n.content for n in user.notifications] == ["Assigned"]
    assert [t.title for t in user.tasks] == ["Write docs"]
    assert user.tasks[0].status == "todo"
    assert user.projects[0].status == "active"
