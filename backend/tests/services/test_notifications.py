"""Notification Service — tests for create/list/mark-seen semantics.

Tests cover:
    - New notifications are unseen with a creation timestamp
    - list_for_user is newest-first and scoped to one user
    - mark_seen flips the flag, returns None for unknown ids
    - mark_all_seen flips only the target user's unseen notifications
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

from taskforge.models.notification import Notification
from taskforge.services.notifications import NotificationService


async def test_create_is_unseen_with_timestamp(test_db, seed_user):
    n = await NotificationService(test_db).create(seed_user.id, "Welcome")
    assert n.seen is False
    assert n.created_at is not None
    assert n.user_id == seed_user.id


async def test_list_is_newest_first(test_db, seed_user):
    base = datetime(2026, 1, 1, tzinfo=timezone.utc)
    for i, content in enumerate(["oldest", "middle", "newest"]):
        test_db.add(Notification(
            user_id=seed_user.id, content=content,
            created_at=base + timedelta(minutes=i),
        ))
    await test_db.commit()

    listed = await NotificationService(test_db).list_for_user(seed_user.id)
    assert [n.content for n in listed] == ["newest", "middle", "oldest"]


async def test_list_is_scoped_to_user(test_db, seed_user, seed_admin):
    service = NotificationService(test_db)
    await service.create(seed_user.id, "for member")
    await service.create(seed_admin.id, "for admin")
    listed = await service.list_for_user(seed_user.id)
    assert [n.content for n in listed] == ["for member"]


async def test_mark_seen_sets_flag(test_db, seed_user):
    service = NotificationService(test_db)
    n = await service.create(seed_user.id, "ping")
    marked = await service.mark_seen(n.id)
    assert marked.seen is True


async def test_mark_seen_unknown_returns_none(test_db):
    assert await NotificationService(test_db).mark_seen(uuid4()) is None


async def test_mark_all_seen_only_touches_target_user(test_db, seed_user, seed_admin):
    service = NotificationService(test_db)
    await service.create(seed_user.id, "one")
    await service.create(seed_user.id, "two")
    await service.create(seed_admin.id, "other")

    assert await service.mark_all_seen(seed_user.id) == 2

    mine = await service.list_for_user(seed_user.id)
    theirs = await service.list_for_user(seed_admin.id)
    assert all(n.seen for n in mine)
    assert not any(n.seen for n in theirs)
