"""Notification Service — create, list newest-first, mark seen.

Invariants:
    - New notifications are unseen and stamped with the current UTC time
    - list_for_user orders by created_at descending
    - mark_seen returns None for an unknown id (not an exception)

Design Decisions:
    - mark_all_seen flips loaded objects rather than issuing a bulk UPDATE,
      so instances already in the session never go stale
"""

import logging
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskforge.models.notification import Notification

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, user_id: UUID, content: str) -> Notification:
        notification = Notification(
            user_id=user_id,
            content=content,
            seen=False,
            created_at=datetime.now(timezone.utc),
        )
        self.db.add(notification)
        await self.db.commit()
        await self.db.refresh(notification)
        logger.info(
            "Notification created",
            extra={"user_id": str(user_id), "resource_id": str(notification.id)},
        )
        return notification

    async def list_for_user(self, user_id: UUID) -> list[Notification]:
        result = await self.db.execute(
            select(Notification)
            .where(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc()),
        )
        return list(result.scalars().all())

    async def mark_seen(self, notification_id: UUID) -> Notification | None:
        notification = await self.db.get(Notification, notification_id)
        if notification is None:
            return None
        notification.seen = True
        await self.db.commit()
        return notification

    async def mark_all_seen(self, user_id: UUID) -> int:
        """Flip every unseen notification of the user; returns how many changed."""
        result = await self.db.execute(
            select(Notification).where(
                Notification.user_id == user_id, Notification.seen.is_(False),
            ),
        )
        unseen = result.scalars().all()
        for notification in unseen:
            notification.seen = True
        await self.db.commit()
        return len(unseen)
