"""Notification Routes — the caller's inbox.

Invariants:
    - Every route requires an authenticated caller (any role)
    - GET lists only the caller's notifications, newest first
    - POST targets user_id when given, the caller otherwise
    - PUT /{id}/seen on an unknown id → 404
"""

import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, ConfigDict
from sqlalchemy.ext.asyncio import AsyncSession

from taskforge.api.dependencies import parse_body, require_roles, validated_body
from taskforge.core import rule_sets
from taskforge.core.domain_types import CallerIdentity
from taskforge.core.errors import ResourceNotFoundError
from taskforge.infrastructure.database import get_db
from taskforge.schemas.notification import NotificationResponse
from taskforge.services.notifications import NotificationService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/notifications", tags=["notifications"])

authenticated = require_roles()


class NotificationCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: str
    user_id: UUID | None = None


@router.get("", response_model=list[NotificationResponse])
async def list_notifications(
    caller: CallerIdentity = Depends(authenticated),
    db: AsyncSession = Depends(get_db),
):
    return await NotificationService(db).list_for_user(caller.id)


@router.post(
    "", response_model=NotificationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_notification(
    caller: CallerIdentity = Depends(authenticated),
    body: dict[str, Any] = Depends(validated_body(rule_sets.NOTIFICATION_CREATE)),
    db: AsyncSession = Depends(get_db),
):
    payload = parse_body(NotificationCreate, body)
    return await NotificationService(db).create(
        payload.user_id or caller.id, payload.content,
    )


@router.put("/mark-all-seen")
async def mark_all_seen(
    caller: CallerIdentity = Depends(authenticated),
    db: AsyncSession = Depends(get_db),
):
    updated = await NotificationService(db).mark_all_seen(caller.id)
    return {"message": "All notifications marked as seen", "updated": updated}


@router.put("/{notification_id}/seen", response_model=NotificationResponse)
async def mark_seen(
    notification_id: UUID,
    caller: CallerIdentity = Depends(authenticated),
    db: AsyncSession = Depends(get_db),
):
    notification = await NotificationService(db).mark_seen(notification_id)
    if notification is None:
        raise ResourceNotFoundError("Notification", str(notification_id))
    return notification
