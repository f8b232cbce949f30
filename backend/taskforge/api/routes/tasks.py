"""Task Routes — tasks inside the caller's projects.

Invariants:
    - Every route requires an authenticated caller (any role)
    - Tasks are reachable only through a project the caller owns;
      anything else answers 404
    - An assignee must be an existing user → 404 otherwise
"""

import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from taskforge.api.dependencies import parse_body, require_roles, validated_body
from taskforge.core import rule_sets
from taskforge.core.domain_types import CallerIdentity
from taskforge.core.errors import ResourceNotFoundError
from taskforge.core.pagination import DEFAULT_LIMIT
from taskforge.infrastructure.database import get_db
from taskforge.schemas.task import TaskCreate, TaskResponse, TaskUpdate
from taskforge.services.projects import ProjectRepository, TaskRepository
from taskforge.services.users import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/tasks", tags=["tasks"])

authenticated = require_roles()


async def _require_project(
    project_id: UUID, caller: CallerIdentity, db: AsyncSession,
) -> None:
    if await ProjectRepository(db).get_owned(project_id, caller.id) is None:
        raise ResourceNotFoundError("Project", str(project_id))


async def _require_assignee(assignee_id: UUID | None, db: AsyncSession) -> None:
    if assignee_id is not None and await UserService(db).get(assignee_id) is None:
        raise ResourceNotFoundError("User", str(assignee_id))


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(
    caller: CallerIdentity = Depends(authenticated),
    body: dict[str, Any] = Depends(validated_body(rule_sets.TASK_CREATE)),
    db: AsyncSession = Depends(get_db),
):
    payload = parse_body(TaskCreate, body)
    await _require_project(payload.project_id, caller, db)
    await _require_assignee(payload.assignee_id, db)
    return await TaskRepository(db).create(**payload.model_dump())


@router.get("/project/{project_id}", response_model=list[TaskResponse])
async def list_project_tasks(
    project_id: UUID,
    page: int | None = Query(None, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=100),
    caller: CallerIdentity = Depends(authenticated),
    db: AsyncSession = Depends(get_db),
):
    await _require_project(project_id, caller, db)
    return await TaskRepository(db).list_all(
        page=page, limit=limit, project_id=project_id,
    )


@router.put("/{task_id}", response_model=TaskResponse)
async def update_task(
    task_id: UUID,
    body: TaskUpdate,
    caller: CallerIdentity = Depends(authenticated),
    db: AsyncSession = Depends(get_db),
):
    repo = TaskRepository(db)
    if await repo.get_owned(task_id, caller.id) is None:
        raise ResourceNotFoundError("Task", str(task_id))
    changes = body.changes()
    await _require_assignee(changes.get("assignee_id"), db)
    return await repo.update(task_id, changes)


@router.delete("/{task_id}")
async def delete_task(
    task_id: UUID,
    caller: CallerIdentity = Depends(authenticated),
    db: AsyncSession = Depends(get_db),
):
    repo = TaskRepository(db)
    if await repo.get_owned(task_id, caller.id) is None:
        raise ResourceNotFoundError("Task", str(task_id))
    await repo.delete(task_id)
    return {"message": "Task deleted"}
