"""Project Routes — the caller's projects and their members.

Invariants:
    - Every route requires an authenticated caller (any role)
    - The owner is always the caller; GET lists only the caller's projects
    - A project the caller does not own answers 404, same as an unknown id
    - Adding an unknown user as member → 404
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
from taskforge.models.project import Project
from taskforge.schemas.project import (
    ProjectCreate, ProjectMemberAdd, ProjectResponse, ProjectUpdate,
)
from taskforge.services.projects import ProjectRepository
from taskforge.services.users import UserService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/projects", tags=["projects"])

authenticated = require_roles()


async def _owned(
    project_id: UUID, caller: CallerIdentity, repo: ProjectRepository,
) -> Project:
    project = await repo.get_owned(project_id, caller.id)
    if project is None:
        raise ResourceNotFoundError("Project", str(project_id))
    return project


@router.post(
    "", response_model=ProjectResponse, status_code=status.HTTP_201_CREATED,
)
async def create_project(
    caller: CallerIdentity = Depends(authenticated),
    body: dict[str, Any] = Depends(validated_body(rule_sets.PROJECT_CREATE)),
    db: AsyncSession = Depends(get_db),
):
    payload = parse_body(ProjectCreate, body)
    return await ProjectRepository(db).create(
        **payload.model_dump(), owner_id=caller.id,
    )


@router.get("", response_model=list[ProjectResponse])
async def list_projects(
    page: int | None = Query(None, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=100),
    caller: CallerIdentity = Depends(authenticated),
    db: AsyncSession = Depends(get_db),
):
    return await ProjectRepository(db).list_all(
        page=page, limit=limit, owner_id=caller.id,
    )


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: UUID,
    caller: CallerIdentity = Depends(authenticated),
    db: AsyncSession = Depends(get_db),
):
    return await _owned(project_id, caller, ProjectRepository(db))


@router.put("/{project_id}", response_model=ProjectResponse)
async def update_project(
    project_id: UUID,
    body: ProjectUpdate,
    caller: CallerIdentity = Depends(authenticated),
    db: AsyncSession = Depends(get_db),
):
    repo = ProjectRepository(db)
    await _owned(project_id, caller, repo)
    return await repo.update(project_id, body.changes())


@router.delete("/{project_id}")
async def delete_project(
    project_id: UUID,
    caller: CallerIdentity = Depends(authenticated),
    db: AsyncSession = Depends(get_db),
):
    repo = ProjectRepository(db)
    await _owned(project_id, caller, repo)
    await repo.delete(project_id)
    return {"message": "Project deleted successfully"}


@router.post("/{project_id}/members", response_model=ProjectResponse)
async def add_member(
    project_id: UUID,
    caller: CallerIdentity = Depends(authenticated),
    body: dict[str, Any] = Depends(validated_body(rule_sets.PROJECT_MEMBER_ADD)),
    db: AsyncSession = Depends(get_db),
):
    repo = ProjectRepository(db)
    project = await _owned(project_id, caller, repo)
    user_id = parse_body(ProjectMemberAdd, body).user_id
    user = await UserService(db).get(user_id)
    if user is None:
        raise ResourceNotFoundError("User", str(user_id))
    return await repo.add_member(project, user)


@router.delete("/{project_id}/members/{user_id}", response_model=ProjectResponse)
async def remove_member(
    project_id: UUID,
    user_id: UUID,
    caller: CallerIdentity = Depends(authenticated),
    db: AsyncSession = Depends(get_db),
):
    repo = ProjectRepository(db)
    project = await _owned(project_id, caller, repo)
    return await repo.remove_member(project, user_id)
