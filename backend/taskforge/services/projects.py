"""Project & Task Repositories — owner-scoped access on top of CrudRepository.

Invariants:
    - get_owned() returns None both for unknown ids and for projects/tasks the
      caller does not own (no existence leak across owners)
    - Projects are always read with members loaded
    - add_member() is idempotent; remove_member() of a non-member is a no-op
    - Deleting a project deletes its tasks (ORM cascade + FK ON DELETE CASCADE)
"""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from taskforge.models.project import Project
from taskforge.models.task import Task
from taskforge.models.user import User
from taskforge.services.repository import CrudRepository

logger = logging.getLogger(__name__)


class ProjectRepository(CrudRepository[Project]):
    eager = ("members",)

    def __init__(self, db: AsyncSession):
        super().__init__(db, Project)

    async def get_owned(self, project_id: UUID, owner_id: UUID) -> Project | None:
        project = await self.get(project_id)
        if project is None or project.owner_id != owner_id:
            return None
        return project

    async def add_member(self, project: Project, user: User) -> Project:
        if all(member.id != user.id for member in project.members):
            project.members.append(user)
            await self.db.commit()
            logger.info(
                "Project member added",
                extra={"resource_id": str(project.id), "user_id": str(user.id)},
            )
        return await self._reload(project.id)

    async def remove_member(self, project: Project, user_id: UUID) -> Project:
        remaining = [m for m in project.members if m.id != user_id]
        if len(remaining) != len(project.members):
            project.members = remaining
            await self.db.commit()
            logger.info(
                "Project member removed",
                extra={"resource_id": str(project.id), "user_id": str(user_id)},
            )
        return await self._reload(project.id)


class TaskRepository(CrudRepository[Task]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, Task)

    async def get_owned(self, task_id: UUID, owner_id: UUID) -> Task | None:
        result = await self.db.execute(
            select(Task)
            .join(Task.project)
            .where(Task.id == task_id, Project.owner_id == owner_id),
        )
        return result.scalar_one_or_none()
