"""Custom Entity Routes — create/list/update/delete for each custom entity.

Invariants:
    - POST bodies pass the entity's RuleSet before anything touches the DB
    - PATCH on an unknown id → 404; DELETE on an unknown id → 404
    - DELETE success → 204 with empty body
    - Every route requires an authenticated caller

Design Decisions:
    - Router factory, called once per entity in main.py: one code path,
      nine explicit registrations
"""

import logging
from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from taskforge.api.dependencies import parse_body, require_roles, validated_body
from taskforge.core.errors import ResourceNotFoundError
from taskforge.core.pagination import DEFAULT_LIMIT
from taskforge.infrastructure.database import get_db
from taskforge.services.custom_entities import CustomEntity, repository_for

logger = logging.getLogger(__name__)


def build_custom_entity_router(entity: CustomEntity) -> APIRouter:
    """Build the /api/v1/custom/<slug> router for one custom entity."""
    router = APIRouter(
        prefix=f"/api/v1/custom/{entity.slug}",
        tags=["custom"],
        dependencies=[Depends(require_roles())],
    )
    response_model = entity.response_schema
    update_schema = entity.update_schema

    @router.post(
        "", response_model=response_model, status_code=status.HTTP_201_CREATED,
    )
    async def create(
        body: dict[str, Any] = Depends(validated_body(entity.create_rules)),
        db: AsyncSession = Depends(get_db),
    ):
        attributes = parse_body(entity.create_schema, body).model_dump()
        return await repository_for(entity, db).create(**attributes)

    @router.get("", response_model=list[response_model])
    async def list_all(
        page: int | None = Query(None, ge=1),
        limit: int = Query(DEFAULT_LIMIT, ge=1, le=100),
        db: AsyncSession = Depends(get_db),
    ):
        """All records, or one page when ?page= is given."""
        return await repository_for(entity, db).list_all(page=page, limit=limit)

    @router.patch("/{record_id}", response_model=response_model)
    async def update(
        record_id: UUID,
        body: update_schema,
        db: AsyncSession = Depends(get_db),
    ):
        record = await repository_for(entity, db).update(
            record_id, body.changes(),
        )
        if record is None:
            raise ResourceNotFoundError(entity.label, str(record_id))
        return record

    @router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete(record_id: UUID, db: AsyncSession = Depends(get_db)):
        if not await repository_for(entity, db).delete(record_id):
            raise ResourceNotFoundError(entity.label, str(record_id))
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
