"""Generic Repository — create/list/get/update/delete over one ORM model.

Invariants:
    - update() returns None and delete() returns False when the id is unknown
    - Attribute names that are not columns of the model are ignored
    - The primary key is never written through create()/update()
    - Relationships named in `eager` are loaded on every read

Design Decisions:
    - Commit per call: each operation is one independent round-trip, no
      cross-call transaction
    - Re-select after writes with populate_existing so eager relationships
      are present on the returned object (no lazy loads in async context)
"""

import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from taskforge.core.pagination import DEFAULT_LIMIT, paginate
from taskforge.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class CrudRepository(Generic[ModelT]):
    """Uniform CRUD contract for a single persisted entity type."""

    eager: tuple[str, ...] = ()

    def __init__(self, db: AsyncSession, model: type[ModelT]):
        self.db = db
        self.model = model

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def _writable(self, attributes: Mapping[str, Any]) -> dict[str, Any]:
        columns = {
            c.key for c in self.model.__table__.columns if not c.primary_key
        }
        return {k: v for k, v in attributes.items() if k in columns}

    def _select(self) -> Select:
        query = select(self.model)
        for name in self.eager:
            query = query.options(selectinload(getattr(self.model, name)))
        return query

    async def _reload(self, record_id: UUID) -> ModelT | None:
        result = await self.db.execute(
            self._select()
            .where(self.model.id == record_id)
            .execution_options(populate_existing=True),
        )
        return result.scalar_one_or_none()

    async def create(self, **attributes: Any) -> ModelT:
        record = self.model(**self._writable(attributes))
        self.db.add(record)
        await self.db.commit()
        logger.info(
            f"{self.entity_name} created",
            extra={"entity": self.entity_name, "resource_id": str(record.id)},
        )
        return await self._reload(record.id)

    async def list_all(
        self,
        page: int | None = None,
        limit: int = DEFAULT_LIMIT,
        **filters: Any,
    ) -> list[ModelT]:
        """All records matching filters (column == value), paged when page is given."""
        query = self._select().filter_by(**filters).order_by(self.model.id)
        if page is not None:
            query = paginate(query, page, limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get(self, record_id: UUID) -> ModelT | None:
        return await self._reload(record_id)

    async def update(
        self, record_id: UUID, updates: Mapping[str, Any],
    ) -> ModelT | None:
        record = await self.db.get(self.model, record_id)
        if record is None:
            return None
        for key, value in self._writable(updates).items():
            setattr(record, key, value)
        await self.db.commit()
        return await self._reload(record_id)

    async def delete(self, record_id: UUID) -> bool:
        record = await self.db.get(self.model, record_id)
        if record is None:
            return False
        await self.db.delete(record)
        await self.db.commit()
        logger.info(
            f"{self.entity_name} deleted",
            extra={"entity": self.entity_name, "resource_id": str(record_id)},
        )
        return True
