"""
Repository interface and its SQLAlchemy implementation.

Every entity is reached through a repository exposing get / list / create /
update, so callers never build queries themselves and tests can swap in an
in-memory store.
"""

import logging
from typing import Any, Generic, Optional, Protocol, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from staydesk.core.database import Base
from staydesk.core.errors import NotFoundError

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


class Repository(Protocol[ModelType]):
    """Capability set shared by every entity store."""

    async def get(self, entity_id: int) -> Optional[ModelType]: ...

    async def list(self, **filters: Any) -> list[ModelType]: ...

    async def create(self, values: dict[str, Any]) -> ModelType: ...

    async def update(self, entity_id: int, values: dict[str, Any]) -> ModelType: ...


class SqlRepository(Generic[ModelType]):
    """Repository backed by an ``AsyncSession``.

    Subclasses set ``model`` and optionally ``default_order`` (a column
    expression or a tuple of them) and ``label`` (used in not-found messages).
    """

    model: type[ModelType]
    default_order: Any = None
    label: Optional[str] = None

    def __init__(self, db: AsyncSession):
        self.db = db

    @property
    def entity_name(self) -> str:
        return self.label or self.model.__name__

    async def get(self, entity_id: int) -> Optional[ModelType]:
        return await self.db.get(self.model, entity_id)

    async def get_or_404(self, entity_id: int) -> ModelType:
        entity = await self.get(entity_id)
        if entity is None:
            raise NotFoundError(f"{self.entity_name} not found")
        return entity

    async def list(
        self,
        *,
        order_by: Any = None,
        limit: Optional[int] = None,
        **filters: Any,
    ) -> list[ModelType]:
        """Equality-filtered listing; ``None`` filter values are ignored."""
        query = select(self.model)
        for field, value in filters.items():
            if value is not None:
                query = query.where(getattr(self.model, field) == value)

        order = order_by if order_by is not None else self.default_order
        if isinstance(order, tuple):
            query = query.order_by(*order)
        elif order is not None:
            query = query.order_by(order)
        if limit is not None:
            query = query.limit(limit)

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def create(self, values: dict[str, Any]) -> ModelType:
        entity = self.model(**values)
        self.db.add(entity)
        await self.db.commit()
        await self.db.refresh(entity)
        logger.info(f"[STORE] Created {self.model.__name__} id={entity.id}")
        return entity

    async def update(self, entity_id: int, values: dict[str, Any]) -> ModelType:
        """Partial patch; concurrent writers simply overwrite each other."""
        entity = await self.get_or_404(entity_id)
        for field, value in values.items():
            setattr(entity, field, value)
        await self.db.commit()
        await self.db.refresh(entity)
        return entity
