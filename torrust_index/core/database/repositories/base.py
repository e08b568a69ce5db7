"""
Base repository interfaces and utilities.

This module provides the foundational repository pattern shared by every
table repository. Built with async SQLAlchemy; every repository wraps one
short-lived ``AsyncSession`` handed out by the façade.

Repositories never catch driver errors. Mapping failures to optional values or
domain errors is the façade's job.
"""

from __future__ import annotations

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete as sa_delete
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)


class AsyncBaseRepository(Generic[EntityType]):
    """Base async repository with common CRUD operations using SQLModel."""

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async SQLModel Session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    @property
    def _primary_key(self):
        return self.model.__table__.primary_key.columns.values()[0]

    async def create(self, entity: EntityType) -> EntityType:
        """Create a new entity record.

        Args:
            entity: SQLModel instance to persist

        Returns:
            Persisted entity with generated fields populated
        """
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity

    async def get_by_id(self, entity_id: int) -> Optional[EntityType]:
        """Get entity by its primary identifier.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """
        return await self.session.get(self.model, entity_id)

    async def delete(self, entity_id: int) -> bool:
        """Delete entity by its primary identifier with a single statement.

        Args:
            entity_id: Primary key value

        Returns:
            True if a row was deleted, False if not found
        """
        stmt = sa_delete(self.model).where(self._primary_key == entity_id)
        result = await self.session.execute(stmt)
        await self.session.commit()
        return result.rowcount > 0

    async def list(self) -> List[EntityType]:
        """List every entity.

        Returns:
            List of entity instances, ordered by primary key
        """
        result = await self.session.exec(select(self.model).order_by(self._primary_key))
        return list(result)

    async def _first(self, stmt) -> Optional[EntityType]:
        result = await self.session.exec(stmt.limit(1))
        return result.first()
