"""
Base repository class with common CRUD operations.
Repositories handle database access using async SQLAlchemy sessions.
"""

from typing import Generic, TypeVar, Type, Optional, List, Sequence
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.sql import Select

from app.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with common CRUD operations."""

    def __init__(self, model: Type[ModelType], session: AsyncSession):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            session: Async database session
        """
        self.model = model
        self.session = session

    async def create(self, **kwargs) -> ModelType:
        """
        Create a new record.

        Args:
            **kwargs: Model attributes

        Returns:
            Created model instance
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    async def get(self, id: UUID) -> Optional[ModelType]:
        """Get a record by ID."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)
        )
        return result.scalar_one_or_none()

    async def count(self, **filters) -> int:
        query = self._apply_filters(select(func.count()).select_from(self.model), filters)
        result = await self.session.execute(query)
        return result.scalar_one()

    async def update_instance(self, instance: ModelType, **kwargs) -> ModelType:
        """
        Apply attribute changes to a loaded instance.

        Goes through the ORM so onupdate defaults and relationship
        cascades apply. Relationships are left as loaded.
        """
        for key, value in kwargs.items():
            setattr(instance, key, value)
        await self.session.flush()
        return instance

    async def delete_instance(self, instance: ModelType) -> None:
        await self.session.delete(instance)
        await self.session.flush()

    def _apply_filters(self, query: Select, filters: dict) -> Select:
        for key, value in filters.items():
            if hasattr(self.model, key):
                query = query.where(getattr(self.model, key) == value)
        return query


class OwnedRepository(BaseRepository[ModelType]):
    """
    Repository for tables carrying a user_id owner column.
    Every lookup is scoped to the owner; other users' rows read as missing.
    """

    # Loader options applied to single-record reads (selectinload(...) etc.)
    load_options: Sequence = ()

    async def get_for_user(self, id: UUID, user_id: UUID) -> Optional[ModelType]:
        """Get a record by ID if it belongs to user_id, with relationships loaded."""
        query = (
            select(self.model)
            .options(*self.load_options)
            .where(self.model.id == id, self.model.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)
        return result.scalar_one_or_none()

    async def list_for_user(
        self,
        user_id: UUID,
        skip: int = 0,
        limit: int = 100,
        **filters,
    ) -> List[ModelType]:
        """List the user's records, newest first."""
        query = self._apply_filters(
            select(self.model).options(*self.load_options).where(self.model.user_id == user_id),
            filters,
        )
        query = query.order_by(self.model.created_at.desc()).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_for_user(self, user_id: UUID, **filters) -> int:
        return await self.count(user_id=user_id, **filters)
