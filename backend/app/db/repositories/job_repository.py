"""
Job repository for database operations.
"""

from typing import Optional, List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from sqlalchemy.orm import selectinload

from app.db.repositories.base_repository import OwnedRepository
from app.models.job import Job, JobStatus


class JobRepository(OwnedRepository[Job]):
    """Repository for job operations."""

    load_options = (selectinload(Job.client), selectinload(Job.quote))

    def __init__(self, session: AsyncSession):
        super().__init__(Job, session)

    async def get_by_quote(self, quote_id: UUID) -> Optional[Job]:
        """First job created from a quote, if any."""
        result = await self.session.execute(
            select(Job).where(Job.quote_id == quote_id).order_by(Job.created_at).limit(1)
        )
        return result.scalar_one_or_none()

    async def list_by_statuses(
        self,
        user_id: UUID,
        statuses: Optional[List[JobStatus]] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[Job]:
        query = select(Job).options(*self.load_options).where(Job.user_id == user_id)
        if statuses is not None:
            query = query.where(Job.status.in_(statuses))
        query = query.order_by(Job.created_at.desc()).offset(skip).limit(limit)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def count_by_statuses(
        self,
        user_id: UUID,
        statuses: Optional[List[JobStatus]] = None,
    ) -> int:
        query = select(func.count()).select_from(Job).where(Job.user_id == user_id)
        if statuses is not None:
            query = query.where(Job.status.in_(statuses))
        result = await self.session.execute(query)
        return result.scalar_one()
