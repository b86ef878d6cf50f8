"""
Job note repository.
"""

from typing import Optional, List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.repositories.base_repository import BaseRepository
from app.models.job import JobNote


class JobNoteRepository(BaseRepository[JobNote]):
    """Repository for notes on a job."""

    def __init__(self, session: AsyncSession):
        super().__init__(JobNote, session)

    async def list_for_job(self, job_id: UUID) -> List[JobNote]:
        result = await self.session.execute(
            select(JobNote).where(JobNote.job_id == job_id).order_by(JobNote.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_for_job(self, note_id: UUID, job_id: UUID) -> Optional[JobNote]:
        result = await self.session.execute(
            select(JobNote).where(JobNote.id == note_id, JobNote.job_id == job_id)
        )
        return result.scalar_one_or_none()
