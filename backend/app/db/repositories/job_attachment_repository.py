"""
Job attachment repository.
"""

from typing import Optional, List
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from app.db.repositories.base_repository import BaseRepository
from app.models.job import JobAttachment


class JobAttachmentRepository(BaseRepository[JobAttachment]):
    """Repository for photo and document records on a job."""

    def __init__(self, session: AsyncSession):
        super().__init__(JobAttachment, session)

    async def list_for_job(self, job_id: UUID) -> List[JobAttachment]:
        result = await self.session.execute(
            select(JobAttachment)
            .where(JobAttachment.job_id == job_id)
            .order_by(JobAttachment.created_at.desc())
        )
        return list(result.scalars().all())

    async def get_for_job(self, attachment_id: UUID, job_id: UUID) -> Optional[JobAttachment]:
        result = await self.session.execute(
            select(JobAttachment).where(
                JobAttachment.id == attachment_id,
                JobAttachment.job_id == job_id,
            )
        )
        return result.scalar_one_or_none()
