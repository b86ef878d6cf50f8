"""
Job controller.
"""

from typing import List, Optional
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.services.job_service import JobService
from app.schemas.job import (
    JobAttachmentCreate,
    JobAttachmentListResponse,
    JobAttachmentResponse,
    JobBoardResponse,
    JobCreate,
    JobDetailResponse,
    JobListResponse,
    JobNoteCreate,
    JobNoteResponse,
    JobNoteUpdate,
    JobStatusUpdate,
    JobUpdate,
)


class JobController(BaseController):
    """Controller for jobs and their notes and attachments."""

    def __init__(self, session: AsyncSession, user_id: UUID):
        self.job_service = JobService(session, user_id)

    async def create_job(self, job_data: JobCreate) -> JobDetailResponse:
        return await self.job_service.create_job(job_data)

    async def get_job(self, job_id: UUID) -> Optional[JobDetailResponse]:
        return await self.job_service.get_job(job_id)

    async def list_jobs(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[str] = None,
    ) -> JobListResponse:
        jobs, total = await self.job_service.list_jobs(skip=skip, limit=limit, status=status)
        return JobListResponse(items=jobs, total=total)

    async def get_board(self) -> JobBoardResponse:
        return await self.job_service.get_board()

    async def update_job(self, job_id: UUID, job_data: JobUpdate) -> Optional[JobDetailResponse]:
        return await self.job_service.update_job(job_id, job_data)

    async def update_status(
        self,
        job_id: UUID,
        status_data: JobStatusUpdate,
    ) -> Optional[JobDetailResponse]:
        return await self.job_service.update_status(job_id, status_data)

    async def delete_job(self, job_id: UUID) -> bool:
        return await self.job_service.delete_job(job_id)

    async def list_notes(self, job_id: UUID) -> Optional[List[JobNoteResponse]]:
        return await self.job_service.list_notes(job_id)

    async def add_note(self, job_id: UUID, note_data: JobNoteCreate) -> Optional[JobNoteResponse]:
        return await self.job_service.add_note(job_id, note_data)

    async def update_note(
        self,
        job_id: UUID,
        note_id: UUID,
        note_data: JobNoteUpdate,
    ) -> Optional[JobNoteResponse]:
        return await self.job_service.update_note(job_id, note_id, note_data)

    async def delete_note(self, job_id: UUID, note_id: UUID) -> bool:
        return await self.job_service.delete_note(job_id, note_id)

    async def list_attachments(self, job_id: UUID) -> Optional[JobAttachmentListResponse]:
        return await self.job_service.list_attachments(job_id)

    async def add_attachment(
        self,
        job_id: UUID,
        attachment_data: JobAttachmentCreate,
    ) -> Optional[JobAttachmentResponse]:
        return await self.job_service.add_attachment(job_id, attachment_data)

    async def delete_attachment(self, job_id: UUID, attachment_id: UUID) -> bool:
        return await self.job_service.delete_attachment(job_id, attachment_id)
