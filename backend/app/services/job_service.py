"""
Job service: the job board, notes and attachments.
"""

import logging
from typing import List, Optional, Tuple
from uuid import UUID

from app.services.base_service import OwnedService
from app.db.repositories.client_repository import ClientRepository
from app.db.repositories.job_attachment_repository import JobAttachmentRepository
from app.db.repositories.job_note_repository import JobNoteRepository
from app.db.repositories.job_repository import JobRepository
from app.models.job import AttachmentType, JobStatus
from app.schemas.job import (
    JobAttachmentCreate,
    JobAttachmentListResponse,
    JobAttachmentResponse,
    JobBoardResponse,
    JobCreate,
    JobDetailResponse,
    JobNoteCreate,
    JobNoteResponse,
    JobNoteUpdate,
    JobResponse,
    JobStatusUpdate,
    JobUpdate,
)
from app.utils.status import parse_status_list, status_value

logger = logging.getLogger(__name__)


class JobService(OwnedService):
    """Service for job operations."""

    def __init__(self, session, user_id: UUID):
        super().__init__(session, user_id)
        self.job_repo = JobRepository(session)
        self.client_repo = ClientRepository(session)
        self.note_repo = JobNoteRepository(session)
        self.attachment_repo = JobAttachmentRepository(session)

    async def _require_client(self, client_id: Optional[UUID]) -> None:
        if client_id is None:
            return
        client = await self.client_repo.get_for_user(client_id, self.user_id)
        if not client:
            raise ValueError("Client not found")

    async def create_job(self, job_data: JobCreate) -> JobDetailResponse:
        """
        Create a job.

        Raises:
            ValueError: If a client is given that does not belong to the user
        """
        await self._require_client(job_data.client_id)
        job = await self.job_repo.create(user_id=self.user_id, **job_data.model_dump())
        await self.session.commit()
        logger.info(f"Created job {job.id}")
        return await self.get_job(job.id)

    async def get_job(self, job_id: UUID) -> Optional[JobDetailResponse]:
        job = await self.job_repo.get_for_user(job_id, self.user_id)
        if not job:
            return None
        return JobDetailResponse.model_validate(job)

    async def list_jobs(
        self,
        skip: int = 0,
        limit: int = 100,
        status: Optional[str] = None,
    ) -> Tuple[List[JobResponse], int]:
        """List jobs newest first, optionally for a comma separated set of statuses."""
        statuses = parse_status_list(JobStatus, status)
        jobs = await self.job_repo.list_by_statuses(self.user_id, statuses, skip=skip, limit=limit)
        total = await self.job_repo.count_by_statuses(self.user_id, statuses)
        return [JobResponse.model_validate(job) for job in jobs], total

    async def get_board(self) -> JobBoardResponse:
        """All jobs grouped by status column, newest first in each."""
        jobs = await self.job_repo.list_by_statuses(self.user_id, limit=None)
        board = JobBoardResponse()
        for job in jobs:
            column = status_value(job.status) or JobStatus.PENDING.value
            getattr(board, column).append(JobResponse.model_validate(job))
        return board

    async def update_job(self, job_id: UUID, job_data: JobUpdate) -> Optional[JobDetailResponse]:
        job = await self.job_repo.get_for_user(job_id, self.user_id)
        if not job:
            return None

        update_dict = job_data.model_dump(exclude_unset=True)
        if "title" in update_dict and not update_dict["title"]:
            raise ValueError("Job title is required")
        if "status" in update_dict and update_dict["status"] is None:
            update_dict.pop("status")
        if "client_id" in update_dict:
            await self._require_client(update_dict["client_id"])

        await self.job_repo.update_instance(job, **update_dict)
        await self.session.commit()
        return await self.get_job(job_id)

    async def update_status(
        self,
        job_id: UUID,
        status_data: JobStatusUpdate,
    ) -> Optional[JobDetailResponse]:
        job = await self.job_repo.get_for_user(job_id, self.user_id)
        if not job:
            return None
        previous = status_value(job.status)
        await self.job_repo.update_instance(job, status=status_data.status)
        await self.session.commit()
        logger.info(f"Job {job_id} status {previous} -> {status_data.status.value}")
        return await self.get_job(job_id)

    async def delete_job(self, job_id: UUID) -> bool:
        """Delete a job together with its notes and attachments."""
        job = await self.job_repo.get_for_user(job_id, self.user_id)
        if not job:
            return False
        await self.job_repo.delete_instance(job)
        await self.session.commit()
        return True

    # Notes

    async def list_notes(self, job_id: UUID) -> Optional[List[JobNoteResponse]]:
        job = await self.job_repo.get_for_user(job_id, self.user_id)
        if not job:
            return None
        notes = await self.note_repo.list_for_job(job_id)
        return [JobNoteResponse.model_validate(note) for note in notes]

    async def add_note(self, job_id: UUID, note_data: JobNoteCreate) -> Optional[JobNoteResponse]:
        job = await self.job_repo.get_for_user(job_id, self.user_id)
        if not job:
            return None
        note = await self.note_repo.create(
            job_id=job_id,
            user_id=self.user_id,
            content=note_data.content,
            type=note_data.type,
        )
        await self.session.commit()
        return JobNoteResponse.model_validate(note)

    async def update_note(
        self,
        job_id: UUID,
        note_id: UUID,
        note_data: JobNoteUpdate,
    ) -> Optional[JobNoteResponse]:
        job = await self.job_repo.get_for_user(job_id, self.user_id)
        if not job:
            return None
        note = await self.note_repo.get_for_job(note_id, job_id)
        if not note:
            return None
        await self.note_repo.update_instance(note, content=note_data.content)
        await self.session.commit()
        return JobNoteResponse.model_validate(note)

    async def delete_note(self, job_id: UUID, note_id: UUID) -> bool:
        job = await self.job_repo.get_for_user(job_id, self.user_id)
        if not job:
            return False
        note = await self.note_repo.get_for_job(note_id, job_id)
        if not note:
            return False
        await self.note_repo.delete_instance(note)
        await self.session.commit()
        return True

    # Attachments

    async def list_attachments(self, job_id: UUID) -> Optional[JobAttachmentListResponse]:
        """Attachments split into photos and documents, newest first."""
        job = await self.job_repo.get_for_user(job_id, self.user_id)
        if not job:
            return None
        attachments = await self.attachment_repo.list_for_job(job_id)
        grouped = JobAttachmentListResponse()
        for attachment in attachments:
            item = JobAttachmentResponse.model_validate(attachment)
            if item.type == AttachmentType.PHOTO:
                grouped.photos.append(item)
            else:
                grouped.documents.append(item)
        return grouped

    async def add_attachment(
        self,
        job_id: UUID,
        attachment_data: JobAttachmentCreate,
    ) -> Optional[JobAttachmentResponse]:
        """Record a file that has already been uploaded to storage."""
        job = await self.job_repo.get_for_user(job_id, self.user_id)
        if not job:
            return None
        attachment = await self.attachment_repo.create(
            job_id=job_id,
            user_id=self.user_id,
            **attachment_data.model_dump(),
        )
        await self.session.commit()
        logger.info(f"Attached {attachment.type.value} {attachment.file_name} to job {job_id}")
        return JobAttachmentResponse.model_validate(attachment)

    async def delete_attachment(self, job_id: UUID, attachment_id: UUID) -> bool:
        job = await self.job_repo.get_for_user(job_id, self.user_id)
        if not job:
            return False
        attachment = await self.attachment_repo.get_for_job(attachment_id, job_id)
        if not attachment:
            return False
        await self.attachment_repo.delete_instance(attachment)
        await self.session.commit()
        return True
