"""
Job API endpoints, including the board, notes and attachments.
"""

from fastapi import APIRouter, Depends, Query, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List, Optional
from uuid import UUID

from app.api.v1.middleware import require_authentication
from app.db.session import get_db
from app.controllers.job_controller import JobController
from app.models.user import User
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

router = APIRouter()


def _not_found(entity: str = "Job") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{entity} not found",
    )


@router.post("", response_model=JobDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    job_data: JobCreate,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> JobDetailResponse:
    """Create a job."""
    controller = JobController(db, current_user.id)
    try:
        return await controller.create_job(job_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get("", response_model=JobListResponse)
async def list_jobs(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    status_filter: Optional[str] = Query(None, alias="status", description="Comma separated statuses"),
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> JobListResponse:
    """List jobs, newest first."""
    controller = JobController(db, current_user.id)
    return await controller.list_jobs(skip=skip, limit=limit, status=status_filter)


@router.get("/board", response_model=JobBoardResponse)
async def get_job_board(
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> JobBoardResponse:
    """Jobs grouped into pipeline columns."""
    controller = JobController(db, current_user.id)
    return await controller.get_board()


@router.get("/{job_id}", response_model=JobDetailResponse)
async def get_job(
    job_id: UUID,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> JobDetailResponse:
    """Get job by ID."""
    controller = JobController(db, current_user.id)
    job = await controller.get_job(job_id)
    if not job:
        raise _not_found()
    return job


@router.put("/{job_id}", response_model=JobDetailResponse)
async def update_job(
    job_id: UUID,
    job_data: JobUpdate,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> JobDetailResponse:
    """Update a job."""
    controller = JobController(db, current_user.id)
    try:
        job = await controller.update_job(job_id, job_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    if not job:
        raise _not_found()
    return job


@router.patch("/{job_id}/status", response_model=JobDetailResponse)
async def update_job_status(
    job_id: UUID,
    status_data: JobStatusUpdate,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> JobDetailResponse:
    """Move a job to another column."""
    controller = JobController(db, current_user.id)
    job = await controller.update_status(job_id, status_data)
    if not job:
        raise _not_found()
    return job


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_job(
    job_id: UUID,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
):
    """Delete a job with its notes and attachments."""
    controller = JobController(db, current_user.id)
    if not await controller.delete_job(job_id):
        raise _not_found()


@router.get("/{job_id}/notes", response_model=List[JobNoteResponse])
async def list_job_notes(
    job_id: UUID,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> List[JobNoteResponse]:
    controller = JobController(db, current_user.id)
    notes = await controller.list_notes(job_id)
    if notes is None:
        raise _not_found()
    return notes


@router.post("/{job_id}/notes", response_model=JobNoteResponse, status_code=status.HTTP_201_CREATED)
async def add_job_note(
    job_id: UUID,
    note_data: JobNoteCreate,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> JobNoteResponse:
    controller = JobController(db, current_user.id)
    note = await controller.add_note(job_id, note_data)
    if not note:
        raise _not_found()
    return note


@router.put("/{job_id}/notes/{note_id}", response_model=JobNoteResponse)
async def update_job_note(
    job_id: UUID,
    note_id: UUID,
    note_data: JobNoteUpdate,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> JobNoteResponse:
    controller = JobController(db, current_user.id)
    note = await controller.update_note(job_id, note_id, note_data)
    if not note:
        raise _not_found("Note")
    return note


@router.delete("/{job_id}/notes/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_job_note(
    job_id: UUID,
    note_id: UUID,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
):
    controller = JobController(db, current_user.id)
    if not await controller.delete_note(job_id, note_id):
        raise _not_found("Note")


@router.get("/{job_id}/attachments", response_model=JobAttachmentListResponse)
async def list_job_attachments(
    job_id: UUID,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> JobAttachmentListResponse:
    """Photos and documents on a job."""
    controller = JobController(db, current_user.id)
    attachments = await controller.list_attachments(job_id)
    if attachments is None:
        raise _not_found()
    return attachments


@router.post(
    "/{job_id}/attachments",
    response_model=JobAttachmentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_job_attachment(
    job_id: UUID,
    attachment_data: JobAttachmentCreate,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> JobAttachmentResponse:
    """Register an uploaded file against a job."""
    controller = JobController(db, current_user.id)
    attachment = await controller.add_attachment(job_id, attachment_data)
    if not attachment:
        raise _not_found()
    return attachment


@router.delete("/{job_id}/attachments/{attachment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_job_attachment(
    job_id: UUID,
    attachment_id: UUID,
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
):
    controller = JobController(db, current_user.id)
    if not await controller.delete_attachment(job_id, attachment_id):
        raise _not_found("Attachment")
