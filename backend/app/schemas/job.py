"""
Job, job note and job attachment schemas.
"""

from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from app.models.job import JobStatus, JobNoteType, AttachmentType
from app.utils.status import normalize_status


def _blank_to_none(value):
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


class JobClientInfo(BaseModel):
    id: UUID
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None

    class Config:
        from_attributes = True


class JobQuoteInfo(BaseModel):
    id: UUID
    title: Optional[str] = None
    total: Decimal

    class Config:
        from_attributes = True


class JobCreate(BaseModel):
    """Schema for creating a job."""
    title: str = Field(..., min_length=1, max_length=255)
    client_id: Optional[UUID] = None
    address: Optional[str] = Field(None, max_length=500)
    status: JobStatus = JobStatus.PENDING
    start_date: Optional[date] = None
    due_date: Optional[date] = None

    @field_validator("status", mode="before")
    @classmethod
    def lower_status(cls, value):
        return normalize_status(value)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("address", mode="before")
    @classmethod
    def blank_address(cls, value):
        return _blank_to_none(value)


class JobUpdate(BaseModel):
    """Schema for updating a job (all fields optional)."""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    client_id: Optional[UUID] = None
    address: Optional[str] = Field(None, max_length=500)
    status: Optional[JobStatus] = None
    start_date: Optional[date] = None
    due_date: Optional[date] = None

    @field_validator("status", mode="before")
    @classmethod
    def lower_status(cls, value):
        return normalize_status(value)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("address", mode="before")
    @classmethod
    def blank_address(cls, value):
        return _blank_to_none(value)


class JobStatusUpdate(BaseModel):
    """Schema for moving a job between board columns."""
    status: JobStatus

    @field_validator("status", mode="before")
    @classmethod
    def lower_status(cls, value):
        return normalize_status(value)


class JobResponse(BaseModel):
    """Schema for job response."""
    id: UUID
    client_id: Optional[UUID] = None
    quote_id: Optional[UUID] = None
    title: str
    address: Optional[str] = None
    status: JobStatus
    start_date: Optional[date] = None
    due_date: Optional[date] = None
    created_at: datetime
    client: Optional[JobClientInfo] = None

    class Config:
        from_attributes = True


class JobDetailResponse(JobResponse):
    """Job with the quote it came from."""
    quote: Optional[JobQuoteInfo] = None


class JobSummary(BaseModel):
    """Compact job for lists on client pages."""
    id: UUID
    title: str
    status: JobStatus
    due_date: Optional[date] = None
    created_at: datetime

    class Config:
        from_attributes = True


class JobListResponse(BaseModel):
    """Schema for job list response."""
    items: List[JobResponse]
    total: int


class JobBoardResponse(BaseModel):
    """Jobs grouped by pipeline column."""
    pending: List[JobResponse] = []
    active: List[JobResponse] = []
    completed: List[JobResponse] = []
    cancelled: List[JobResponse] = []


class JobNoteCreate(BaseModel):
    """New note on a job."""
    content: str = Field(..., max_length=10000)
    type: JobNoteType = JobNoteType.NOTE

    @field_validator("type", mode="before")
    @classmethod
    def lower_type(cls, value):
        return normalize_status(value)

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Note content cannot be empty")
        return value


class JobNoteUpdate(BaseModel):
    """Edited note content."""
    content: str = Field(..., max_length=10000)

    @field_validator("content")
    @classmethod
    def content_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Note content cannot be empty")
        return value


class JobNoteResponse(BaseModel):
    id: UUID
    job_id: UUID
    content: str
    type: JobNoteType
    created_at: datetime

    class Config:
        from_attributes = True


class JobAttachmentCreate(BaseModel):
    """Metadata for a file already placed in object storage."""
    type: AttachmentType
    file_name: str = Field(..., min_length=1, max_length=255)
    file_url: str = Field(..., min_length=1, max_length=2000)
    mime_type: Optional[str] = Field(None, max_length=255)
    size_bytes: Optional[int] = Field(None, ge=0)

    @field_validator("type", mode="before")
    @classmethod
    def lower_type(cls, value):
        return normalize_status(value)


class JobAttachmentResponse(BaseModel):
    id: UUID
    job_id: UUID
    type: AttachmentType
    file_name: str
    file_url: str
    mime_type: Optional[str] = None
    size_bytes: Optional[int] = None
    created_at: datetime

    class Config:
        from_attributes = True


class JobAttachmentListResponse(BaseModel):
    """Attachments split the way the job page shows them."""
    photos: List[JobAttachmentResponse] = []
    documents: List[JobAttachmentResponse] = []
