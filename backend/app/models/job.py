"""
Job model plus its notes and attachments.
"""

from sqlalchemy import Column, String, Text, Date, DateTime, ForeignKey, BigInteger, Enum as SQLEnum
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
import uuid
import enum

from app.db.base import Base
from app.utils.dates import utcnow


class JobStatus(str, enum.Enum):
    """Job status enumeration."""
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class JobNoteType(str, enum.Enum):
    """Kind of entry in a job's log."""
    NOTE = "note"
    PROGRESS = "progress"


class AttachmentType(str, enum.Enum):
    """Attachment kind."""
    PHOTO = "photo"
    DOCUMENT = "document"


class Job(Base):
    """Scheduled piece of work, optionally created from an accepted quote."""

    __tablename__ = "jobs"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    client_id = Column(UUID(as_uuid=True), ForeignKey("clients.id", ondelete="SET NULL"), nullable=True, index=True)
    quote_id = Column(UUID(as_uuid=True), ForeignKey("quotes.id", ondelete="SET NULL"), nullable=True, index=True)
    title = Column(String(255), nullable=False)
    address = Column(String(500), nullable=True)
    status = Column(
        SQLEnum(JobStatus, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=JobStatus.PENDING,
        index=True,
    )
    start_date = Column(Date, nullable=True)
    due_date = Column(Date, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow, index=True)

    # Relationships
    client = relationship("Client", back_populates="jobs")
    quote = relationship("Quote", back_populates="jobs")
    notes = relationship(
        "JobNote",
        back_populates="job",
        cascade="all, delete-orphan",
        order_by="JobNote.created_at.desc()",
    )
    attachments = relationship(
        "JobAttachment",
        back_populates="job",
        cascade="all, delete-orphan",
        order_by="JobAttachment.created_at.desc()",
    )


class JobNote(Base):
    """Free-text note or progress update on a job."""

    __tablename__ = "job_notes"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    job_id = Column(UUID(as_uuid=True), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    type = Column(
        SQLEnum(JobNoteType, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=JobNoteType.NOTE,
    )
    created_at = Column(DateTime, nullable=False, default=utcnow)

    job = relationship("Job", back_populates="notes")


class JobAttachment(Base):
    """Stored file reference (photo or document) for a job."""

    __tablename__ = "job_attachments"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    job_id = Column(UUID(as_uuid=True), ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    type = Column(
        SQLEnum(AttachmentType, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    file_name = Column(String(255), nullable=False)
    file_url = Column(String(2000), nullable=False)
    mime_type = Column(String(255), nullable=True)
    size_bytes = Column(BigInteger, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)

    job = relationship("Job", back_populates="attachments")
