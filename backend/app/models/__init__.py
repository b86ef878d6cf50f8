"""
Database models.
Import all models here to ensure they're registered with Base.
"""

from app.models.user import User
from app.models.client import Client
from app.models.quote import Quote, QuoteLineItem, QuoteStatus
from app.models.job import Job, JobNote, JobAttachment, JobStatus, JobNoteType, AttachmentType
from app.models.invoice import Invoice, InvoiceLineItem, InvoiceStatus
from app.models.product import ProductCatalog, UserProduct
from app.models.company_profile import CompanyProfile
from app.models.subscription import Subscription, PlanTier

__all__ = [
    "User",
    "Client",
    "Quote",
    "QuoteLineItem",
    "QuoteStatus",
    "Job",
    "JobNote",
    "JobAttachment",
    "JobStatus",
    "JobNoteType",
    "AttachmentType",
    "Invoice",
    "InvoiceLineItem",
    "InvoiceStatus",
    "ProductCatalog",
    "UserProduct",
    "CompanyProfile",
    "Subscription",
    "PlanTier",
]
