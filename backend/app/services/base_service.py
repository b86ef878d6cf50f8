"""
Base service class.
Services contain business logic and coordinate repositories.
"""

from abc import ABC
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession


class BaseService(ABC):
    """Base service class for all services."""
    pass


class OwnedService(BaseService):
    """Service acting on behalf of one signed-in user."""

    def __init__(self, session: AsyncSession, user_id: UUID):
        self.session = session
        self.user_id = user_id
