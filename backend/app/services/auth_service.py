"""
Authentication service.
Email/password accounts and JWT bearer tokens.
"""

from datetime import timedelta
from sqlalchemy.ext.asyncio import AsyncSession
from fastapi import HTTPException, status

from app.core.config import settings
from app.core.logging import get_logger
from app.core.security import create_access_token, hash_password, verify_password
from app.db.repositories.user_repository import UserRepository
from app.models.user import User
from app.services.base_service import BaseService
from app.schemas.user import (
    LoginRequest,
    LoginResponse,
    SignupRequest,
    TokenResponse,
    UserResponse,
)

logger = get_logger(__name__)


class AuthService(BaseService):
    """Service for authentication operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.user_repo = UserRepository(session)

    async def signup(self, signup_data: SignupRequest) -> LoginResponse:
        """
        Register a new account and sign it in.

        Raises:
            ValueError: If the email is already registered
        """
        existing = await self.user_repo.get_by_email(signup_data.email)
        if existing:
            raise ValueError("An account with this email already exists")

        user = await self.user_repo.create(
            email=signup_data.email,
            password_hash=hash_password(signup_data.password),
            full_name=signup_data.full_name,
        )
        await self.session.commit()
        logger.info("User signed up", extra={"user_id": str(user.id)})
        return self._login_response(user)

    async def login(self, login_data: LoginRequest) -> LoginResponse:
        """
        Exchange email and password for a token.

        Raises:
            HTTPException: 401 on unknown email or wrong password
        """
        user = await self.user_repo.get_by_email(login_data.email)
        if not user or not verify_password(login_data.password, user.password_hash):
            logger.warning("Failed login attempt", extra={"email": login_data.email})
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid email or password",
                headers={"WWW-Authenticate": "Bearer"},
            )
        if not user.is_active:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Account is disabled",
            )
        return self._login_response(user)

    def issue_token(self, user: User) -> TokenResponse:
        token_data = {"sub": str(user.id), "email": user.email}
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        return TokenResponse(
            access_token=create_access_token(data=token_data, expires_delta=expires_delta),
            token_type="bearer",
            expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        )

    def _login_response(self, user: User) -> LoginResponse:
        return LoginResponse(
            token=self.issue_token(user),
            user=UserResponse.model_validate(user),
        )
