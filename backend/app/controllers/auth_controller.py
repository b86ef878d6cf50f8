"""
Authentication controller.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.controllers.base_controller import BaseController
from app.models.user import User
from app.services.auth_service import AuthService
from app.schemas.user import (
    LoginRequest,
    LoginResponse,
    SignupRequest,
    TokenResponse,
    UserResponse,
)


class AuthController(BaseController):
    """Controller for authentication operations."""

    def __init__(self, session: AsyncSession):
        self.auth_service = AuthService(session)

    async def signup(self, signup_data: SignupRequest) -> LoginResponse:
        return await self.auth_service.signup(signup_data)

    async def login(self, login_data: LoginRequest) -> LoginResponse:
        return await self.auth_service.login(login_data)

    def refresh(self, user: User) -> TokenResponse:
        return self.auth_service.issue_token(user)

    def me(self, user: User) -> UserResponse:
        return UserResponse.model_validate(user)
