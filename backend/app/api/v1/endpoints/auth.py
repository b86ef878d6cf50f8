"""
Authentication API endpoints: email/password sign up and login,
token refresh and the current user.
"""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.middleware import require_authentication
from app.controllers.auth_controller import AuthController
from app.core.config import settings
from app.core.rate_limit import limiter
from app.db.session import get_db
from app.models.user import User
from app.schemas.user import (
    LoginRequest,
    LoginResponse,
    SignupRequest,
    TokenResponse,
    UserResponse,
)

router = APIRouter()


@router.post("/signup", response_model=LoginResponse, status_code=status.HTTP_201_CREATED)
async def signup(
    signup_data: SignupRequest,
    db: AsyncSession = Depends(get_db),
) -> LoginResponse:
    """Create an account and return a token for it."""
    controller = AuthController(db)
    try:
        return await controller.signup(signup_data)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post("/login", response_model=LoginResponse)
@limiter.limit(settings.LOGIN_RATE_LIMIT)
async def login(
    request: Request,
    login_data: LoginRequest,
    db: AsyncSession = Depends(get_db),
) -> LoginResponse:
    """Exchange email and password for a bearer token."""
    controller = AuthController(db)
    return await controller.login(login_data)


@router.post("/refresh", response_model=TokenResponse)
async def refresh_token(
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> TokenResponse:
    """Issue a fresh token for the current user."""
    return AuthController(db).refresh(current_user)


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(
    current_user: User = Depends(require_authentication),
    db: AsyncSession = Depends(get_db),
) -> UserResponse:
    """Get the signed-in user."""
    return AuthController(db).me(current_user)
