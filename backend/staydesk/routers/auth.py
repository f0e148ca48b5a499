"""Auth router - username/password login issuing bearer session tokens."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from staydesk.core.database import get_db
from staydesk.core.security import AuthenticatedUser, get_current_user
from staydesk.repositories import SessionRepository, UserRepository
from staydesk.schemas.auth import LoginRequest, LoginResponse, UserResponse
from staydesk.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    return AuthService(UserRepository(db), SessionRepository(db))


@router.post("/login", response_model=LoginResponse)
async def login(data: LoginRequest, service: AuthService = Depends(get_auth_service)):
    token, expires_at, user = await service.login(data.username, data.password)
    return LoginResponse(token=token, expires_at=expires_at, user=UserResponse.model_validate(user))


@router.get("/me", response_model=UserResponse)
async def get_me(
    current_user: AuthenticatedUser = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    user = await UserRepository(db).get_or_404(current_user.user_id)
    return UserResponse.model_validate(user)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    current_user: AuthenticatedUser = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
):
    """Revoke the presented session token."""
    await service.logout(current_user.session_id)
