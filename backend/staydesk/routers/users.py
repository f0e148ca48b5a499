"""Users router - registration and lookup."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from staydesk.core.database import get_db
from staydesk.models.enums import UserRole
from staydesk.repositories import SessionRepository, UserRepository
from staydesk.schemas.auth import UserCreate, UserResponse
from staydesk.services.auth import AuthService

# Registration is always open; lookups follow the auth gate
registration_router = APIRouter(prefix="/users", tags=["users"])
router = APIRouter(prefix="/users", tags=["users"])


@registration_router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(data: UserCreate, db: AsyncSession = Depends(get_db)):
    """Register a user. The response never includes the password."""
    user = await AuthService(UserRepository(db), SessionRepository(db)).register(data.model_dump())
    return UserResponse.model_validate(user)


@router.get("", response_model=List[UserResponse])
async def list_users(
    role: Optional[UserRole] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    users = await UserRepository(db).list(role=role)
    return [UserResponse.model_validate(u) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
    user = await UserRepository(db).get_or_404(user_id)
    return UserResponse.model_validate(user)
