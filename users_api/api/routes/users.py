"""Users Routes: CRUD endpoints over the users table.

Invariants:
    - Routes hold no SQL and no business rules; UserService does
    - Domain errors propagate to the global handlers (api/error_handlers.py)
    - user_id is an integer path parameter; anything else is a 400

Design Decisions:
    - UserService built per request from the get_db dependency, so tests swap
      the database by overriding get_db only
"""

from fastapi import APIRouter, Depends, status

from users_api.infrastructure.database import DatabaseManager, get_db
from users_api.schemas.user import (
    MessageResponse, UserCreate, UserResponse, UserUpdate, UserUpdateResponse,
)
from users_api.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(db: DatabaseManager = Depends(get_db)) -> UserService:
    return UserService(db)


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate, service: UserService = Depends(get_user_service),
):
    """Create a user; both name and email are required."""
    return await service.create(body.name, body.email)


@router.get("", response_model=list[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    """All users, in whatever order the database returns them."""
    return await service.list_all()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: int, service: UserService = Depends(get_user_service),
):
    return await service.get(user_id)


@router.put(
    "/{user_id}",
    response_model=UserUpdateResponse,
    response_model_exclude_none=True,
)
async def update_user(
    user_id: int,
    body: UserUpdate,
    service: UserService = Depends(get_user_service),
):
    """Replace the submitted fields. The body echoes what was submitted."""
    return await service.update(user_id, body.name, body.email)


@router.delete("/{user_id}", response_model=MessageResponse)
async def delete_user(
    user_id: int, service: UserService = Depends(get_user_service),
):
    await service.delete(user_id)
    return MessageResponse(message="User deleted successfully")
