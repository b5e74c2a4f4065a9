"""Root Route: welcome message at GET /."""

from fastapi import APIRouter

from users_api.schemas.user import MessageResponse

router = APIRouter(tags=["root"])


@router.get("/", response_model=MessageResponse)
async def root():
    return MessageResponse(message="Welcome to Users CRUD API")
