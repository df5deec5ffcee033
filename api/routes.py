"""User routes."""

from typing import List

from fastapi import APIRouter, Depends, Request

from api.dependencies import get_user_service, read_payload, validate_payload
from models.schemas import ErrorResponse, UserCreate, UserResponse
from services.user_service import UserService

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post(
    "",
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_user(request: Request, service: UserService = Depends(get_user_service)):
    """Create a new user from a ``username`` field."""
    payload = validate_payload(UserCreate, await read_payload(request))
    return await service.create_user(payload.username)


@router.get("", response_model=List[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    """List every user as ``{_id, username}``."""
    return await service.list_users()
