"""Exercise and log routes for a single user."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from api.dependencies import (
    get_exercise_service,
    get_log_service,
    read_payload,
    validate_payload,
)
from models.schemas import ErrorResponse, ExerciseCreate, ExerciseResponse, LogResponse
from services.exercise_service import ExerciseService
from services.log_service import LogService

router = APIRouter(prefix="/api/users", tags=["exercises"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("/{user_id}/exercises", response_model=ExerciseResponse, responses=ERROR_RESPONSES)
async def create_exercise(
    user_id: str,
    request: Request,
    service: ExerciseService = Depends(get_exercise_service),
):
    """Log an exercise (description, duration, optional date) for a user."""
    payload = validate_payload(ExerciseCreate, await read_payload(request))
    return await service.log_exercise(user_id, payload)


@router.get("/{user_id}/logs", response_model=LogResponse, responses=ERROR_RESPONSES)
async def get_logs(
    user_id: str,
    from_: Optional[str] = Query(None, alias="from", description="Earliest date, YYYY-MM-DD"),
    to: Optional[str] = Query(None, description="Latest date, YYYY-MM-DD"),
    limit: Optional[str] = Query(None, description="Maximum number of entries"),
    service: LogService = Depends(get_log_service),
):
    """
    Get a user's exercise log.
    Dates are inclusive; an absent or unusable limit falls back to the default cap.
    """
    return await service.get_logs(user_id, from_=from_, to=to, limit=limit)
