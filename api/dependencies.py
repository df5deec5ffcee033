"""FastAPI dependencies: database handle, services and request bodies."""

from typing import Any, Dict, Type, TypeVar

from fastapi import Depends, Request
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from models.schemas import describe_validation_error
from services.errors import ValidationError
from services.exercise_service import ExerciseService
from services.log_service import LogService
from services.user_service import UserService

ModelT = TypeVar("ModelT", bound=BaseModel)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_database(request: Request) -> AsyncIOMotorDatabase:
    """Database handle opened in the application lifespan."""
    return request.app.state.database.handle


def get_user_service(database: AsyncIOMotorDatabase = Depends(get_database)) -> UserService:
    return UserService(database)


def get_exercise_service(database: AsyncIOMotorDatabase = Depends(get_database)) -> ExerciseService:
    return ExerciseService(database)


def get_log_service(database: AsyncIOMotorDatabase = Depends(get_database)) -> LogService:
    return LogService(database)


async def read_payload(request: Request) -> Dict[str, Any]:
    """Read a request body sent either as JSON or as form fields."""
    content_type = request.headers.get("content-type", "").lower()
    
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {key: value for key, value in form.items()}
    
    body = await request.body()
    if not body.strip():
        return {}
    try:
        data = await request.json()
    except ValueError:
        raise ValidationError("Request body is not valid JSON")
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def validate_payload(model: Type[ModelT], data: Dict[str, Any]) -> ModelT:
    """Validate a request body, raising the 400-mapped ValidationError on mismatch."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(describe_validation_error(exc))
