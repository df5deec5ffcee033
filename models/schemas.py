"""Pydantic schemas for request/response validation."""

from datetime import date as CalendarDate
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from services.errors import ValidationError
from utils.helpers import BSON_INT64_MAX, BSON_INT64_MIN, parse_calendar_date


class RequestBody(BaseModel):
    """Base for request bodies posted as JSON or as HTML form fields.

    Blank form fields arrive as empty strings; they are dropped so that
    they are reported the same way as absent fields.
    """
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def drop_blank_values(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return {
            key: value
            for key, value in data.items()
            if value is not None and not (isinstance(value, str) and not value.strip())
        }


class UserCreate(RequestBody):
    """Body of POST /api/users."""
    username: str = Field(..., min_length=1, description="Name of the new user")


class UserResponse(BaseModel):
    """A user projected to its public fields."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="User identifier")
    username: str


class ExerciseCreate(RequestBody):
    """Body of POST /api/users/{_id}/exercises."""
    description: str = Field(..., min_length=1, description="What was done")
    duration: int = Field(
        ..., ge=BSON_INT64_MIN, le=BSON_INT64_MAX,
        description="Duration in minutes; numeric strings are accepted",
    )
    date: Optional[CalendarDate] = Field(None, description="Calendar date, defaults to today (UTC)")

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value: Any) -> Optional[CalendarDate]:
        try:
            return parse_calendar_date(value, "date")
        except ValidationError as exc:
            raise ValueError(exc.message)


class ExerciseResponse(BaseModel):
    """A logged exercise together with its owner."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="Owning user identifier")
    username: str
    description: str
    duration: int
    date: str = Field(..., description='Formatted like "Mon Jan 01 2024"')


class LogEntry(BaseModel):
    """One exercise in a user's log."""
    description: str
    duration: int
    date: str


class LogResponse(BaseModel):
    """A user's exercise log after filtering and limiting."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="User identifier")
    username: str
    count: int = Field(..., description="Number of entries in log")
    log: List[LogEntry] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Body returned for every handled failure."""
    error: str


def describe_validation_error(exc) -> str:
    """Turn a pydantic ValidationError into one client-facing message."""
    missing = []
    invalid = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "body"
        if error["type"] == "missing":
            missing.append(field)
        else:
            invalid.append(f"{field}: {error['msg']}")
    if missing:
        return "Missing required fields: " + ", ".join(missing)
    return "Invalid fields: " + "; ".join(invalid)
