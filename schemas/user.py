"""User collection schema."""

from pydantic import BaseModel, Field


class User(BaseModel):
    """User collection model."""
    username: str = Field(..., min_length=1, description="Display name, not unique")
