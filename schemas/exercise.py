"""Exercise collection schema."""

from pydantic import BaseModel, Field
from datetime import datetime


class Exercise(BaseModel):
    """Exercise collection model."""
    user_id: str = Field(..., description="String form of the owning user's _id")
    description: str = Field(..., min_length=1, description="What was done")
    duration: int = Field(..., description="Duration in minutes")
    date: datetime = Field(..., description="Calendar date at UTC midnight")
