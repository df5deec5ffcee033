"""Helper utility functions."""

from datetime import date, datetime, time, timezone
from typing import Any, Dict, Optional, Union

from bson import ObjectId
from bson.errors import InvalidId

from services.errors import ValidationError

# Matches JavaScript's Date.prototype.toDateString(), e.g. "Thu Jan 05 2023"
DISPLAY_DATE_FORMAT = "%a %b %d %Y"

# MongoDB stores integers as at most 8 bytes
BSON_INT64_MIN = -2 ** 63
BSON_INT64_MAX = 2 ** 63 - 1


def format_date(value: Union[date, datetime]) -> str:
    """Format a stored exercise date for API responses."""
    return value.strftime(DISPLAY_DATE_FORMAT)


def today_utc() -> date:
    """Current calendar date in UTC."""
    return datetime.now(timezone.utc).date()


def to_utc_midnight(day: date) -> datetime:
    """Store calendar dates as naive UTC datetimes at 00:00."""
    return datetime.combine(day, time.min)


def parse_calendar_date(value: Any, field: str) -> Optional[date]:
    """Parse a calendar date from a request value.
    
    Accepts date/datetime objects, ``YYYY-MM-DD`` strings and ISO datetime
    strings (aware values are converted to UTC first). Empty values yield
    ``None``; anything else raises ValidationError naming the field.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValidationError(f"Invalid date for '{field}'")
    
    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError(f"Invalid date for '{field}': expected YYYY-MM-DD")
    return parse_calendar_date(parsed, field)


def parse_limit(value: Any, default: int) -> int:
    """Return ``value`` as a positive int, or ``default`` when it is unusable."""
    if value is None or isinstance(value, bool):
        return default
    try:
        limit = int(str(value).strip())
    except ValueError:
        return default
    return limit if 0 < limit <= BSON_INT64_MAX else default


def parse_object_id(value: str) -> Optional[ObjectId]:
    """Convert a path identifier to an ObjectId, or None if it is malformed."""
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


def serialize_user(user: Dict[str, Any]) -> Dict[str, str]:
    """Project a user document to its public fields."""
    return {"_id": str(user["_id"]), "username": user["username"]}
