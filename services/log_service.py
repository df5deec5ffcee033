"""Exercise log queries.

Translates the ``from``/``to``/``limit`` query parameters of the logs
endpoint into a MongoDB filter, runs it and shapes the result.

Date bounds are whole calendar days in UTC: ``from`` matches exercises on
or after that day and ``to`` matches exercises up to the end of that day.
Results are ordered by date, then by insertion (``_id``), so a limit always
returns the earliest matching entries.
"""

from datetime import timedelta
from typing import Any, Dict, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from config.settings import settings
from models.database import get_exercises_collection
from models.schemas import LogEntry, LogResponse
from services.errors import PersistenceError
from services.user_service import UserService
from utils.helpers import format_date, parse_calendar_date, parse_limit, to_utc_midnight
from utils.logger import setup_logger

logger = setup_logger(__name__)

LOG_SORT = [("date", ASCENDING), ("_id", ASCENDING)]


def build_filter(user_id: str, from_: Optional[str] = None, to: Optional[str] = None) -> Dict[str, Any]:
    """Build the exercise filter for a user and optional inclusive date bounds.

    Raises ValidationError when a bound is not a valid date.
    """
    query: Dict[str, Any] = {"user_id": user_id}

    date_range: Dict[str, Any] = {}
    start = parse_calendar_date(from_, "from")
    if start is not None:
        date_range["$gte"] = to_utc_midnight(start)
    end = parse_calendar_date(to, "to")
    if end is not None:
        try:
            date_range["$lt"] = to_utc_midnight(end + timedelta(days=1))
        except OverflowError:
            # the last representable day excludes nothing
            pass

    if date_range:
        query["date"] = date_range
    return query


class LogService:
    """Service that reads a user's exercise log."""

    def __init__(self, database: AsyncIOMotorDatabase, default_limit: Optional[int] = None):
        self.users = UserService(database)
        self.exercises = get_exercises_collection(database)
        self.default_limit = default_limit or settings.default_log_limit

    def resolve_limit(self, limit: Any) -> int:
        """Positive integer limit, or the default when absent or unusable."""
        return parse_limit(limit, self.default_limit)

    async def get_logs(
        self,
        user_id: str,
        from_: Optional[str] = None,
        to: Optional[str] = None,
        limit: Any = None,
    ) -> LogResponse:
        """Return the user's exercises within [from_, to], capped at ``limit``."""
        user = await self.users.get_user(user_id)
        owner_id = str(user["_id"])
        query = build_filter(owner_id, from_, to)
        cap = self.resolve_limit(limit)

        try:
            cursor = self.exercises.find(query, sort=LOG_SORT, limit=cap)
            exercises = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Error retrieving logs for user {user_id}: {e}", exc_info=True)
            raise PersistenceError("There was an error retrieving the logs")

        log = [
            LogEntry(
                description=exercise["description"],
                duration=exercise["duration"],
                date=format_date(exercise["date"]),
            )
            for exercise in exercises
        ]
        return LogResponse(_id=owner_id, username=user["username"], count=len(log), log=log)
