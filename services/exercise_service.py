"""Exercise logging."""

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from models.database import get_exercises_collection
from models.schemas import ExerciseCreate, ExerciseResponse
from schemas.exercise import Exercise
from services.errors import PersistenceError
from services.user_service import UserService
from utils.helpers import format_date, to_utc_midnight, today_utc
from utils.logger import setup_logger

logger = setup_logger(__name__)


class ExerciseService:
    """Service that records exercises against existing users."""
    
    def __init__(self, database: AsyncIOMotorDatabase):
        self.users = UserService(database)
        self.exercises = get_exercises_collection(database)
    
    async def log_exercise(self, user_id: str, payload: ExerciseCreate) -> ExerciseResponse:
        """Store an exercise for ``user_id`` and return it with the owner's details.
        
        The payload is already validated (description present, duration an
        integer). A missing date means today in UTC.
        """
        user = await self.users.get_user(user_id)
        day = payload.date or today_utc()
        
        exercise = Exercise(
            user_id=str(user["_id"]),
            description=payload.description,
            duration=payload.duration,
            date=to_utc_midnight(day),
        )
        try:
            await self.exercises.insert_one(exercise.model_dump())
        except PyMongoError as e:
            logger.error(f"Error saving exercise for user {user_id}: {e}", exc_info=True)
            raise PersistenceError("There was an error saving the exercise")
        
        logger.info(f"Logged exercise for user {exercise.user_id} on {day.isoformat()}")
        return ExerciseResponse(
            _id=exercise.user_id,
            username=user["username"],
            description=exercise.description,
            duration=exercise.duration,
            date=format_date(day),
        )
