"""User creation, listing and lookup."""

from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from models.database import get_users_collection
from models.schemas import UserResponse
from schemas.user import User
from services.errors import NotFoundError, PersistenceError, ValidationError
from utils.helpers import parse_object_id, serialize_user
from utils.logger import setup_logger

logger = setup_logger(__name__)


class UserService:
    """Service for user records."""
    
    def __init__(self, database: AsyncIOMotorDatabase):
        self.users = get_users_collection(database)
    
    async def create_user(self, username: Optional[str]) -> UserResponse:
        """Persist a new user. Duplicate usernames are allowed."""
        username = (username or "").strip()
        if not username:
            raise ValidationError("Missing required fields: username")
        
        try:
            result = await self.users.insert_one(User(username=username).model_dump())
        except PyMongoError as e:
            logger.error(f"Error creating user: {e}", exc_info=True)
            raise PersistenceError("There was an error creating the user")
        
        logger.info(f"Created user {result.inserted_id} ({username})")
        return UserResponse(_id=str(result.inserted_id), username=username)
    
    async def list_users(self) -> List[UserResponse]:
        """All users in creation order, projected to _id and username."""
        try:
            cursor = self.users.find({}, {"username": 1}, sort=[("_id", ASCENDING)])
            users = await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(f"Error listing users: {e}", exc_info=True)
            raise PersistenceError("There was an error retrieving the users")
        
        return [UserResponse(**serialize_user(user)) for user in users]
    
    async def get_user(self, user_id: str) -> Dict[str, Any]:
        """Fetch a user document, raising NotFoundError for unknown or malformed ids."""
        object_id = parse_object_id(user_id)
        if object_id is None:
            raise NotFoundError()
        
        try:
            user = await self.users.find_one({"_id": object_id})
        except PyMongoError as e:
            logger.error(f"Error fetching user {user_id}: {e}", exc_info=True)
            raise PersistenceError("There was an error retrieving the user")
        
        if not user:
            raise NotFoundError()
        return user
