"""Database models and connection setup."""

from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING

from config.settings import Settings
from utils.logger import setup_logger

logger = setup_logger(__name__)

USERS_COLLECTION = "users"
EXERCISES_COLLECTION = "exercises"


class Database:
    """Database connection manager.
    
    One instance is created at startup and handed to request handlers
    through ``app.state``; services only ever see the database handle.
    """
    
    def __init__(self, client: AsyncIOMotorClient, name: str):
        self.client: Optional[AsyncIOMotorClient] = client
        self.name = name
    
    @property
    def handle(self) -> AsyncIOMotorDatabase:
        """Get database instance."""
        return self.client[self.name]


async def connect_to_mongo(settings: Settings) -> Database:
    """Create database connection."""
    client = AsyncIOMotorClient(settings.db_uri)
    database = Database(client, settings.database_name)
    logger.info(f"Connected to MongoDB database: {database.name}")
    return database


async def close_mongo_connection(database: Database):
    """Close database connection."""
    if database.client:
        database.client.close()
        database.client = None
        logger.info("Disconnected from MongoDB")


async def init_mongo(database: Database):
    """Initialize collections with indexes."""
    handle = database.handle
    
    # Exercises are always filtered by owner and ranged/sorted by date
    await handle[EXERCISES_COLLECTION].create_index(
        [("user_id", ASCENDING), ("date", ASCENDING)]
    )
    
    logger.info("MongoDB initialized: exercise indexes created")


# Helper functions to get collections
def get_users_collection(handle: AsyncIOMotorDatabase):
    """Get users collection."""
    return handle[USERS_COLLECTION]


def get_exercises_collection(handle: AsyncIOMotorDatabase):
    """Get exercises collection."""
    return handle[EXERCISES_COLLECTION]
