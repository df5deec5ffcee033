"""Tests for the MongoDB connection helpers."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from config.settings import Settings
from models.database import (
    EXERCISES_COLLECTION,
    Database,
    close_mongo_connection,
    connect_to_mongo,
    init_mongo,
)


@pytest.mark.unit
class TestDatabase:
    @pytest.mark.asyncio
    async def test_connect_uses_uri_and_database_name(self):
        settings = Settings(_env_file=None, db_uri="mongodb://db.internal:27017/tracker")

        with patch("models.database.AsyncIOMotorClient") as client_class:
            database = await connect_to_mongo(settings)

        client_class.assert_called_once_with("mongodb://db.internal:27017/tracker")
        assert database.name == "tracker"
        assert database.client is client_class.return_value

    @pytest.mark.asyncio
    async def test_init_creates_exercise_index(self):
        collection = MagicMock()
        collection.create_index = AsyncMock()
        client = MagicMock()
        client.__getitem__.return_value.__getitem__.return_value = collection
        database = Database(client, "tracker_init")

        await init_mongo(database)

        client.__getitem__.assert_called_with("tracker_init")
        client.__getitem__.return_value.__getitem__.assert_called_with(EXERCISES_COLLECTION)
        collection.create_index.assert_awaited_once_with([("user_id", 1), ("date", 1)])

    @pytest.mark.asyncio
    async def test_close_is_idempotent(self):
        client = MagicMock()
        database = Database(client, "tracker")

        await close_mongo_connection(database)
        await close_mongo_connection(database)

        client.close.assert_called_once()
        assert database.client is None
