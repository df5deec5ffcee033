"""Tests for ExerciseService."""

from datetime import date, datetime
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from bson import ObjectId
from pymongo.errors import PyMongoError

from models.schemas import ExerciseCreate
from services.errors import NotFoundError, PersistenceError
from services.exercise_service import ExerciseService
from services.user_service import UserService


@pytest_asyncio.fixture
async def alice(database):
    return await UserService(database).create_user("alice")


@pytest.mark.unit
class TestLogExercise:
    @pytest.mark.asyncio
    async def test_numeric_string_duration_becomes_int(self, database, alice):
        payload = ExerciseCreate.model_validate(
            {"description": "run", "duration": "30", "date": "2023-01-05"}
        )

        result = await ExerciseService(database).log_exercise(alice.id, payload)

        assert result.duration == 30
        assert isinstance(result.duration, int)
        assert result.model_dump(by_alias=True) == {
            "_id": alice.id,
            "username": "alice",
            "description": "run",
            "duration": 30,
            "date": "Thu Jan 05 2023",
        }

    @pytest.mark.asyncio
    async def test_persists_exercise_at_utc_midnight(self, database, alice):
        payload = ExerciseCreate(description="swim", duration=45, date=date(2024, 1, 1))

        await ExerciseService(database).log_exercise(alice.id, payload)

        stored = await database["exercises"].find_one({"user_id": alice.id})
        assert stored["description"] == "swim"
        assert stored["duration"] == 45
        assert stored["date"] == datetime(2024, 1, 1)

    @pytest.mark.asyncio
    async def test_missing_date_defaults_to_today(self, database, alice):
        payload = ExerciseCreate(description="row", duration=20)

        with patch("services.exercise_service.today_utc", return_value=date(2024, 2, 29)):
            result = await ExerciseService(database).log_exercise(alice.id, payload)

        assert result.date == "Thu Feb 29 2024"

    @pytest.mark.asyncio
    async def test_unknown_user_persists_nothing(self, database):
        payload = ExerciseCreate(description="run", duration=30)

        with pytest.raises(NotFoundError):
            await ExerciseService(database).log_exercise(str(ObjectId()), payload)

        assert await database["exercises"].count_documents({}) == 0

    @pytest.mark.asyncio
    async def test_store_failure_becomes_persistence_error(self, database, alice):
        service = ExerciseService(database)
        service.exercises = AsyncMock()
        service.exercises.insert_one.side_effect = PyMongoError("write concern")

        with pytest.raises(PersistenceError) as exc_info:
            await service.log_exercise(alice.id, ExerciseCreate(description="run", duration=5))

        assert exc_info.value.message == "There was an error saving the exercise"
