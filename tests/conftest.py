"""Pytest configuration and fixtures."""

import itertools
from datetime import date

import pytest

from liftlog.db import MemoryKeyValueStore, WeightRepository, WorkoutRepository
from liftlog.models.weight import DailyAverageRecord
from liftlog.models.workout import WorkoutRecord


@pytest.fixture
def temp_db_path(tmp_path):
    """Create a temporary database path."""
    return tmp_path / "test.db"


@pytest.fixture
def memory_store():
    """Empty in-memory key-value store."""
    return MemoryKeyValueStore()


@pytest.fixture
def workout_repo(memory_store):
    """Workout repository on an in-memory store."""
    return WorkoutRepository(memory_store)


@pytest.fixture
def weight_repo(memory_store):
    """Weight repository on an in-memory store."""
    return WeightRepository(memory_store)


@pytest.fixture
def id_factory():
    """Deterministic ID generator: uuid-1, uuid-2, ..."""
    counter = itertools.count(1)
    return lambda: f"uuid-{next(counter)}"


@pytest.fixture
def sample_workouts():
    """A two-day routine with a superset and an alternative."""
    return [
        WorkoutRecord(
            id="w1", name="Bench Press", weight=135, sets=4, reps=8, day=1, day_order=0,
            notes="Keep elbows tucked",
        ),
        WorkoutRecord(
            id="w2", name="Incline DB Press", weight=50, sets=3, reps=10, day=1,
            day_order=1, superset_parent_id="w1",
        ),
        WorkoutRecord(
            id="w3", name="Squat", weight=225, sets=5, reps=5, day=2, day_order=0,
        ),
        WorkoutRecord(
            id="w4", name="Leg Press", weight=360, sets=3, reps=12, day=2, day_order=1,
            alt_parent_id="w3",
        ),
    ]


def _make_average(
    day: str,
    average: float = 180.0,
    three_day: float | None = None,
    seven_day: float | None = None,
) -> DailyAverageRecord:
    """Build a DailyAverageRecord from an ISO date string."""
    return DailyAverageRecord(
        day_date=date.fromisoformat(day),
        average=average,
        three_day_average=three_day,
        seven_day_average=seven_day,
    )


@pytest.fixture
def make_average():
    """Factory for DailyAverageRecords keyed by ISO date."""
    return _make_average

