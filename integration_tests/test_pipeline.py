"""Integration tests for the full export/import and stats flows.

These run against a real SQLite database file.
"""

from datetime import datetime, timedelta

import pytest
import pytest_asyncio

from liftlog.db import SqliteKeyValueStore, WeightRepository, WorkoutRepository, init_db
from liftlog.models.workout import WorkoutRecord
from liftlog.services.weight_stats import WeightStatsService
from liftlog.services.workout_export import WorkoutExportService
from liftlog.services.workout_import import WorkoutImportService


@pytest_asyncio.fixture
async def store(tmp_path):
    """SQLite store on a fresh database."""
    db_path = tmp_path / "pipeline.db"
    await init_db(db_path)
    return SqliteKeyValueStore(db_path)


def build_routine() -> list[WorkoutRecord]:
    """Three-day routine with supersets and alternatives across days."""
    return [
        WorkoutRecord(id="bench", name="Bench Press", weight=185, sets=5, reps=5, day=1, day_order=0),
        WorkoutRecord(id="fly", name="Cable Fly", weight=30, sets=3, reps=12, day=1, day_order=1,
                      superset_parent_id="bench", notes='Squeeze, "hold" 1s'),
        WorkoutRecord(id="squat", name="Squat", weight=275, sets=5, reps=5, day=2, day_order=0),
        WorkoutRecord(id="hack", name="Hack Squat", weight=180, sets=3, reps=8, day=2, day_order=1,
                      alt_parent_id="squat"),
        WorkoutRecord(id="dl", name="Deadlift", weight=315, sets=1, reps=5, day=3, day_order=0,
                      notes="Reset\nevery rep"),
    ]


class TestPipelineIntegration:
    """Integration tests across storage, services and CSV."""

    @pytest.mark.asyncio
    async def test_export_import_round_trip(self, store):
        """Export a stored routine, import it back and compare."""
        source = WorkoutRepository(store)
        await source.create_many(build_routine())

        csv_text = await WorkoutExportService(source).export_workouts()
        imported = await WorkoutImportService(source).import_workouts(csv_text)

        stored = await source.list_all()
        assert len(stored) == 5
        by_name = {w.name: w for w in stored}

        assert by_name["Cable Fly"].superset_parent_id == by_name["Bench Press"].id
        assert by_name["Hack Squat"].alt_parent_id == by_name["Squat"].id
        assert by_name["Cable Fly"].notes == 'Squeeze, "hold" 1s'
        assert by_name["Deadlift"].notes == "Reset\nevery rep"
        assert {w.id for w in imported}.isdisjoint({"bench", "fly", "squat", "hack", "dl"})

    @pytest.mark.asyncio
    async def test_weight_stats_over_two_weeks(self, store):
        """Two weeks of daily weigh-ins trending down."""
        service = WeightStatsService(WeightRepository(store))
        start = datetime(2024, 2, 1, 7, 0)
        for i in range(14):
            await service.log_weight(200.0 - i * 0.5, start + timedelta(days=i))
            await service.log_weight(201.0 - i * 0.5, start + timedelta(days=i, hours=12))

        snapshot = await service.get_stats()

        assert len(snapshot.daily_stats) == 14
        assert snapshot.daily_stats[0].min == 200.0
        assert snapshot.daily_stats[0].max == 201.0
        assert snapshot.stats.three_day_change < 0
        assert snapshot.stats.seven_day_change == pytest.approx(-3.5)
        assert snapshot.y_domain.min == pytest.approx(200.0 - 13 * 0.5 - 2)

        # Unchanged data hands back the cached snapshot
        assert await service.get_stats() is snapshot
