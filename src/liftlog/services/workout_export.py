"""Workout routine export to CSV."""

from datetime import date

from ..db.repositories import WorkoutRepository
from ..generators.workout_csv import workouts_to_csv

CSV_MEDIA_TYPE = "text/csv"


def export_filename(today: date | None = None) -> str:
    """Suggested download filename, e.g. workouts-2024-01-15.csv."""
    today = today or date.today()
    return f"workouts-{today.isoformat()}.csv"


class WorkoutExportService:
    """Serializes the stored routine to CSV."""

    def __init__(self, repository: WorkoutRepository | None = None):
        self.repository = repository or WorkoutRepository()

    async def export_workouts(self) -> str:
        """Get the whole routine as CSV text."""
        return workouts_to_csv(await self.repository.list_all())
