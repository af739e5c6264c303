"""Workout routine import from CSV.

Imported rows get fresh IDs. Superset/alternative parent references are
rewritten from the IDs in the file to the new IDs, so the routine keeps its
structure even when imported next to (or instead of) the routine it came
from.
"""

import logging
import re
import uuid
from typing import Callable, Mapping

from ..db.repositories import WorkoutRepository
from ..models.workout import WorkoutRecord
from ..utils.csv_codec import decode_records, get_field

logger = logging.getLogger(__name__)

# Leading numeric prefix, e.g. "135lb" -> 135
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_int(value: str, default: int = 0) -> int:
    """Parse the leading integer in a string, or return default."""
    match = _INT_PREFIX.match(value)
    if match is None:
        return default
    return int(match.group())


def parse_float(value: str, default: float = 0) -> float:
    """Parse the leading decimal number in a string, or return default."""
    match = _FLOAT_PREFIX.match(value)
    if match is None:
        return default
    return float(match.group())


def parse_day(value: str) -> int:
    """Parse a routine day slot. Anything missing, invalid or below 1 is day 1."""
    day = parse_int(value, default=1)
    return day if day >= 1 else 1


def new_workout_id() -> str:
    """Generate a random workout ID."""
    return str(uuid.uuid4())


def _optional(value: str) -> str | None:
    return value if value else None


def remap_workouts(
    rows: list[Mapping[str, str]],
    id_factory: Callable[[], str] | None = None,
) -> list[WorkoutRecord]:
    """Build workouts with new IDs from decoded CSV rows.

    Parent references pointing at IDs outside this batch are dropped.

    Args:
        rows: Header name -> cell text mappings, in file order
        id_factory: Generates new IDs (defaults to random UUID4 strings)

    Returns:
        Workouts in the same order as the rows
    """
    if id_factory is None:
        id_factory = new_workout_id

    id_mapping: dict[str, str] = {}
    workouts: list[WorkoutRecord] = []

    for row in rows:
        new_id = id_factory()
        id_mapping[get_field(row, "id")] = new_id

        workouts.append(
            WorkoutRecord(
                id=new_id,
                name=get_field(row, "name"),
                weight=parse_float(get_field(row, "weight")),
                sets=parse_int(get_field(row, "sets")),
                reps=parse_int(get_field(row, "reps")),
                day=parse_day(get_field(row, "day")),
                day_order=parse_int(get_field(row, "dayOrder")),
                notes=_optional(get_field(row, "notes")),
                # Still the IDs from the file, rewritten below
                superset_parent_id=_optional(get_field(row, "supersetParentId")),
                alt_parent_id=_optional(get_field(row, "altParentId")),
            )
        )

    for workout in workouts:
        workout.superset_parent_id = _remap_parent(
            workout, workout.superset_parent_id, id_mapping, "superset"
        )
        workout.alt_parent_id = _remap_parent(
            workout, workout.alt_parent_id, id_mapping, "alternative"
        )

    return workouts


def _remap_parent(
    workout: WorkoutRecord,
    original_id: str | None,
    id_mapping: dict[str, str],
    relation: str,
) -> str | None:
    if original_id is None:
        return None
    new_id = id_mapping.get(original_id)
    if new_id is None:
        logger.warning(
            "Dropping %s parent %r of %r: not in import file",
            relation,
            original_id,
            workout.name,
        )
    return new_id


def parse_workouts_csv(
    csv_text: str, id_factory: Callable[[], str] | None = None
) -> list[WorkoutRecord]:
    """Parse CSV text into workouts with regenerated IDs."""
    return remap_workouts(decode_records(csv_text), id_factory=id_factory)


class WorkoutImportService:
    """Replaces the stored routine with one read from CSV."""

    def __init__(
        self,
        repository: WorkoutRepository | None = None,
        id_factory: Callable[[], str] | None = None,
    ):
        self.repository = repository or WorkoutRepository()
        self.id_factory = id_factory

    async def has_existing_workouts(self) -> bool:
        """Check whether an import would overwrite anything."""
        return await self.repository.exists()

    async def import_workouts(self, csv_text: str) -> list[WorkoutRecord]:
        """Delete all stored workouts and insert the ones from csv_text.

        Not transactional: if inserting fails after the delete, the routine
        is left empty.

        Returns:
            The imported workouts in file order
        """
        workouts = parse_workouts_csv(csv_text, id_factory=self.id_factory)
        ordered = sorted(workouts, key=lambda w: (w.day, w.day_order))

        try:
            await self.repository.clear()
            await self.repository.create_many(ordered)
        except Exception:
            logger.exception("Workout import failed")
            raise

        logger.info("Imported %d workouts", len(workouts))
        return workouts
