"""Workout routine data models."""

from dataclasses import dataclass

# Fixed column order of the workout CSV format
CSV_HEADERS = (
    "id",
    "name",
    "weight",
    "sets",
    "reps",
    "notes",
    "supersetParentId",
    "altParentId",
    "day",
    "dayOrder",
)


@dataclass
class WorkoutRecord:
    """A single exercise slotted into a routine day.

    `superset_parent_id` and `alt_parent_id` reference other records in the
    same routine by id. None means "no parent".
    """

    id: str
    name: str
    weight: float = 0
    sets: int = 0
    reps: int = 0
    day: int = 1  # Routine day slot, starts at 1
    day_order: int = 0  # Position within the day
    notes: str | None = None
    superset_parent_id: str | None = None
    alt_parent_id: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "name": self.name,
            "weight": self.weight,
            "sets": self.sets,
            "reps": self.reps,
            "day": self.day,
            "day_order": self.day_order,
            "notes": self.notes,
            "superset_parent_id": self.superset_parent_id,
            "alt_parent_id": self.alt_parent_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutRecord":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            weight=data.get("weight", 0),
            sets=data.get("sets", 0),
            reps=data.get("reps", 0),
            day=data.get("day", 1),
            day_order=data.get("day_order", 0),
            notes=data.get("notes"),
            superset_parent_id=data.get("superset_parent_id"),
            alt_parent_id=data.get("alt_parent_id"),
        )

    def csv_value(self, header: str) -> str | int | float | None:
        """Get the field value for a CSV column name."""
        return {
            "id": self.id,
            "name": self.name,
            "weight": self.weight,
            "sets": self.sets,
            "reps": self.reps,
            "notes": self.notes,
            "supersetParentId": self.superset_parent_id,
            "altParentId": self.alt_parent_id,
            "day": self.day,
            "dayOrder": self.day_order,
        }[header]


def superset_parent_exists(workout: WorkoutRecord, workouts: list[WorkoutRecord]) -> bool:
    """Check whether the superset parent of a workout is in the list."""
    return any(w.id == workout.superset_parent_id for w in workouts)


def alt_parent_exists(workout: WorkoutRecord, workouts: list[WorkoutRecord]) -> bool:
    """Check whether the alternative parent of a workout is in the list."""
    return any(w.id == workout.alt_parent_id for w in workouts)


def is_superset_parent(workout: WorkoutRecord, workouts: list[WorkoutRecord]) -> bool:
    """Check whether any workout in the list is a superset of this one."""
    return any(w.superset_parent_id == workout.id for w in workouts)


def is_alternative_parent(workout: WorkoutRecord, workouts: list[WorkoutRecord]) -> bool:
    """Check whether any workout in the list is an alternative to this one."""
    return any(w.alt_parent_id == workout.id for w in workouts)
