"""Data access layer for liftlog.

Each collection is stored as a JSON array under a single key, so every
mutation is a read-modify-write of the whole array. Batch operations write
once per call.
"""

import json
import logging

from ..models.weight import WeightSample
from ..models.workout import WorkoutRecord
from .storage import KeyValueStore, SqliteKeyValueStore, StorageError

logger = logging.getLogger(__name__)

WORKOUTS_KEY = "workouts"
WEIGHTS_KEY = "weights"
CURRENT_DAY_KEY = "current_workout_day"


class _JsonCollection:
    """Shared JSON array load/save over a key-value store."""

    key: str

    def __init__(self, store: KeyValueStore | None = None):
        self.store = store or SqliteKeyValueStore()

    async def _load(self) -> list[dict]:
        raw = await self.store.get(self.key)
        if not raw:
            return []
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error("Corrupt JSON under key %r: %s", self.key, e)
            return []
        if not isinstance(data, list):
            logger.error("Expected a JSON array under key %r", self.key)
            return []
        return data

    async def _save(self, items: list[dict]) -> None:
        if not await self.store.set(self.key, json.dumps(items)):
            raise StorageError(f"Failed to write {self.key!r}")


class WorkoutRepository(_JsonCollection):
    """Repository for the workout routine."""

    key = WORKOUTS_KEY

    async def list_all(self, day: int | None = None) -> list[WorkoutRecord]:
        """List workouts ordered by position, optionally for one day slot."""
        workouts = [WorkoutRecord.from_dict(d) for d in await self._load()]
        if day is not None:
            workouts = [w for w in workouts if w.day == day]
        return sorted(workouts, key=lambda w: w.day_order)

    async def get(self, workout_id: str) -> WorkoutRecord | None:
        """Get a workout by ID."""
        for w in await self.list_all():
            if w.id == workout_id:
                return w
        return None

    async def exists(self) -> bool:
        """Check whether any workouts are stored."""
        return len(await self._load()) > 0

    async def create(self, workout: WorkoutRecord) -> None:
        """Add a workout to the front of the collection."""
        existing = await self.list_all()
        await self._save([workout.to_dict()] + [w.to_dict() for w in existing])

    async def create_many(self, workouts: list[WorkoutRecord]) -> None:
        """Add a batch of workouts in a single write, keeping their order."""
        existing = await self.list_all()
        await self._save([w.to_dict() for w in workouts + existing])

    async def update(self, workout: WorkoutRecord) -> None:
        """Replace the stored workout with the same ID."""
        existing = await self.list_all()
        await self._save(
            [(workout if w.id == workout.id else w).to_dict() for w in existing]
        )

    async def remove(self, workout_id: str) -> None:
        """Delete a workout by ID."""
        existing = await self.list_all()
        await self._save([w.to_dict() for w in existing if w.id != workout_id])

    async def clear(self) -> None:
        """Delete all workouts."""
        await self._save([])

    async def unique_days(self) -> int:
        """Count distinct day slots in the routine."""
        return len({w.day for w in await self.list_all()})

    async def reorder(self, day: int, ordered_ids: list[str]) -> None:
        """Set day_order for one day slot from the position of each ID."""
        positions = {workout_id: idx for idx, workout_id in enumerate(ordered_ids)}
        updated = []
        for w in await self.list_all():
            if w.day == day and w.id in positions:
                w.day_order = positions[w.id]
            updated.append(w.to_dict())
        await self._save(updated)

    async def get_current_day(self) -> int:
        """Get the day slot the user is on (defaults to 1)."""
        raw = await self.store.get(CURRENT_DAY_KEY)
        if not raw:
            return 1
        try:
            day = json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Corrupt current day value %r, using day 1", raw)
            return 1
        return day if isinstance(day, int) and not isinstance(day, bool) else 1

    async def set_current_day(self, day: int) -> None:
        """Persist the current day slot."""
        if await self.get_current_day() == day:
            return
        if not await self.store.set(CURRENT_DAY_KEY, json.dumps(day)):
            raise StorageError(f"Failed to write {CURRENT_DAY_KEY!r}")

    async def compact_days(self) -> None:
        """Renumber day slots to 1..N, closing gaps left by deletions."""
        workouts = await self.list_all()
        if not workouts:
            return

        days = sorted({w.day for w in workouts})
        if days == list(range(1, len(days) + 1)):
            return

        mapping = {old: new for new, old in enumerate(days, 1)}
        for w in workouts:
            w.day = mapping[w.day]

        current = await self.get_current_day()
        if mapping.get(current, current) != current:
            await self.set_current_day(mapping[current])

        await self._save([w.to_dict() for w in workouts])

    async def next_day(self, current: int) -> int:
        """Get the day slot after `current`, wrapping to the first one."""
        days = sorted({w.day for w in await self.list_all()})
        if not days:
            return 1
        for day in days:
            if day > current:
                return day
        return days[0]


class WeightRepository(_JsonCollection):
    """Repository for body weight samples."""

    key = WEIGHTS_KEY

    async def list_all(self) -> list[WeightSample]:
        """List samples oldest first."""
        samples = [WeightSample.from_dict(d) for d in await self._load()]
        return sorted(samples, key=lambda s: s.timestamp)

    async def get(self, sample_id: str) -> WeightSample | None:
        """Get a sample by ID."""
        for s in await self.list_all():
            if s.id == sample_id:
                return s
        return None

    async def create(self, sample: WeightSample) -> None:
        """Record a new sample."""
        data = await self._load()
        data.append(sample.to_dict())
        await self._save(data)

    async def remove(self, sample_id: str) -> None:
        """Delete a sample by ID."""
        data = await self._load()
        await self._save([d for d in data if d.get("id") != sample_id])

    async def clear(self) -> None:
        """Delete all samples."""
        await self._save([])
