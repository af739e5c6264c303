"""Weight logging and statistics service."""

import uuid
from datetime import datetime

from ..db.repositories import WeightRepository
from ..models.weight import StatsSnapshot, WeightSample
from ..stats import StatsCalculator, compute_daily_averages


class WeightStatsService:
    """Records weight samples and derives chart statistics from them."""

    def __init__(
        self,
        repository: WeightRepository | None = None,
        calculator: StatsCalculator | None = None,
    ):
        self.repository = repository or WeightRepository()
        self.calculator = calculator or StatsCalculator()

    async def log_weight(self, value: float, at: datetime | None = None) -> WeightSample:
        """Record a weight measurement (timestamped now by default).

        Stored timestamps are naive local time so that samples always sort
        and bucket into days together.
        """
        if at is not None and at.tzinfo is not None:
            at = at.astimezone().replace(tzinfo=None)
        sample = WeightSample(
            id=str(uuid.uuid4()),
            timestamp=at or datetime.now(),
            weight_value=value,
        )
        await self.repository.create(sample)
        return sample

    async def get_stats(self) -> StatsSnapshot:
        """Statistics snapshot over all recorded samples."""
        samples = await self.repository.list_all()
        averages = compute_daily_averages(samples)
        return self.calculator.compute(samples, averages)
