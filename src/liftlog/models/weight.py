"""Body weight data models."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class WeightSample:
    """A single recorded body weight measurement."""

    id: str
    timestamp: datetime
    weight_value: float

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "weight_value": self.weight_value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WeightSample":
        """Create from dictionary."""
        return cls(
            id=data["id"],
            timestamp=datetime.fromisoformat(data["timestamp"]),
            weight_value=float(data["weight_value"]),
        )


@dataclass(frozen=True)
class DailyAverageRecord:
    """Average weight for one calendar day plus rolling window averages.

    The rolling fields are None when there is not enough history.
    """

    day_date: date
    average: float
    three_day_average: float | None = None
    seven_day_average: float | None = None

    def window_average(self, window: int) -> float | None:
        """Get the rolling average field for a 3 or 7 day window."""
        if window == 3:
            return self.three_day_average
        if window == 7:
            return self.seven_day_average
        raise ValueError(f"Unsupported rolling window: {window}")

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "day_date": self.day_date.isoformat(),
            "average": self.average,
            "three_day_average": self.three_day_average,
            "seven_day_average": self.seven_day_average,
        }


@dataclass(frozen=True)
class DailyStatPoint:
    """Min/max/average of all samples recorded on one calendar day."""

    day_date: date
    min: float
    max: float
    avg: float
    display_label: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "day_date": self.day_date.isoformat(),
            "min": self.min,
            "max": self.max,
            "avg": self.avg,
            "display_label": self.display_label,
        }


@dataclass(frozen=True)
class TrendSnapshot:
    """Headline numbers: current weight and recent changes."""

    current_weight: float = 0
    three_day_change: float = 0
    seven_day_change: float = 0

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "current_weight": self.current_weight,
            "three_day_change": self.three_day_change,
            "seven_day_change": self.seven_day_change,
        }


@dataclass(frozen=True)
class YDomain:
    """Chart Y-axis bounds."""

    min: float = 0
    max: float = 100

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class StatsSnapshot:
    """Everything a weight chart and its summary need."""

    daily_stats: tuple[DailyStatPoint, ...]
    average_data: tuple[DailyAverageRecord, ...]
    y_domain: YDomain
    stats: TrendSnapshot

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "daily_stats": [p.to_dict() for p in self.daily_stats],
            "average_data": [r.to_dict() for r in self.average_data],
            "y_domain": self.y_domain.to_dict(),
            "stats": self.stats.to_dict(),
        }
