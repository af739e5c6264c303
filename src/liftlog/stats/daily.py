"""Per-day aggregation of weight samples."""

import math
from collections import defaultdict
from datetime import date, datetime, timezone
from typing import Iterable

from ..models.weight import DailyStatPoint, WeightSample

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def day_of(timestamp: datetime) -> date:
    """Calendar day of a timestamp.

    Naive timestamps are taken as wall-clock time; aware ones are
    bucketed by their UTC date.
    """
    if timestamp.tzinfo is not None:
        timestamp = timestamp.astimezone(timezone.utc)
    return timestamp.date()


def day_label(day: date) -> str:
    """Short display label, e.g. "Jan 15"."""
    return f"{MONTH_ABBREVIATIONS[day.month - 1]} {day.day}"


def group_by_day(samples: Iterable[WeightSample]) -> dict[date, list[float]]:
    """Collect sample values per calendar day."""
    groups: dict[date, list[float]] = defaultdict(list)
    for sample in samples:
        groups[day_of(sample.timestamp)].append(sample.weight_value)
    return groups


def aggregate_daily(samples: Iterable[WeightSample]) -> list[DailyStatPoint]:
    """Min, max and mean weight for every day with samples, oldest first."""
    points = []
    for day, values in sorted(group_by_day(samples).items()):
        points.append(
            DailyStatPoint(
                day_date=day,
                min=min(values),
                max=max(values),
                avg=math.fsum(values) / len(values),
                display_label=day_label(day),
            )
        )
    return points
