"""Data models for liftlog."""

from .weight import (
    DailyAverageRecord,
    DailyStatPoint,
    StatsSnapshot,
    TrendSnapshot,
    WeightSample,
    YDomain,
)
from .workout import CSV_HEADERS, WorkoutRecord

__all__ = [
    "CSV_HEADERS",
    "DailyAverageRecord",
    "DailyStatPoint",
    "StatsSnapshot",
    "TrendSnapshot",
    "WeightSample",
    "WorkoutRecord",
    "YDomain",
]
