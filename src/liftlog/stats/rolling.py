"""Daily and rolling averages from raw weight samples."""

import math
from datetime import date, timedelta
from typing import Iterable

from ..models.weight import DailyAverageRecord, WeightSample
from .daily import group_by_day

ROLLING_WINDOWS = (3, 7)


def _window_mean(daily: dict[date, float], day: date, window: int) -> float:
    start = day - timedelta(days=window - 1)
    values = [avg for d, avg in daily.items() if start <= d <= day]
    return math.fsum(values) / len(values)


def compute_daily_averages(samples: Iterable[WeightSample]) -> list[DailyAverageRecord]:
    """One record per day with samples, oldest first.

    A rolling average covers the trailing calendar window ending on that
    day and averages the daily means of the days inside it that have data.
    It is left as None until the history spans the full window.
    """
    daily = {
        day: math.fsum(values) / len(values)
        for day, values in group_by_day(samples).items()
    }
    if not daily:
        return []

    first_day = min(daily)
    records = []
    for day in sorted(daily):
        history_days = (day - first_day).days + 1
        rolling = {
            window: _window_mean(daily, day, window) if history_days >= window else None
            for window in ROLLING_WINDOWS
        }
        records.append(
            DailyAverageRecord(
                day_date=day,
                average=daily[day],
                three_day_average=rolling[3],
                seven_day_average=rolling[7],
            )
        )
    return records
