"""Rolling average trends and chart bounds.

Rolling averages are sparse: early days (or days after a gap) may lack a
3-day or 7-day value. Trends therefore compare the latest day that has the
value against whichever day nearest to `window` days earlier also has it,
allowing one day of slack either way.
"""

from datetime import timedelta
from typing import Callable, Iterable

from ..models.weight import DailyAverageRecord, DailyStatPoint, TrendSnapshot, YDomain

Y_PADDING = 2
DEFAULT_Y_DOMAIN = YDomain(min=0, max=100)
TREND_TOLERANCE_DAYS = 1


def sort_averages(records: Iterable[DailyAverageRecord]) -> list[DailyAverageRecord]:
    """Order average records oldest first for charting."""
    return sorted(records, key=lambda r: r.day_date)


def compute_y_domain(
    daily_stats: Iterable[DailyStatPoint],
    averages: Iterable[DailyAverageRecord],
    padding: float = Y_PADDING,
) -> YDomain:
    """Y-axis bounds covering every plotted value, padded on both sides."""
    values: list[float] = []
    for point in daily_stats:
        values.extend((point.min, point.max))
    for record in averages:
        values.extend(
            v
            for v in (record.average, record.three_day_average, record.seven_day_average)
            if v is not None
        )

    if not values:
        return DEFAULT_Y_DOMAIN
    return YDomain(min=min(values) - padding, max=max(values) + padding)


def _latest_with(
    records: Iterable[DailyAverageRecord],
    field: Callable[[DailyAverageRecord], float | None],
) -> DailyAverageRecord | None:
    present = [r for r in records if field(r) is not None]
    if not present:
        return None
    return max(present, key=lambda r: r.day_date)


def compute_change(
    records: list[DailyAverageRecord],
    window: int,
    tolerance_days: int = TREND_TOLERANCE_DAYS,
) -> float:
    """Change in the `window`-day rolling average over `window` days.

    Returns 0 when there is no rolling value at all or no comparison day
    within `tolerance_days` of the target date.
    """
    if window < 1:
        raise ValueError(f"Window must be positive, got {window}")

    def field(r: DailyAverageRecord) -> float | None:
        return r.window_average(window)

    latest = _latest_with(records, field)
    if latest is None:
        return 0

    target = latest.day_date - timedelta(days=window)
    candidates = [
        r
        for r in records
        if field(r) is not None and abs((r.day_date - target).days) <= tolerance_days
    ]
    if not candidates:
        return 0

    # Nearest to the target; ties go to the earlier day
    match = min(candidates, key=lambda r: (abs((r.day_date - target).days), r.day_date))
    return field(latest) - field(match)


def resolve_current_weight(records: list[DailyAverageRecord]) -> float:
    """Best available "current" weight.

    Prefers the most recent 7-day average, then the most recent 3-day
    average, then the most recent daily average. Each tier looks for its own
    latest day, so the 7-day value may come from an earlier day than the
    newest daily average.
    """
    tiers = (
        lambda r: r.seven_day_average,
        lambda r: r.three_day_average,
        lambda r: r.average,
    )
    for field in tiers:
        latest = _latest_with(records, field)
        if latest is not None:
            return field(latest)
    return 0


def compute_trends(records: list[DailyAverageRecord]) -> TrendSnapshot:
    """Current weight plus 3-day and 7-day changes."""
    return TrendSnapshot(
        current_weight=resolve_current_weight(records),
        three_day_change=compute_change(records, 3),
        seven_day_change=compute_change(records, 7),
    )
