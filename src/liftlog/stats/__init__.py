"""Weight statistics for liftlog."""

from .daily import aggregate_daily, day_label, day_of
from .rolling import compute_daily_averages
from .snapshot import StatsCalculator, compute_stats
from .trends import compute_change, compute_trends, compute_y_domain

__all__ = [
    "aggregate_daily",
    "compute_change",
    "compute_daily_averages",
    "compute_stats",
    "compute_trends",
    "compute_y_domain",
    "day_label",
    "day_of",
    "StatsCalculator",
]
