"""
Analytics Module
================

Pure statistics derived from progress photos.
"""

from .progress_stats import (
    ComparisonMetrics,
    JourneyStats,
    compare,
    days_between,
    journey_stats,
    timeline_deltas,
    weekly_rate,
    weight_change_label,
    weight_delta,
)

__all__ = [
    "ComparisonMetrics",
    "JourneyStats",
    "compare",
    "days_between",
    "journey_stats",
    "timeline_deltas",
    "weekly_rate",
    "weight_change_label",
    "weight_delta",
]
