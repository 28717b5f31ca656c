"""
Progress Statistics Module
==========================

Day and weight arithmetic over Photo records.

Every function is pure. A missing weight or a zero-day span yields None
rather than 0 so that callers can show an explicit absence.

Sign conventions:
    - Pairwise deltas (weight_delta, weekly_rate, timeline_deltas) are
      later minus earlier: negative means weight was lost.
    - JourneyStats.weight_loss is earliest minus latest: positive means
      weight was lost. The field name carries the sign.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Optional, Sequence, Tuple

from ..models import Photo
from ..models.photo import ensure_utc

SECONDS_PER_DAY = 24 * 60 * 60
DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class ComparisonMetrics:
    """Change between a before and an after photo."""
    weight_change: Optional[float]
    days: int
    weekly_rate: Optional[float]

    def to_dict(self) -> dict:
        return {
            "weightChange": self.weight_change,
            "daysDiff": self.days,
            "weeklyRate": self.weekly_rate,
        }


@dataclass(frozen=True)
class JourneyStats:
    """Aggregate figures shown above the timeline."""
    total_photos: int
    weight_loss: Optional[float]
    days_since: Optional[int]
    avg_weekly: Optional[float]

    def to_dict(self) -> dict:
        return {
            "totalPhotos": self.total_photos,
            "weightLoss": self.weight_loss,
            "daysSince": self.days_since,
            "avgWeekly": self.avg_weekly,
        }


def days_between(first: datetime, second: datetime) -> int:
    """
    Calendar days between two instants, rounded up.

    Symmetric in its arguments. Returns 0 only for identical instants;
    any non-zero gap counts as at least one day.
    """
    delta = abs((ensure_utc(first) - ensure_utc(second)).total_seconds())
    return math.ceil(delta / SECONDS_PER_DAY)


def _rate(change: Optional[float], days: Optional[int]) -> Optional[float]:
    if change is None or not days:
        return None
    return change * DAYS_PER_WEEK / days


def weight_delta(before: Photo, after: Photo) -> Optional[float]:
    """after.weight - before.weight, or None if either weight is missing."""
    if before.weight is None or after.weight is None:
        return None
    return after.weight - before.weight


def weekly_rate(before: Photo, after: Photo) -> Optional[float]:
    """Weight change per 7 days between two photos."""
    return _rate(weight_delta(before, after), days_between(after.date, before.date))


def compare(before: Photo, after: Photo) -> ComparisonMetrics:
    """Compute all pairwise metrics for a before/after comparison."""
    change = weight_delta(before, after)
    days = days_between(after.date, before.date)
    return ComparisonMetrics(weight_change=change, days=days, weekly_rate=_rate(change, days))


def _chronological(photos: Iterable[Photo]) -> List[Photo]:
    return sorted(photos, key=lambda photo: ensure_utc(photo.date))


def journey_stats(photos: Sequence[Photo], now: Optional[datetime] = None) -> JourneyStats:
    """
    Summarize the whole journey.

    Args:
        photos: Photos in any order
        now: Reference instant for days_since, defaults to the current time

    Returns:
        JourneyStats with weight_loss = earliest weight - latest weight
    """
    if not photos:
        return JourneyStats(total_photos=0, weight_loss=None, days_since=None, avg_weekly=None)

    now = now or datetime.now(timezone.utc)
    ordered = _chronological(photos)
    first, last = ordered[0], ordered[-1]

    weight_loss = None
    if first.weight is not None and last.weight is not None:
        weight_loss = first.weight - last.weight

    days_since = days_between(now, first.date)
    return JourneyStats(
        total_photos=len(photos),
        weight_loss=weight_loss,
        days_since=days_since,
        avg_weekly=_rate(weight_loss, days_since),
    )


def timeline_deltas(photos: Iterable[Photo]) -> List[Tuple[Photo, Optional[float]]]:
    """
    Pair each photo with its change from the next older photo.

    Returns:
        (photo, change) tuples, newest first. change is None for the
        oldest photo or when either weight is missing.
    """
    ordered = list(reversed(_chronological(photos)))
    result = []
    for index, photo in enumerate(ordered):
        change = None
        if index + 1 < len(ordered):
            older = ordered[index + 1]
            if photo.weight is not None and older.weight is not None:
                change = photo.weight - older.weight
        result.append((photo, change))
    return result


def weight_change_label(current: float, initial: float) -> str:
    """Human label for the change since the first weigh-in."""
    diff = round(current - initial, 1)
    if diff == 0:
        return "sem mudança"
    if diff > 0:
        return f"+{diff:.1f}kg desde início"
    return f"{diff:.1f}kg desde início"
