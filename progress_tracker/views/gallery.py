"""
Gallery View
============

Filtering for the photo gallery: by pose type, by recent period and by
text in the notes.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence

from ..analytics import weight_change_label
from ..models import Photo
from ..models.photo import ensure_utc

ALL = "all"
PERIODS = {"7": 7, "30": 30, "90": 90}


@dataclass(frozen=True)
class GalleryFilter:
    """Active gallery filters. None or "all" disables a filter."""
    type: Optional[str] = None
    period: Optional[str] = None
    search: Optional[str] = None

    def matches(self, photo: Photo, now: datetime) -> bool:
        return (
            self._matches_type(photo)
            and self._matches_period(photo, now)
            and self._matches_search(photo)
        )

    def _matches_type(self, photo: Photo) -> bool:
        return not self.type or self.type == ALL or photo.type.value == self.type

    def _matches_period(self, photo: Photo, now: datetime) -> bool:
        if not self.period or self.period not in PERIODS:
            return True
        elapsed = (ensure_utc(now) - ensure_utc(photo.date)).total_seconds()
        return elapsed // 86400 <= PERIODS[self.period]

    def _matches_search(self, photo: Photo) -> bool:
        if not self.search:
            return True
        return bool(photo.notes) and self.search.lower() in photo.notes.lower()


def filter_photos(photos: Sequence[Photo], filters: GalleryFilter,
                  now: Optional[datetime] = None) -> List[Photo]:
    """Apply the gallery filters, keeping the input order."""
    now = now or datetime.now(timezone.utc)
    return [photo for photo in photos if filters.matches(photo, now)]


def _initial_weight(photos: Sequence[Photo]) -> Optional[float]:
    if not photos:
        return None
    earliest = min(photos, key=lambda photo: ensure_utc(photo.date))
    return earliest.weight


def build_gallery(photos: Sequence[Photo], filters: GalleryFilter,
                  now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Build the gallery payload.

    Args:
        photos: All photos, newest first
        filters: Active filters
        now: Reference instant for the period filter

    Returns:
        {"photos": [...], "total": n}; each photo carries a
        weightChangeLabel relative to the earliest weigh-in of the
        whole collection, or None
    """
    initial = _initial_weight(photos)
    cards = []
    for photo in filter_photos(photos, filters, now):
        card = photo.to_dict()
        label = None
        if photo.weight is not None and initial is not None:
            label = weight_change_label(photo.weight, initial)
        card["weightChangeLabel"] = label
        cards.append(card)
    return {"photos": cards, "total": len(cards)}
