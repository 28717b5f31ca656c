"""
Timeline View
=============

Journey statistics plus a newest-first list of photos, each with its
weight change from the previous weigh-in.
"""

from datetime import datetime
from typing import Any, Dict, Optional, Sequence

from ..analytics import journey_stats, timeline_deltas
from ..models import Photo


def build_timeline(photos: Sequence[Photo], now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Build the timeline payload.

    The oldest entry is flagged as the baseline.
    """
    deltas = timeline_deltas(photos)
    entries = []
    for index, (photo, change) in enumerate(deltas):
        entries.append({
            "photo": photo.to_dict(),
            "weightChange": change,
            "isBaseline": index == len(deltas) - 1,
        })
    return {
        "stats": journey_stats(photos, now).to_dict(),
        "entries": entries,
    }
