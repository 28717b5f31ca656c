"""
Comparison View
===============

Side-by-side before/after payload.
"""

from typing import Any, Dict

from ..analytics import compare
from ..models import Photo


def build_comparison(before: Photo, after: Photo) -> Dict[str, Any]:
    """Combine both photos with their pairwise metrics."""
    return {
        "before": before.to_dict(),
        "after": after.to_dict(),
        "metrics": compare(before, after).to_dict(),
    }
