"""
Formatting Helpers
==================

Display strings shared by the views and the video overlay.
"""

from datetime import datetime
from typing import Optional

from ..models.photo import ensure_utc

DEFAULT_DATE_FORMAT = "%d/%m/%Y"


def format_date(value: datetime, date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """Format a timestamp as a localized calendar date (dd/mm/yyyy)."""
    return ensure_utc(value).strftime(date_format)


def format_weight(weight: Optional[float]) -> Optional[str]:
    """Format a weight with one decimal, or None when absent."""
    if weight is None:
        return None
    return f"{weight:.1f}kg"


def overlay_label(date: datetime, weight: Optional[float],
                  date_format: str = DEFAULT_DATE_FORMAT) -> str:
    """Text drawn in the corner of each video frame."""
    text = format_date(date, date_format)
    weight_text = format_weight(weight)
    if weight_text:
        text = f"{text} - {weight_text}"
    return text
