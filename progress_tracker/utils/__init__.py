"""
Utilities Module
================

Contains utility functions, helpers, and shared components.
"""

from .formatting import format_date, format_weight, overlay_label
from .image_codec import decode_data_uri, encode_data_uri, split_data_uri

__all__ = [
    "decode_data_uri",
    "encode_data_uri",
    "format_date",
    "format_weight",
    "overlay_label",
    "split_data_uri",
]
