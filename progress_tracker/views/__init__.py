"""
Views Module
============

View models for the gallery, comparison and timeline panels.
"""

from .comparison import build_comparison
from .gallery import GalleryFilter, build_gallery, filter_photos
from .timeline import build_timeline

__all__ = [
    "GalleryFilter",
    "build_comparison",
    "build_gallery",
    "build_timeline",
    "filter_photos",
]
