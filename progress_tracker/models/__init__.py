"""
Data Models Module
==================

Contains the Photo record and its enumerations.
"""

from .photo import Photo, PhotoType

__all__ = ["Photo", "PhotoType"]
