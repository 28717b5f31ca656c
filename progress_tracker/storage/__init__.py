"""
Storage Module
==============

Contains the in-memory record store for progress photos.
"""

from .photo_store import PhotoStore

__all__ = ["PhotoStore"]
