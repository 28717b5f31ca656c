"""
Photo Store Module
==================

Thread-safe in-memory store for Photo records.

Records live for the lifetime of the store object; nothing is written to
disk. A durable backend would implement the same five methods.

Usage:
    store = PhotoStore()
    photo = store.create({"date": ..., "type": "front", ...})
    store.update(photo.id, {"weight": 88.5})
"""

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

from ..models import Photo, PhotoType
from ..models.photo import ensure_utc

logger = logging.getLogger(__name__)

# Fields a client may set on create or update
MUTABLE_FIELDS = ("date", "type", "weight", "notes", "filename", "file_data")


def _normalize(fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Keep known fields and coerce date/type to their model types."""
    values = {key: fields[key] for key in MUTABLE_FIELDS if key in fields}
    if isinstance(values.get("date"), datetime):
        values["date"] = ensure_utc(values["date"])
    if "type" in values and not isinstance(values["type"], PhotoType):
        values["type"] = PhotoType(values["type"])
    return values


class PhotoStore:
    """
    In-memory photo store keyed by identifier.

    All operations are synchronous and guarded by a single lock, so the
    store can be shared by the threaded Flask server.
    """

    def __init__(self):
        """Initialize an empty store."""
        self._photos: Dict[str, Photo] = {}
        self._lock = threading.Lock()

    def list(self) -> List[Photo]:
        """
        Get all photos.

        Returns:
            Photos ordered by date, newest first
        """
        with self._lock:
            photos = list(self._photos.values())
        return sorted(photos, key=lambda photo: photo.date, reverse=True)

    def get(self, photo_id: str) -> Optional[Photo]:
        """Get one photo, or None if the id is unknown."""
        with self._lock:
            return self._photos.get(photo_id)

    def create(self, fields: Mapping[str, Any]) -> Photo:
        """
        Store a new photo.

        Args:
            fields: Validated creatable fields (date, type, filename,
                file_data and optionally weight, notes)

        Returns:
            The stored record with its assigned id and created_at
        """
        values = _normalize(fields)
        values.setdefault("weight", None)
        values.setdefault("notes", None)
        with self._lock:
            photo_id = str(uuid.uuid4())
            while photo_id in self._photos:
                photo_id = str(uuid.uuid4())
            photo = Photo(id=photo_id, created_at=datetime.now(timezone.utc), **values)
            self._photos[photo_id] = photo
        logger.info("Created photo %s (%s, %s)", photo.id, photo.type.value, photo.filename)
        return photo

    def update(self, photo_id: str, changes: Mapping[str, Any]) -> Optional[Photo]:
        """
        Merge the supplied fields into an existing photo.

        Args:
            photo_id: Identifier of the photo to change
            changes: Subset of creatable fields; an empty mapping is a no-op

        Returns:
            The updated record, or None if the id is unknown
        """
        values = _normalize(changes)
        with self._lock:
            existing = self._photos.get(photo_id)
            if existing is None:
                return None
            if not values:
                return existing
            updated = existing.merged(values)
            self._photos[photo_id] = updated
        logger.info("Updated photo %s: %s", photo_id, ", ".join(sorted(values)))
        return updated

    def delete(self, photo_id: str) -> bool:
        """
        Remove a photo.

        Returns:
            True if a record existed, False otherwise
        """
        with self._lock:
            removed = self._photos.pop(photo_id, None)
        if removed is not None:
            logger.info("Deleted photo %s", photo_id)
        return removed is not None

    def __len__(self) -> int:
        with self._lock:
            return len(self._photos)
