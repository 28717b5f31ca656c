"""
Photo Model
===========

The single persisted entity: a dated progress photo with optional
weight and notes.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Optional


class PhotoType(str, Enum):
    """Pose the photo was taken in."""
    FRONT = "front"
    PROFILE = "profile"
    BACK = "back"
    FREE_POSE = "free-pose"


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to naive timestamps so they compare with aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _isoformat(value: datetime) -> str:
    return ensure_utc(value).isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class Photo:
    """
    Progress photo record.

    Attributes:
        id (str): Opaque identifier assigned by the store
        date (datetime): When the photo was taken
        type (PhotoType): Pose of the photo
        filename (str): Original file name, display only
        file_data (str): Image payload as a data URI
        weight (Optional[float]): Body weight in kg, None when not recorded
        notes (Optional[str]): Free text, None when absent
        created_at (datetime): Insertion timestamp
    """
    id: str
    date: datetime
    type: PhotoType
    filename: str
    file_data: str
    weight: Optional[float] = None
    notes: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def merged(self, changes: Dict[str, Any]) -> "Photo":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase JSON shape used on the wire."""
        return {
            "id": self.id,
            "date": _isoformat(self.date),
            "type": self.type.value,
            "weight": self.weight,
            "notes": self.notes,
            "filename": self.filename,
            "fileData": self.file_data,
            "createdAt": _isoformat(self.created_at),
        }
