"""
Request Schemas
===============

pydantic models validating request bodies for the photo and video
endpoints.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..models import PhotoType
from ..video import VideoSettings
from ..video.frame_synthesizer import TRANSITIONS


class PhotoCreate(BaseModel):
    """Body of POST /api/photos."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    date: datetime
    type: PhotoType
    weight: Optional[float] = Field(default=None, ge=0, le=1000)
    notes: Optional[str] = None
    filename: str
    file_data: str = Field(alias="fileData", min_length=1)


class PhotoUpdate(BaseModel):
    """
    Body of PATCH /api/photos/<id>.

    Every field is optional. weight and notes may be set to null to clear
    them; the other fields reject null.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    date: Optional[datetime] = None
    type: Optional[PhotoType] = None
    weight: Optional[float] = Field(default=None, ge=0, le=1000)
    notes: Optional[str] = None
    filename: Optional[str] = None
    file_data: Optional[str] = Field(default=None, alias="fileData", min_length=1)

    @field_validator("date", "type", "filename", "file_data", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("Field may not be null")
        return value

    def changes(self) -> Dict[str, Any]:
        """Fields present in the request body, by attribute name."""
        return self.model_dump(exclude_unset=True)


class VideoRequest(BaseModel):
    """Body of POST /api/video."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    duration: float = Field(default=2.0, gt=0)
    transition: str = "fade"
    quality: str = "720p"
    include_stats: bool = Field(default=True, alias="includeStats")
    include_music: bool = Field(default=False, alias="includeMusic")
    photo_type: str = Field(default="all", alias="photoType")

    @field_validator("transition")
    @classmethod
    def _known_transition(cls, value: str) -> str:
        if value not in TRANSITIONS:
            raise ValueError(f"Transition must be one of {', '.join(TRANSITIONS)}")
        return value

    @field_validator("photo_type")
    @classmethod
    def _known_type(cls, value: str) -> str:
        if value != "all":
            PhotoType(value)
        return value

    def to_settings(self) -> VideoSettings:
        return VideoSettings(
            seconds_per_photo=self.duration,
            transition=self.transition,
            quality=self.quality,
            include_stats=self.include_stats,
            include_music=self.include_music,
        )


def error_details(exc: ValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into JSON-safe {path, message, code} items."""
    return [
        {
            "path": [str(part) for part in error["loc"]],
            "message": error["msg"],
            "code": error["type"],
        }
        for error in exc.errors()
    ]
