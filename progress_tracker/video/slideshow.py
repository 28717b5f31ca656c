"""
Slideshow Module
================

End-to-end video generation: sort photos, synthesize frames, encode.
"""

import logging
from datetime import date
from typing import Callable, Optional, Sequence

from config import VideoConfig

from ..models import Photo
from ..models.photo import ensure_utc
from .frame_synthesizer import FPS, FrameSynthesizer, OverlayStyle, VideoSettings
from .stream_encoder import EncodedVideo, StreamEncoder

logger = logging.getLogger(__name__)


def video_filename(today: date) -> str:
    """Download name for a generated video."""
    return f"transformacao-{today.isoformat()}.mp4"


class _MonotonicProgress:
    """Forward progress values, dropping any that would go backwards."""

    def __init__(self, callback: Optional[Callable[[float], None]]):
        self.callback = callback
        self.last = 0.0

    def __call__(self, value: float) -> None:
        if value < self.last:
            return
        self.last = value
        if self.callback:
            self.callback(value)


def generate_video(
    photos: Sequence[Photo],
    settings: VideoSettings,
    config: Optional[VideoConfig] = None,
    on_progress: Optional[Callable[[float], None]] = None,
) -> EncodedVideo:
    """
    Render photos into a slideshow video.

    Args:
        photos: Photos in any order; played back oldest first
        settings: Playback settings from the video panel
        config: Encoder and overlay configuration
        on_progress: Receives percentages from 10 to 100

    Returns:
        The encoded video

    Raises:
        ValueError: If photos is empty
        MediaDecodeError: If a photo payload is not a readable image
        VideoEncodingError: If the encoder fails
    """
    if not photos:
        raise ValueError("No photos to render")

    config = config or VideoConfig()
    progress = _MonotonicProgress(on_progress)
    ordered = sorted(photos, key=lambda photo: ensure_utc(photo.date))

    style = OverlayStyle(
        padding=config.overlay_padding,
        min_font_px=config.overlay_min_font_px,
        font_ratio=config.overlay_font_ratio,
        opacity=config.overlay_opacity,
    )
    synthesizer = FrameSynthesizer(
        ordered,
        settings,
        fps=FPS,
        date_format=config.date_format,
        style=style,
        on_progress=progress,
    )
    logger.info(
        "Generating %s video from %d photos (%.1fs each, transition=%s, music=%s)",
        settings.quality, len(ordered), settings.seconds_per_photo, settings.transition,
        settings.include_music,
    )

    encoder = StreamEncoder(synthesizer.width, synthesizer.height, fps=FPS, fourcc=config.fourcc)
    return encoder.encode(synthesizer, on_progress=progress)
