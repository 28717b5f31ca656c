"""
Video Module
============

Slideshow rendering: frame synthesis and encoding.
"""

from .frame_synthesizer import (
    FPS,
    RESOLUTION_PRESETS,
    FrameSynthesizer,
    OverlayStyle,
    VideoSettings,
    fit_rect,
    frames_per_photo,
    resolve_dimensions,
)
from .slideshow import generate_video, video_filename
from .stream_encoder import EncodedVideo, StreamEncoder

__all__ = [
    "FPS",
    "RESOLUTION_PRESETS",
    "EncodedVideo",
    "FrameSynthesizer",
    "OverlayStyle",
    "StreamEncoder",
    "VideoSettings",
    "fit_rect",
    "frames_per_photo",
    "generate_video",
    "resolve_dimensions",
    "video_filename",
]
