"""
Frame Synthesizer Module
========================

Renders a slideshow of progress photos into fixed-size video frames.

Each photo is scaled to fit the canvas ("contain" placement, centered on
black) and held for ceil(seconds_per_photo * fps) identical frames. An
optional label with the date and weight is drawn in the bottom-right
corner.

Usage:
    synthesizer = FrameSynthesizer(photos, VideoSettings(quality="480p"))
    for frame, progress in synthesizer:
        writer.write(frame)
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

import cv2
import numpy as np

from ..models import Photo
from ..utils import decode_data_uri, overlay_label
from ..utils.formatting import DEFAULT_DATE_FORMAT

logger = logging.getLogger(__name__)

FPS = 30

RESOLUTION_PRESETS = {
    "480p": (854, 480),
    "720p": (1280, 720),
    "1080p": (1920, 1080),
}
DEFAULT_QUALITY = "720p"

TRANSITIONS = ("fade", "slide", "none")

# Progress checkpoints (percent)
PROGRESS_SETUP = 10
PROGRESS_DECODE_START = 20
PROGRESS_DECODE_DONE = 40
PROGRESS_RENDER_DONE = 80
PROGRESS_ENCODE_DONE = 100

ProgressCallback = Callable[[float], None]


@dataclass(frozen=True)
class VideoSettings:
    """
    Playback settings chosen in the video panel.

    transition and include_music are recorded but do not change the
    rendered frames.
    """
    seconds_per_photo: float = 2.0
    transition: str = "fade"
    quality: str = DEFAULT_QUALITY
    include_stats: bool = True
    include_music: bool = False


@dataclass(frozen=True)
class OverlayStyle:
    """Geometry and colors of the date/weight label."""
    padding: int = 20
    inner_padding: int = 10
    min_font_px: int = 16
    font_ratio: float = 0.02
    opacity: float = 0.7
    thickness: int = 2
    font: int = cv2.FONT_HERSHEY_SIMPLEX
    color: Tuple[int, int, int] = (255, 255, 255)


def resolve_dimensions(quality: Optional[str]) -> Tuple[int, int]:
    """Map a resolution preset to (width, height); unknown presets give 720p."""
    return RESOLUTION_PRESETS.get(quality or "", RESOLUTION_PRESETS[DEFAULT_QUALITY])


def frames_per_photo(seconds: float, fps: int = FPS) -> int:
    """Number of frames a photo is held for."""
    # round() drops float noise such as 0.1 * 30 == 3.0000000000000004
    return math.ceil(round(seconds * fps, 6))


def fit_rect(src_w: int, src_h: int, canvas_w: int, canvas_h: int) -> Tuple[int, int, int, int]:
    """
    Compute the centered draw rectangle for "contain" placement.

    Args:
        src_w, src_h: Source image size
        canvas_w, canvas_h: Target canvas size

    Returns:
        (x, y, width, height), always inside the canvas
    """
    image_aspect = src_w / src_h
    canvas_aspect = canvas_w / canvas_h

    if image_aspect > canvas_aspect:
        # Wider than the canvas: fill width, center vertically
        draw_w = canvas_w
        draw_h = min(canvas_h, max(1, int(round(canvas_w / image_aspect))))
        return 0, (canvas_h - draw_h) // 2, draw_w, draw_h

    # Taller than (or same shape as) the canvas: fill height, center horizontally
    draw_h = canvas_h
    draw_w = min(canvas_w, max(1, int(round(canvas_h * image_aspect))))
    return (canvas_w - draw_w) // 2, 0, draw_w, draw_h


class FrameSynthesizer:
    """
    Lazy, restartable frame producer.

    Iterating yields (frame, progress) pairs where frame is a read-only
    BGR uint8 array of shape (height, width, 3) and progress is a
    percentage between 40 and 80. Each new iteration starts from scratch.

    Attributes:
        width (int): Canvas width in pixels
        height (int): Canvas height in pixels
        frames_per_photo (int): Frames each photo is held for
    """

    def __init__(
        self,
        photos: Sequence[Photo],
        settings: VideoSettings,
        fps: int = FPS,
        date_format: str = DEFAULT_DATE_FORMAT,
        style: Optional[OverlayStyle] = None,
        on_progress: Optional[ProgressCallback] = None,
    ):
        """
        Initialize the synthesizer.

        Args:
            photos: Photos in playback order (ascending by date)
            settings: Playback settings
            fps: Output frame rate
            date_format: strftime format for the overlay date
            style: Overlay geometry, defaults to OverlayStyle()
            on_progress: Called with coarse progress checkpoints
        """
        self.photos = list(photos)
        self.settings = settings
        self.fps = fps
        self.date_format = date_format
        self.style = style or OverlayStyle()
        self.on_progress = on_progress
        self.width, self.height = resolve_dimensions(settings.quality)
        self.frames_per_photo = frames_per_photo(settings.seconds_per_photo, fps)

    @property
    def total_frames(self) -> int:
        return len(self.photos) * self.frames_per_photo

    def _report(self, progress: float) -> None:
        if self.on_progress:
            self.on_progress(progress)

    def __iter__(self) -> Iterator[Tuple[np.ndarray, float]]:
        return self.frames()

    def frames(self) -> Iterator[Tuple[np.ndarray, float]]:
        """Generate every frame of the slideshow in order."""
        self._report(PROGRESS_SETUP)
        logger.debug("Synthesizing %d frames at %dx%d", self.total_frames, self.width, self.height)

        # Decode everything first so a bad payload fails before any output
        self._report(PROGRESS_DECODE_START)
        images = self._decode_all()
        self._report(PROGRESS_DECODE_DONE)

        span = PROGRESS_RENDER_DONE - PROGRESS_DECODE_DONE
        total = self.total_frames
        emitted = 0
        for photo, image in zip(self.photos, images):
            frame = self.render(image, photo)
            for _ in range(self.frames_per_photo):
                emitted += 1
                yield frame, PROGRESS_DECODE_DONE + span * emitted / total
            self._report(PROGRESS_DECODE_DONE + span * emitted / total)

    def _decode_all(self) -> List[np.ndarray]:
        return [decode_data_uri(photo.file_data) for photo in self.photos]

    def render(self, image: np.ndarray, photo: Photo) -> np.ndarray:
        """
        Draw one photo onto a blank canvas.

        Returns:
            Read-only frame of shape (height, width, 3)
        """
        canvas = np.zeros((self.height, self.width, 3), dtype=np.uint8)
        src_h, src_w = image.shape[:2]
        x, y, draw_w, draw_h = fit_rect(src_w, src_h, self.width, self.height)
        interpolation = cv2.INTER_AREA if draw_w < src_w else cv2.INTER_LINEAR
        canvas[y:y + draw_h, x:x + draw_w] = cv2.resize(image, (draw_w, draw_h), interpolation=interpolation)

        if self.settings.include_stats:
            self._draw_overlay(canvas, overlay_label(photo.date, photo.weight, self.date_format))

        canvas.flags.writeable = False
        return canvas

    def _draw_overlay(self, canvas: np.ndarray, text: str) -> None:
        """Draw the label on a translucent box anchored bottom-right."""
        style = self.style
        font_px = max(style.min_font_px, int(round(self.width * style.font_ratio)))
        scale = cv2.getFontScaleFromHeight(style.font, font_px, style.thickness)
        (text_w, text_h), _ = cv2.getTextSize(text, style.font, scale, style.thickness)

        x = self.width - text_w - style.padding
        y = self.height - style.padding

        x0 = max(0, x - style.inner_padding)
        y0 = max(0, y - text_h - style.inner_padding)
        x1 = min(self.width, x + text_w + style.inner_padding)
        y1 = min(self.height, y + style.inner_padding)

        roi = canvas[y0:y1, x0:x1]
        canvas[y0:y1, x0:x1] = cv2.addWeighted(roi, 1.0 - style.opacity, np.zeros_like(roi), style.opacity, 0)
        cv2.putText(canvas, text, (x, y), style.font, scale, style.color, style.thickness, cv2.LINE_AA)
