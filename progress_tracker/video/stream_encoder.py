"""
Stream Encoder Module
=====================

Feeds synthesized frames into OpenCV's VideoWriter and returns the
finished file as bytes.

The writer is opened at the same frame rate the frames were generated
for, so each written frame occupies exactly 1/fps of output time. Frames
are written strictly in order and the writer is released right after the
last one.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple, Union

import cv2
import numpy as np

from ..exceptions import VideoEncodingError
from .frame_synthesizer import FPS, PROGRESS_ENCODE_DONE

logger = logging.getLogger(__name__)

MIME_TYPE = "video/mp4"
SUFFIX = ".mp4"

FrameItem = Union[np.ndarray, Tuple[np.ndarray, float]]


@dataclass(frozen=True)
class EncodedVideo:
    """Finished video file."""
    data: bytes
    mime_type: str
    frame_count: int
    fps: int
    width: int
    height: int

    @property
    def duration(self) -> float:
        """Playback length in seconds."""
        return self.frame_count / self.fps


class StreamEncoder:
    """
    Frame-paced wrapper around cv2.VideoWriter.

    Usage:
        encoder = StreamEncoder(1280, 720)
        video = encoder.encode(synthesizer, on_progress=print)
    """

    def __init__(self, width: int, height: int, fps: int = FPS,
                 fourcc: str = "mp4v"):
        """
        Initialize the encoder.

        Args:
            width: Frame width in pixels
            height: Frame height in pixels
            fps: Output frame rate
            fourcc: Four-character codec code passed to OpenCV
        """
        self.width = width
        self.height = height
        self.fps = fps
        self.fourcc = fourcc

    def _open_writer(self, path: str) -> cv2.VideoWriter:
        writer = cv2.VideoWriter(
            path,
            cv2.VideoWriter_fourcc(*self.fourcc),
            float(self.fps),
            (self.width, self.height),
        )
        if not writer.isOpened():
            writer.release()
            raise VideoEncodingError(f"Could not open video writer for codec {self.fourcc!r}")
        return writer

    def encode(self, frames: Iterable[FrameItem],
               on_progress: Optional[Callable[[float], None]] = None) -> EncodedVideo:
        """
        Write every frame and finalize the video.

        Args:
            frames: Frames, or (frame, progress) pairs, in playback order
            on_progress: Called with 100 once the file is finalized

        Returns:
            EncodedVideo holding the complete file

        Raises:
            VideoEncodingError: If the writer fails or a frame has the wrong size
        """
        fd, path = tempfile.mkstemp(suffix=SUFFIX, prefix="progress-video-")
        os.close(fd)
        expected_shape = (self.height, self.width, 3)
        written = 0

        try:
            writer = self._open_writer(path)
            try:
                for item in frames:
                    frame = item[0] if isinstance(item, tuple) else item
                    if frame.shape != expected_shape:
                        raise VideoEncodingError(
                            f"Frame {written} has shape {frame.shape}, expected {expected_shape}"
                        )
                    writer.write(frame)
                    written += 1
            finally:
                writer.release()

            if written == 0:
                raise VideoEncodingError("No frames to encode")

            with open(path, "rb") as f:
                data = f.read()
            if not data:
                raise VideoEncodingError("Video writer produced an empty file")
        finally:
            os.remove(path)

        logger.info("Encoded %d frames (%dx%d @ %d fps, %d bytes)",
                    written, self.width, self.height, self.fps, len(data))
        if on_progress:
            on_progress(PROGRESS_ENCODE_DONE)

        return EncodedVideo(
            data=data,
            mime_type=MIME_TYPE,
            frame_count=written,
            fps=self.fps,
            width=self.width,
            height=self.height,
        )
