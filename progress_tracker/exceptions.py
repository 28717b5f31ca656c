"""
Exceptions
==========

Error types raised by the progress tracker services.
"""


class ProgressTrackerError(Exception):
    """Base class for progress tracker errors."""


class MediaDecodeError(ProgressTrackerError):
    """A stored image payload could not be decoded."""


class VideoEncodingError(ProgressTrackerError):
    """The video writer could not produce an output file."""
