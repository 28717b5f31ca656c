"""
Shared fixtures for the progress tracker tests.
"""

import os
import sys
import tempfile
from datetime import datetime, timezone

import cv2
import numpy as np
import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from progress_tracker.models import Photo, PhotoType
from progress_tracker.storage import PhotoStore
from progress_tracker.utils import encode_data_uri


def image_data_uri(width=40, height=30, color=(0, 0, 255)):
    """Encode a solid-color BGR image as a PNG data URI."""
    image = np.zeros((height, width, 3), dtype=np.uint8)
    image[:] = color
    return encode_data_uri(image, ext='.png')


def make_photo(photo_id='p1', date=None, weight=None, notes=None,
               photo_type=PhotoType.FRONT, file_data=None):
    """Build a Photo without going through a store."""
    return Photo(
        id=photo_id,
        date=date or datetime(2024, 1, 1, tzinfo=timezone.utc),
        type=photo_type,
        filename=f'{photo_id}.png',
        file_data=file_data or image_data_uri(),
        weight=weight,
        notes=notes,
    )


def video_writer_available():
    """Check whether OpenCV can open an mp4v writer on this platform."""
    fd, path = tempfile.mkstemp(suffix='.mp4')
    os.close(fd)
    try:
        writer = cv2.VideoWriter(path, cv2.VideoWriter_fourcc(*'mp4v'), 30.0, (64, 48))
        opened = writer.isOpened()
        writer.release()
        return opened
    finally:
        os.remove(path)


requires_video_writer = pytest.mark.skipif(
    not video_writer_available(), reason='OpenCV build has no mp4v writer'
)


@pytest.fixture
def store():
    """Fresh empty photo store."""
    return PhotoStore()


@pytest.fixture
def photo_payload():
    """Factory for valid POST /api/photos bodies."""
    def _payload(**overrides):
        payload = {
            'date': '2024-01-01T00:00:00Z',
            'type': 'front',
            'weight': 90.0,
            'notes': 'Start',
            'filename': 'front.png',
            'fileData': image_data_uri(),
        }
        payload.update(overrides)
        return payload
    return _payload


@pytest.fixture
def client(store):
    """Flask test client bound to a fresh store."""
    from run import create_app
    app = create_app(store=store)
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client
