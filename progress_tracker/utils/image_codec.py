"""
Image Codec Module
==================

Conversion between data URI strings and OpenCV images.
"""

import base64
import binascii
import re
from typing import Tuple

import cv2
import numpy as np

from ..exceptions import MediaDecodeError

DATA_URI_PATTERN = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?P<params>(;[^,;]+)*),", re.ASCII)

# Images smaller than this in either dimension are rejected
MIN_IMAGE_SIDE = 2


def split_data_uri(data_uri: str) -> Tuple[str, bytes]:
    """
    Split a base64 data URI into its MIME type and raw bytes.

    Args:
        data_uri: String of the form "data:image/jpeg;base64,...."

    Returns:
        Tuple of (mime type, decoded bytes)

    Raises:
        MediaDecodeError: If the string is not a base64 data URI
    """
    match = DATA_URI_PATTERN.match(data_uri or "")
    if not match or ";base64" not in match.group("params"):
        raise MediaDecodeError("Image payload is not a base64 data URI")
    mime = match.group("mime") or "application/octet-stream"
    try:
        payload = base64.b64decode(data_uri[match.end():], validate=True)
    except (binascii.Error, ValueError) as e:
        raise MediaDecodeError(f"Base64 decode error: {e}") from e
    return mime, payload


def decode_data_uri(data_uri: str) -> np.ndarray:
    """
    Decode a data URI into a BGR image.

    Raises:
        MediaDecodeError: If the payload is not a readable image
    """
    _, payload = split_data_uri(data_uri)
    nparr = np.frombuffer(payload, np.uint8)
    image = cv2.imdecode(nparr, cv2.IMREAD_COLOR)

    if image is None or image.size == 0:
        raise MediaDecodeError("Failed to decode image")
    if image.shape[0] < MIN_IMAGE_SIDE or image.shape[1] < MIN_IMAGE_SIDE:
        raise MediaDecodeError("Image too small")
    return image


def encode_data_uri(image: np.ndarray, ext: str = ".jpg", quality: int = 85) -> str:
    """Encode a BGR image as a JPEG (or PNG) data URI."""
    params = [cv2.IMWRITE_JPEG_QUALITY, quality] if ext in (".jpg", ".jpeg") else []
    ret, buffer = cv2.imencode(ext, image, params)
    if not ret:
        raise MediaDecodeError(f"Failed to encode image as {ext}")
    mime = "image/png" if ext == ".png" else "image/jpeg"
    return f"data:{mime};base64,{base64.b64encode(buffer).decode('utf-8')}"
