"""
Server Configuration
====================

Configuration settings for the progress tracker server.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


@dataclass
class ServerConfig:
    """Server configuration settings."""
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False
    threaded: bool = True
    log_level: str = "INFO"
    max_content_length_mb: int = 32


@dataclass
class VideoConfig:
    """Slideshow video settings."""
    fourcc: str = "mp4v"
    default_quality: str = "720p"
    seconds_per_photo: float = 2.0
    max_seconds_per_photo: float = 10.0

    # Overlay label
    date_format: str = "%d/%m/%Y"
    overlay_padding: int = 20
    overlay_min_font_px: int = 16
    overlay_font_ratio: float = 0.02
    overlay_opacity: float = 0.7


def get_server_config() -> ServerConfig:
    """Get server configuration from environment."""
    return ServerConfig(
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
        debug=os.getenv("DEBUG", "false").lower() == "true",
        threaded=True,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        max_content_length_mb=int(os.getenv("MAX_CONTENT_LENGTH_MB", "32")),
    )


def get_video_config() -> VideoConfig:
    """Get video configuration from environment."""
    return VideoConfig(
        fourcc=os.getenv("VIDEO_FOURCC", "mp4v"),
        default_quality=os.getenv("VIDEO_DEFAULT_QUALITY", "720p"),
        seconds_per_photo=float(os.getenv("VIDEO_SECONDS_PER_PHOTO", "2")),
        max_seconds_per_photo=float(os.getenv("VIDEO_MAX_SECONDS_PER_PHOTO", "10")),
        date_format=os.getenv("OVERLAY_DATE_FORMAT", "%d/%m/%Y"),
    )
