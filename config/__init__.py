"""
Configuration Module
====================
"""

from .settings import (
    ServerConfig,
    VideoConfig,
    get_server_config,
    get_video_config,
)

__all__ = [
    "ServerConfig",
    "VideoConfig",
    "get_server_config",
    "get_video_config",
]
