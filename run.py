"""
Progress Photo Tracker Server
=============================

Main entry point for the Flask server.

Usage:
    python run.py

Or with gunicorn:
    gunicorn -w 1 -b 0.0.0.0:5000 "run:create_app()"

Photos are kept in process memory, so run a single worker.
"""

import logging
import os
import sys
from typing import Optional

# Add server source to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from flask import Flask

from config import ServerConfig, VideoConfig, get_server_config, get_video_config
from progress_tracker.api import register_routes
from progress_tracker.storage import PhotoStore
from templates.index import HTML_TEMPLATE


def configure_logging(level: str) -> None:
    """Configure root logging for the server process."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(
    store: Optional[PhotoStore] = None,
    server_config: Optional[ServerConfig] = None,
    video_config: Optional[VideoConfig] = None,
) -> Flask:
    """
    Create the Flask app.

    Args:
        store: Photo store to serve; a fresh empty store by default
        server_config: Server settings, read from the environment by default
        video_config: Video settings, read from the environment by default
    """
    server_config = server_config or get_server_config()
    video_config = video_config or get_video_config()

    app = Flask(__name__)
    app.json.sort_keys = False
    app.config["MAX_CONTENT_LENGTH"] = server_config.max_content_length_mb * 1024 * 1024

    app.extensions["photo_store"] = store if store is not None else PhotoStore()
    register_routes(app, app.extensions["photo_store"], HTML_TEMPLATE, video_config)
    return app


def main():
    """Main entry point."""
    config = get_server_config()
    configure_logging(config.log_level)
    app = create_app(server_config=config)
    print(f"""
╔══════════════════════════════════════════════════════╗
║          Progress Photo Tracker Server               ║
╠══════════════════════════════════════════════════════╣
║  Server running at: http://{config.host}:{config.port:<5}              ║
║  Debug mode: {str(config.debug):<5}                               ║
║                                                      ║
║  Endpoints:                                          ║
║    GET    /                - Web interface           ║
║    GET    /api/photos      - List photos             ║
║    POST   /api/photos      - Upload photo            ║
║    GET    /api/photos/<id> - Get photo               ║
║    PATCH  /api/photos/<id> - Update photo            ║
║    DELETE /api/photos/<id> - Delete photo            ║
║    GET    /api/gallery     - Filtered gallery        ║
║    GET    /api/compare     - Before/after metrics    ║
║    GET    /api/timeline    - Journey timeline        ║
║    POST   /api/video       - Render slideshow        ║
║    GET    /health          - Health check            ║
╚══════════════════════════════════════════════════════╝
    """)
    app.run(host=config.host, port=config.port, debug=config.debug, threaded=config.threaded)


if __name__ == "__main__":
    main()
