"""
API Routes Module
=================

Flask API routes for the progress tracker server.
"""

import logging
from datetime import date

from flask import Response, jsonify, render_template_string, request
from pydantic import ValidationError

from config import VideoConfig

from ..exceptions import ProgressTrackerError
from ..storage import PhotoStore
from ..video import generate_video, video_filename
from ..views import GalleryFilter, build_comparison, build_gallery, build_timeline
from .schemas import PhotoCreate, PhotoUpdate, VideoRequest, error_details

logger = logging.getLogger(__name__)

NOT_FOUND = "Photo not found"


def _not_found():
    return jsonify({"message": NOT_FOUND}), 404


def _validation_error(errors):
    return jsonify({"message": "Validation error", "errors": errors}), 400


def _json_body():
    """Get the request body as a dict, or None if it is not a JSON object."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else None


_INVALID_BODY = [{"path": [], "message": "Request body must be a JSON object", "code": "invalid_json"}]


def register_routes(app, store: PhotoStore, html_template: str, video_config: VideoConfig):
    """
    Register all API routes with the Flask app.

    Args:
        app: Flask application instance
        store: Photo store backing the CRUD endpoints
        html_template: HTML template string for the index page
        video_config: Encoder and overlay settings for /api/video
    """

    @app.route("/")
    def index():
        """Serve the main web interface."""
        return render_template_string(html_template)

    @app.route("/api/photos", methods=["GET"])
    def list_photos():
        """List all photos, newest first."""
        try:
            return jsonify([photo.to_dict() for photo in store.list()])
        except Exception:
            logger.exception("Failed to fetch photos")
            return jsonify({"message": "Failed to fetch photos"}), 500

    @app.route("/api/photos/<photo_id>", methods=["GET"])
    def get_photo(photo_id):
        """Get one photo."""
        try:
            photo = store.get(photo_id)
            if photo is None:
                return _not_found()
            return jsonify(photo.to_dict())
        except Exception:
            logger.exception("Failed to fetch photo %s", photo_id)
            return jsonify({"message": "Failed to fetch photo"}), 500

    @app.route("/api/photos", methods=["POST"])
    def create_photo():
        """
        Create a photo.

        Request JSON:
            {
                "date": "<ISO-8601 timestamp>",
                "type": "front" | "profile" | "back" | "free-pose",
                "weight": <number> | null,
                "notes": "<text>" | null,
                "filename": "<name>",
                "fileData": "data:image/...;base64,..."
            }
        """
        try:
            data = _json_body()
            if data is None:
                return _validation_error(_INVALID_BODY)
            try:
                payload = PhotoCreate.model_validate(data)
            except ValidationError as e:
                return _validation_error(error_details(e))

            photo = store.create(payload.model_dump())
            return jsonify(photo.to_dict()), 201
        except Exception:
            logger.exception("Failed to create photo")
            return jsonify({"message": "Failed to create photo"}), 500

    @app.route("/api/photos/<photo_id>", methods=["PATCH"])
    def update_photo(photo_id):
        """Update any subset of a photo's creatable fields."""
        try:
            data = _json_body()
            if data is None:
                return _validation_error(_INVALID_BODY)
            try:
                payload = PhotoUpdate.model_validate(data)
            except ValidationError as e:
                return _validation_error(error_details(e))

            photo = store.update(photo_id, payload.changes())
            if photo is None:
                return _not_found()
            return jsonify(photo.to_dict())
        except Exception:
            logger.exception("Failed to update photo %s", photo_id)
            return jsonify({"message": "Failed to update photo"}), 500

    @app.route("/api/photos/<photo_id>", methods=["DELETE"])
    def delete_photo(photo_id):
        """Delete a photo."""
        try:
            if not store.delete(photo_id):
                return _not_found()
            return "", 204
        except Exception:
            logger.exception("Failed to delete photo %s", photo_id)
            return jsonify({"message": "Failed to delete photo"}), 500

    @app.route("/api/gallery")
    def gallery():
        """
        Filtered gallery.

        Query params:
            type: pose type or "all"
            period: "7" | "30" | "90" | "all" (days back from today)
            search: case-insensitive text to find in notes
        """
        try:
            filters = GalleryFilter(
                type=request.args.get("type"),
                period=request.args.get("period"),
                search=request.args.get("search"),
            )
            return jsonify(build_gallery(store.list(), filters))
        except Exception:
            logger.exception("Failed to build gallery")
            return jsonify({"message": "Failed to fetch photos"}), 500

    @app.route("/api/compare")
    def compare_photos():
        """Compare a before and an after photo."""
        try:
            before_id = request.args.get("before")
            after_id = request.args.get("after")
            if not before_id or not after_id:
                errors = [
                    {"path": [name], "message": "Field required", "code": "missing"}
                    for name, value in (("before", before_id), ("after", after_id))
                    if not value
                ]
                return _validation_error(errors)

            before = store.get(before_id)
            after = store.get(after_id)
            if before is None or after is None:
                return _not_found()
            return jsonify(build_comparison(before, after))
        except Exception:
            logger.exception("Failed to compare photos")
            return jsonify({"message": "Failed to compare photos"}), 500

    @app.route("/api/timeline")
    def timeline():
        """Journey statistics and the newest-first timeline."""
        try:
            return jsonify(build_timeline(store.list()))
        except Exception:
            logger.exception("Failed to build timeline")
            return jsonify({"message": "Failed to fetch timeline"}), 500

    @app.route("/api/video", methods=["POST"])
    def create_video():
        """
        Render a slideshow of the stored photos.

        Request JSON:
            {
                "duration": <seconds per photo>,
                "transition": "fade" | "slide" | "none",
                "quality": "480p" | "720p" | "1080p",
                "includeStats": true,
                "includeMusic": false,
                "photoType": "all" | "<pose type>"
            }

        Response:
            video/mp4 attachment
        """
        try:
            data = {
                "duration": video_config.seconds_per_photo,
                "quality": video_config.default_quality,
                **(_json_body() or {}),
            }
            try:
                payload = VideoRequest.model_validate(data)
            except ValidationError as e:
                return _validation_error(error_details(e))

            if payload.duration > video_config.max_seconds_per_photo:
                return _validation_error([{
                    "path": ["duration"],
                    "message": f"Must be at most {video_config.max_seconds_per_photo} seconds",
                    "code": "less_than_equal",
                }])

            photos = [
                photo for photo in store.list()
                if payload.photo_type == "all" or photo.type.value == payload.photo_type
            ]
            if not photos:
                return jsonify({"message": "No photos found to generate the video"}), 400

            def log_progress(value):
                logger.debug("Video progress: %.0f%%", value)

            video = generate_video(photos, payload.to_settings(), video_config, log_progress)
            filename = video_filename(date.today())
            return Response(
                video.data,
                mimetype=video.mime_type,
                headers={
                    "Content-Disposition": f"attachment; filename={filename}",
                    "X-Video-Frames": str(video.frame_count),
                    "X-Video-Duration": f"{video.duration:.2f}",
                },
            )
        except ProgressTrackerError as e:
            logger.warning("Video generation failed: %s", e)
            return jsonify({"message": str(e)}), 422
        except Exception:
            logger.exception("Failed to generate video")
            return jsonify({"message": "Failed to generate video"}), 500

    @app.route("/health")
    def health():
        """Health check endpoint."""
        return jsonify({
            "status": "healthy",
            "photos": len(store),
        })
