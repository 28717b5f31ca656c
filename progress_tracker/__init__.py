"""
Progress Photo Tracker Server
=============================

A Flask-based server for tracking body-transformation progress photos.

Modules:
    - analytics: Day and weight statistics
    - api: Flask API routes and endpoints
    - models: Photo record
    - storage: In-memory photo store
    - video: Slideshow frame synthesis and encoding
    - views: Gallery, comparison and timeline view models
    - utils: Utility functions and helpers
"""

__version__ = "1.0.0"
__author__ = "Progress Tracker Team"
