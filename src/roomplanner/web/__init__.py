"""FastAPI REST API for room layout analysis.

This module provides a REST API for analyzing room layouts, validating
layout files, running individual geometry checks and browsing the
furniture template catalog.

Usage:
    uvicorn roomplanner.web:app --reload
"""

from roomplanner.web.app import app, create_app

__all__ = ["app", "create_app"]
