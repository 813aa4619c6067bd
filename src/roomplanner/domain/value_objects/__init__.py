"""Value objects for the room layout domain.

This module provides immutable data types used throughout the planner.
All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Core geometry
from ._core_geometry import (
    BoundingBox2D,
    Point2D,
    RoomDimensions,
)

# Layout enums and analysis results
from ._layout import (
    AnalysisSettings,
    DoorVolume,
    FurnitureShape,
    HingePosition,
    InterferenceWarning,
    IntersectionMode,
    SpaceAnalysis,
    SwingDirection,
    Wall,
    WarningSeverity,
    WarningType,
)

__all__ = [
    "AnalysisSettings",
    "BoundingBox2D",
    "DoorVolume",
    "FurnitureShape",
    "HingePosition",
    "InterferenceWarning",
    "IntersectionMode",
    "Point2D",
    "RoomDimensions",
    "SpaceAnalysis",
    "SwingDirection",
    "Wall",
    "WarningSeverity",
    "WarningType",
]
