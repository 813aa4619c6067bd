"""Domain layer - room layout geometry engine."""

from .entities import Door, Furniture, FurnitureTemplate, RoomLayout
from .services import (
    InterferenceService,
    SpaceAnalysisService,
    calculate_space_efficiency,
    check_door_furniture_interference,
    check_furniture_furniture_collision,
    get_door_swing_path,
    get_furniture_corners,
    is_point_in_polygon,
    polygons_intersect,
)
from .value_objects import (
    AnalysisSettings,
    DoorVolume,
    FurnitureShape,
    HingePosition,
    InterferenceWarning,
    IntersectionMode,
    Point2D,
    RoomDimensions,
    SpaceAnalysis,
    SwingDirection,
    Wall,
    WarningSeverity,
    WarningType,
)

__all__ = [
    "AnalysisSettings",
    "Door",
    "DoorVolume",
    "Furniture",
    "FurnitureShape",
    "FurnitureTemplate",
    "HingePosition",
    "InterferenceService",
    "InterferenceWarning",
    "IntersectionMode",
    "Point2D",
    "RoomDimensions",
    "RoomLayout",
    "SpaceAnalysis",
    "SpaceAnalysisService",
    "SwingDirection",
    "Wall",
    "WarningSeverity",
    "WarningType",
    "calculate_space_efficiency",
    "check_door_furniture_interference",
    "check_furniture_furniture_collision",
    "get_door_swing_path",
    "get_furniture_corners",
    "is_point_in_polygon",
    "polygons_intersect",
]
