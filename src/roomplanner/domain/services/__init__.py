"""Domain services for the room layout engine.

This package provides the pure geometry engine:
- Angle, point and polygon primitives
- Furniture outline generation per shape
- Door placement and swing arcs
- Interference and collision checks
- Space efficiency and full-room analysis
"""

from .door_swing import (
    get_door_anchor,
    get_door_swing_path,
    get_door_swing_sector,
    get_hinge_point,
    get_swing_angles,
    get_wall_angle,
    get_wall_length,
    position_from_center_offset,
    position_from_distance,
)
from .geometry import (
    bounding_boxes_intersect,
    degrees_to_radians,
    get_bounding_box,
    is_point_in_polygon,
    polygons_intersect,
    radians_to_degrees,
    rotate_point,
)
from .interference import (
    InterferenceService,
    calculate_accessibility_score,
    check_door_furniture_interference,
    check_furniture_furniture_collision,
)
from .outline import get_furniture_corners
from .space_analysis import (
    SpaceAnalysisService,
    calculate_space_efficiency,
    calculate_used_area,
)

__all__ = [
    "InterferenceService",
    "SpaceAnalysisService",
    "bounding_boxes_intersect",
    "calculate_accessibility_score",
    "calculate_space_efficiency",
    "calculate_used_area",
    "check_door_furniture_interference",
    "check_furniture_furniture_collision",
    "degrees_to_radians",
    "get_bounding_box",
    "get_door_anchor",
    "get_door_swing_path",
    "get_door_swing_sector",
    "get_furniture_corners",
    "get_hinge_point",
    "get_swing_angles",
    "get_wall_angle",
    "get_wall_length",
    "is_point_in_polygon",
    "polygons_intersect",
    "position_from_center_offset",
    "position_from_distance",
    "radians_to_degrees",
    "rotate_point",
]
