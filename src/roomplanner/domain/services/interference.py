"""Door-furniture interference and furniture-furniture collision detection.

This module provides the pairwise checks used by the planner and a service
that runs them over a whole room to produce interference warnings:
- A door interferes with furniture when a furniture outline point lies
  inside the region swept by the door leaf
- Two furniture items collide when their outlines overlap
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..entities import Door, Furniture, RoomLayout
from ..value_objects import (
    AnalysisSettings,
    DoorVolume,
    InterferenceWarning,
    IntersectionMode,
    RoomDimensions,
    WarningSeverity,
    WarningType,
)
from .door_swing import get_door_swing_path, get_door_swing_sector
from .geometry import (
    bounding_boxes_intersect,
    get_bounding_box,
    is_point_in_polygon,
    polygons_intersect,
)
from .outline import get_furniture_corners

logger = logging.getLogger(__name__)

__all__ = [
    "DOOR_INTERFERENCE_PENALTY",
    "FURNITURE_COLLISION_PENALTY",
    "InterferenceService",
    "calculate_accessibility_score",
    "check_door_furniture_interference",
    "check_furniture_furniture_collision",
]

# Accessibility score deductions per warning
DOOR_INTERFERENCE_PENALTY = 20
FURNITURE_COLLISION_PENALTY = 10


def check_door_furniture_interference(
    door: Door,
    furniture: Furniture,
    dimensions: RoomDimensions,
    door_volume: DoorVolume = DoorVolume.ARC,
) -> bool:
    """Check if a furniture item blocks a door's swing.

    Args:
        door: The door.
        furniture: The furniture item.
        dimensions: Room dimensions in meters.
        door_volume: Region treated as occupied by the door. ARC closes the
            sampled arc with a chord; SECTOR includes the hinge.

    Returns:
        True if any furniture outline point lies inside the swing region.
    """
    if door_volume == DoorVolume.SECTOR:
        swing_region = get_door_swing_sector(door, dimensions)
    else:
        swing_region = get_door_swing_path(door, dimensions)

    return any(
        is_point_in_polygon(corner, swing_region)
        for corner in get_furniture_corners(furniture)
    )


def check_furniture_furniture_collision(
    furniture1: Furniture,
    furniture2: Furniture,
    mode: IntersectionMode = IntersectionMode.VERTEX,
) -> bool:
    """Check if two furniture outlines overlap.

    Bounding boxes are compared first; the polygon test only runs when they
    overlap. The check is symmetric in its two arguments.

    Args:
        furniture1: First furniture item.
        furniture2: Second furniture item.
        mode: Polygon intersection algorithm.

    Returns:
        True if the outlines overlap. False if either outline is empty.
    """
    corners1 = get_furniture_corners(furniture1)
    corners2 = get_furniture_corners(furniture2)

    if not corners1 or not corners2:
        return False

    if not bounding_boxes_intersect(
        get_bounding_box(corners1), get_bounding_box(corners2)
    ):
        return False

    return polygons_intersect(corners1, corners2, mode)


def calculate_accessibility_score(warnings: Iterable[InterferenceWarning]) -> int:
    """Score circulation quality from the interference warnings.

    Starts at 100, deducts 20 per blocked door and 10 per furniture
    collision, floored at 0.
    """
    score = 100
    for warning in warnings:
        if warning.type == WarningType.DOOR_FURNITURE:
            score -= DOOR_INTERFERENCE_PENALTY
        elif warning.type == WarningType.FURNITURE_FURNITURE:
            score -= FURNITURE_COLLISION_PENALTY
    return max(0, score)


class InterferenceService:
    """Runs interference and collision checks over a whole room.

    Warnings are recomputed from scratch on each call; the service keeps no
    state between calls besides its settings.

    Attributes:
        settings: Algorithm selection for the checks.
    """

    def __init__(self, settings: AnalysisSettings | None = None) -> None:
        self.settings = settings or AnalysisSettings()

    def find_warnings(self, layout: RoomLayout) -> list[InterferenceWarning]:
        """Find every door-furniture and furniture-furniture interference.

        Door warnings come first, in door then furniture order, followed by
        collision warnings for each unordered furniture pair.
        """
        warnings = self.find_door_warnings(layout) + self.find_collision_warnings(
            layout
        )
        logger.debug(
            f"Layout '{layout.name}': {len(layout.doors)} doors, "
            f"{len(layout.furniture)} furniture items, {len(warnings)} warnings"
        )
        return warnings

    def find_door_warnings(self, layout: RoomLayout) -> list[InterferenceWarning]:
        warnings = []
        for door in layout.doors:
            for furniture in layout.furniture:
                if check_door_furniture_interference(
                    door, furniture, layout.dimensions, self.settings.door_volume
                ):
                    warnings.append(
                        InterferenceWarning(
                            id=f"door-{door.id}-furniture-{furniture.id}",
                            type=WarningType.DOOR_FURNITURE,
                            message=f"{furniture.name} blocks the swing of door {door.id}",
                            severity=WarningSeverity.WARNING,
                            furniture_ids=(furniture.id,),
                            door_id=door.id,
                        )
                    )
        return warnings

    def find_collision_warnings(self, layout: RoomLayout) -> list[InterferenceWarning]:
        warnings = []
        items = layout.furniture
        for i, first in enumerate(items):
            for second in items[i + 1 :]:
                if check_furniture_furniture_collision(
                    first, second, self.settings.intersection_mode
                ):
                    warnings.append(
                        InterferenceWarning(
                            id=f"furniture-{first.id}-{second.id}",
                            type=WarningType.FURNITURE_FURNITURE,
                            message=f"{first.name} and {second.name} overlap",
                            severity=WarningSeverity.ERROR,
                            furniture_ids=(first.id, second.id),
                        )
                    )
        return warnings
