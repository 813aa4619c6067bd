"""Space utilization analysis for room layouts.

This module provides the space efficiency metric and a service that
combines it with the interference checks into a full room analysis,
including layout suggestions.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..entities import Furniture, RoomLayout
from ..value_objects import AnalysisSettings, RoomDimensions, SpaceAnalysis
from .interference import InterferenceService, calculate_accessibility_score

logger = logging.getLogger(__name__)

__all__ = [
    "HIGH_EFFICIENCY_THRESHOLD",
    "LOW_EFFICIENCY_THRESHOLD",
    "SpaceAnalysisService",
    "calculate_space_efficiency",
    "calculate_used_area",
]

# Efficiency bands (percent) that trigger layout suggestions
LOW_EFFICIENCY_THRESHOLD = 60.0
HIGH_EFFICIENCY_THRESHOLD = 85.0

SUGGESTION_LOW_EFFICIENCY = "Space utilization is low. Try placing more furniture."
SUGGESTION_HIGH_EFFICIENCY = (
    "The room is overcrowded. Remove or rearrange some furniture "
    "to keep walkways clear."
)
SUGGESTION_RESOLVE_WARNINGS = "Adjust the furniture placement to resolve interference."
SUGGESTION_EMPTY_ROOM = "Add furniture to furnish the room."


def calculate_used_area(furniture: Iterable[Furniture]) -> float:
    """Summed nominal footprint in square meters.

    Rotation and overlap are ignored, so overlapping items count twice.
    """
    return sum(item.footprint_area for item in furniture)


def calculate_space_efficiency(
    furniture: Iterable[Furniture], dimensions: RoomDimensions
) -> float:
    """Percentage of the room floor covered by furniture footprints.

    Args:
        furniture: Furniture items in the room.
        dimensions: Room dimensions in meters.

    Returns:
        Efficiency in [0, 100]. Returns 0 for a room without floor area.
    """
    room_area = dimensions.length * dimensions.width
    if room_area <= 0:
        return 0.0
    return min(100.0, calculate_used_area(furniture) / room_area * 100)


class SpaceAnalysisService:
    """Produces a complete SpaceAnalysis for a room layout.

    Example:
        service = SpaceAnalysisService()
        analysis = service.analyze(layout)
        print(f"{analysis.efficiency:.0f}% used, score {analysis.accessibility_score}")
    """

    def __init__(
        self,
        settings: AnalysisSettings | None = None,
        interference_service: InterferenceService | None = None,
    ) -> None:
        self.settings = settings or AnalysisSettings()
        self.interference_service = interference_service or InterferenceService(
            self.settings
        )

    def analyze(self, layout: RoomLayout) -> SpaceAnalysis:
        """Analyze space usage and interference for a layout snapshot.

        Args:
            layout: The room layout.

        Returns:
            SpaceAnalysis with efficiency, accessibility score, warnings and
            suggestions.
        """
        efficiency = calculate_space_efficiency(layout.furniture, layout.dimensions)
        warnings = self.interference_service.find_warnings(layout)
        score = calculate_accessibility_score(warnings)

        suggestions = []
        if efficiency < LOW_EFFICIENCY_THRESHOLD:
            suggestions.append(SUGGESTION_LOW_EFFICIENCY)
        elif efficiency > HIGH_EFFICIENCY_THRESHOLD:
            suggestions.append(SUGGESTION_HIGH_EFFICIENCY)
        if warnings:
            suggestions.append(SUGGESTION_RESOLVE_WARNINGS)
        if not layout.furniture:
            suggestions.append(SUGGESTION_EMPTY_ROOM)

        logger.debug(
            f"Analyzed '{layout.name}': efficiency {efficiency:.1f}%, "
            f"accessibility {score}"
        )

        return SpaceAnalysis(
            total_area=layout.dimensions.floor_area,
            used_area=calculate_used_area(layout.furniture),
            efficiency=efficiency,
            accessibility_score=score,
            warnings=tuple(warnings),
            suggestions=tuple(suggestions),
        )
