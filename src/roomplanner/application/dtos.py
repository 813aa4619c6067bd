"""Data transfer objects for the application layer."""

from dataclasses import dataclass, field

from roomplanner.domain.entities import RoomLayout
from roomplanner.domain.value_objects import AnalysisSettings, Point2D, SpaceAnalysis


@dataclass
class AnalysisOutput:
    """Output of a layout analysis.

    Attributes:
        layout: The analyzed layout snapshot.
        settings: Algorithm selection used for the checks.
        analysis: Efficiency, accessibility score, warnings and suggestions.
        outlines: Furniture outline per furniture id, for display.
        swing_paths: Door swing region per door id, for display. The arc, or
            the closed sector when the door volume is sector.
    """

    layout: RoomLayout
    settings: AnalysisSettings
    analysis: SpaceAnalysis
    outlines: dict[str, list[Point2D]] = field(default_factory=dict)
    swing_paths: dict[str, list[Point2D]] = field(default_factory=dict)

    @property
    def has_warnings(self) -> bool:
        return len(self.analysis.warnings) > 0
