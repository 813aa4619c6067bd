"""Enumerations and analysis result value objects for room layouts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Wall(str, Enum):
    """Wall of the rectangular room a door is mounted on."""

    NORTH = "north"
    SOUTH = "south"
    EAST = "east"
    WEST = "west"


class SwingDirection(str, Enum):
    """Direction a door leaf opens relative to its start angle.

    Attributes:
        INWARD: Sweep clockwise (positive angle) from the start angle.
        OUTWARD: Sweep counter-clockwise (negative angle).
    """

    INWARD = "inward"
    OUTWARD = "outward"


class HingePosition(str, Enum):
    """Side of the door opening that carries the hinge."""

    LEFT = "left"
    RIGHT = "right"


class FurnitureShape(str, Enum):
    """Footprint shape of a furniture item."""

    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    L_SHAPE = "l-shape"
    CUSTOM = "custom"


class WarningType(str, Enum):
    """Kinds of physical interference found by a layout analysis."""

    DOOR_FURNITURE = "door-furniture"
    FURNITURE_FURNITURE = "furniture-furniture"


class WarningSeverity(str, Enum):
    """Severity of an interference warning."""

    WARNING = "warning"
    ERROR = "error"


class IntersectionMode(str, Enum):
    """Algorithm used to decide whether two outlines overlap.

    Attributes:
        VERTEX: Overlap when a vertex of either polygon lies inside the
            other. Misses edge-only crossings such as a plus sign formed by
            two thin rectangles.
        EXACT: Overlap when the true polygon intersection has positive area.
    """

    VERTEX = "vertex"
    EXACT = "exact"


class DoorVolume(str, Enum):
    """Region a door occupies for interference testing.

    Attributes:
        ARC: The sampled swing arc, closed by joining its last point back to
            its first (a circular segment).
        SECTOR: The swing arc plus both radii back to the hinge.
    """

    ARC = "arc"
    SECTOR = "sector"


@dataclass(frozen=True)
class AnalysisSettings:
    """Algorithm selection for interference and collision checks.

    The defaults reproduce the behavior of the browser planner.
    """

    intersection_mode: IntersectionMode = IntersectionMode.VERTEX
    door_volume: DoorVolume = DoorVolume.ARC


@dataclass(frozen=True)
class InterferenceWarning:
    """A single interference found during a layout analysis.

    Attributes:
        id: Stable identifier derived from the ids of the involved items.
        type: Door-furniture or furniture-furniture interference.
        message: Human-readable description.
        severity: WARNING for blocked doors, ERROR for overlapping furniture.
        furniture_ids: Ids of the furniture items involved.
        door_id: Id of the blocked door, for door-furniture warnings.
    """

    id: str
    type: WarningType
    message: str
    severity: WarningSeverity
    furniture_ids: tuple[str, ...]
    door_id: str | None = None


@dataclass(frozen=True)
class SpaceAnalysis:
    """Result of a full-scene layout analysis.

    Attributes:
        total_area: Room floor area in square meters.
        used_area: Summed furniture footprint in square meters.
        efficiency: Percentage of the floor covered, capped at 100.
        accessibility_score: 0-100 score penalized by interference.
        warnings: All interference warnings found.
        suggestions: Layout improvement hints.
    """

    total_area: float
    used_area: float
    efficiency: float
    accessibility_score: int
    warnings: tuple[InterferenceWarning, ...] = field(default_factory=tuple)
    suggestions: tuple[str, ...] = field(default_factory=tuple)

    @property
    def accessibility_rating(self) -> str:
        """Qualitative band of the accessibility score."""
        if self.accessibility_score >= 80:
            return "good"
        if self.accessibility_score >= 60:
            return "fair"
        return "poor"

    @property
    def door_warnings(self) -> tuple[InterferenceWarning, ...]:
        """Warnings for doors blocked by furniture."""
        return tuple(w for w in self.warnings if w.type == WarningType.DOOR_FURNITURE)

    @property
    def collision_warnings(self) -> tuple[InterferenceWarning, ...]:
        """Warnings for overlapping furniture."""
        return tuple(
            w for w in self.warnings if w.type == WarningType.FURNITURE_FURNITURE
        )
