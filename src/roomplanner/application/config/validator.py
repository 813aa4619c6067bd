"""Validation structures and layout advisory checks.

Schema validation (types, ranges, unique ids) happens when a configuration
is loaded. This module adds checks that need room geometry: doors that do
not fit their wall, furniture placed outside the room, and custom shapes
without an outline.
"""

from dataclasses import dataclass, field
from typing import Any

from roomplanner.application.config.adapter import (
    config_to_dimensions,
    config_to_furniture,
)
from roomplanner.application.config.schema import RoomLayoutConfiguration
from roomplanner.domain.services import get_bounding_box, get_furniture_corners
from roomplanner.domain.services.door_swing import get_wall_length
from roomplanner.domain.value_objects import FurnitureShape

# Slack for floating point noise when comparing outlines to walls (cm)
BOUNDS_TOLERANCE = 1e-6


@dataclass
class ValidationError:
    """Represents a blocking validation error.

    Attributes:
        path: JSON path to the invalid field (e.g., "doors[0].width")
        message: Human-readable description of the error
        value: The invalid value that caused the error
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """Represents a non-blocking validation warning.

    Attributes:
        path: JSON path to the concerning field
        message: Human-readable description of the concern
        suggestion: Optional suggested remediation
    """

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Container for validation errors and warnings.

    Attributes:
        errors: List of blocking validation errors
        warnings: List of non-blocking validation warnings
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """Check if the configuration has no blocking errors."""
        return len(self.errors) == 0

    @property
    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    @property
    def exit_code(self) -> int:
        """Get the CLI exit code based on validation status.

        Returns:
            0 if valid with no warnings
            1 if there are errors
            2 if valid but has warnings
        """
        if self.errors:
            return 1
        if self.warnings:
            return 2
        return 0

    def add_error(
        self, path: str, message: str, value: Any = None
    ) -> "ValidationResult":
        """Add a validation error and return self for chaining."""
        self.errors.append(ValidationError(path=path, message=message, value=value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> "ValidationResult":
        """Add a validation warning and return self for chaining."""
        self.warnings.append(
            ValidationWarning(path=path, message=message, suggestion=suggestion)
        )
        return self

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another ValidationResult into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        return self


def check_doors(config: RoomLayoutConfiguration) -> ValidationResult:
    """Check that every door opening fits on its wall.

    A door wider than its wall is an error. A door whose opening runs past
    the end of the wall is a warning.
    """
    result = ValidationResult()
    dimensions = config_to_dimensions(config.dimensions)

    for i, door in enumerate(config.doors):
        wall_cm = get_wall_length(door.wall, dimensions) * 100
        if door.width > wall_cm:
            result.add_error(
                f"doors[{i}].width",
                f"Door '{door.id}' is wider than the {door.wall.value} wall "
                f"({wall_cm:.0f} cm)",
                door.width,
            )
            continue

        opening_end = door.position * wall_cm + door.width
        if opening_end > wall_cm + BOUNDS_TOLERANCE:
            max_position = (wall_cm - door.width) / wall_cm
            result.add_warning(
                f"doors[{i}].position",
                f"Door '{door.id}' extends {opening_end - wall_cm:.0f} cm past "
                f"the end of the {door.wall.value} wall",
                f"Set position to {max_position:.2f} or less",
            )

    return result


def check_furniture(config: RoomLayoutConfiguration) -> ValidationResult:
    """Check furniture outlines against the room walls and shape data."""
    result = ValidationResult()
    dimensions = config_to_dimensions(config.dimensions)

    for i, item in enumerate(config.furniture):
        if item.shape == FurnitureShape.CUSTOM and (
            not item.custom_path or len(item.custom_path) < 3
        ):
            result.add_warning(
                f"furniture[{i}].custom_path",
                f"Custom furniture '{item.id}' has no usable outline; "
                "it will be ignored by interference checks",
                "Provide at least 3 points in custom_path",
            )
            continue

        if item.shape != FurnitureShape.CUSTOM and item.custom_path:
            result.add_warning(
                f"furniture[{i}].custom_path",
                f"custom_path is ignored for {item.shape.value} furniture '{item.id}'",
            )

        corners = get_furniture_corners(config_to_furniture(item))
        box = get_bounding_box(corners)
        if (
            box.min_x < -BOUNDS_TOLERANCE
            or box.min_y < -BOUNDS_TOLERANCE
            or box.max_x > dimensions.width_cm + BOUNDS_TOLERANCE
            or box.max_y > dimensions.length_cm + BOUNDS_TOLERANCE
        ):
            result.add_warning(
                f"furniture[{i}]",
                f"Furniture '{item.id}' extends outside the room",
                "Move the item inside the walls or reduce its size",
            )

    return result


def validate_config(config: RoomLayoutConfiguration) -> ValidationResult:
    """Perform full validation of a loaded room layout.

    Args:
        config: A configuration that already passed schema validation.

    Returns:
        ValidationResult with door and furniture errors and warnings.
    """
    result = ValidationResult()
    result.merge(check_doors(config))
    result.merge(check_furniture(config))
    return result
