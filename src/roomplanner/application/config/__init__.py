"""Configuration schema and loading system for room layouts.

This package provides JSON-based loading and validation of room layouts.
It includes Pydantic models for schema validation, a loader with
comprehensive error handling, adapters to domain objects, and geometric
advisory checks.

Example:
    >>> from pathlib import Path
    >>> from roomplanner.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("bedroom.json"))
    ...     print(f"Room: {config.dimensions.length}m x {config.dimensions.width}m")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from roomplanner.application.config.adapter import (
    config_to_dimensions,
    config_to_door,
    config_to_furniture,
    config_to_layout,
    config_to_settings,
    furniture_to_config,
    layout_to_config,
)
from roomplanner.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from roomplanner.application.config.schema import (
    MAX_FURNITURE_SIZE,
    MIN_FURNITURE_SIZE,
    SUPPORTED_VERSIONS,
    AnalysisConfig,
    DoorConfig,
    FurnitureConfig,
    PointConfig,
    RoomDimensionsConfig,
    RoomLayoutConfiguration,
)
from roomplanner.application.config.validator import (
    ValidationError,
    ValidationResult,
    ValidationWarning,
    validate_config,
)

__all__ = [
    "AnalysisConfig",
    "ConfigError",
    "DoorConfig",
    "FurnitureConfig",
    "MAX_FURNITURE_SIZE",
    "MIN_FURNITURE_SIZE",
    "PointConfig",
    "RoomDimensionsConfig",
    "RoomLayoutConfiguration",
    "SUPPORTED_VERSIONS",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "config_to_dimensions",
    "config_to_door",
    "config_to_furniture",
    "config_to_layout",
    "config_to_settings",
    "furniture_to_config",
    "layout_to_config",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
