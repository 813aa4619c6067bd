"""Conversion between configuration models and domain objects."""

from roomplanner.application.config.schema import (
    AnalysisConfig,
    DoorConfig,
    FurnitureConfig,
    PointConfig,
    RoomDimensionsConfig,
    RoomLayoutConfiguration,
)
from roomplanner.domain.entities import Door, Furniture, RoomLayout
from roomplanner.domain.value_objects import AnalysisSettings, Point2D, RoomDimensions


def config_to_dimensions(config: RoomDimensionsConfig) -> RoomDimensions:
    return RoomDimensions(length=config.length, width=config.width, height=config.height)


def config_to_door(config: DoorConfig) -> Door:
    return Door(
        id=config.id,
        width=config.width,
        height=config.height,
        wall=config.wall,
        position=config.position,
        swing_direction=config.swing_direction,
        swing_angle=config.swing_angle,
        hinge_position=config.hinge_position,
    )


def config_to_furniture(config: FurnitureConfig) -> Furniture:
    custom_path = None
    if config.custom_path is not None:
        custom_path = tuple(Point2D(p.x, p.y) for p in config.custom_path)

    return Furniture(
        id=config.id,
        name=config.name,
        type=config.type,
        shape=config.shape,
        width=config.width,
        depth=config.depth,
        height=config.height,
        x=config.x,
        y=config.y,
        rotation=config.rotation,
        custom_path=custom_path,
        color=config.color,
    )


def config_to_layout(config: RoomLayoutConfiguration) -> RoomLayout:
    """Convert a validated configuration into a RoomLayout snapshot."""
    return RoomLayout(
        id=config.id,
        name=config.name,
        dimensions=config_to_dimensions(config.dimensions),
        doors=tuple(config_to_door(d) for d in config.doors),
        furniture=tuple(config_to_furniture(f) for f in config.furniture),
    )


def config_to_settings(config: RoomLayoutConfiguration) -> AnalysisSettings:
    return AnalysisSettings(
        intersection_mode=config.analysis.intersection_mode,
        door_volume=config.analysis.door_volume,
    )


def furniture_to_config(furniture: Furniture) -> FurnitureConfig:
    custom_path = None
    if furniture.custom_path is not None:
        custom_path = [PointConfig(x=p.x, y=p.y) for p in furniture.custom_path]

    return FurnitureConfig(
        id=furniture.id,
        name=furniture.name,
        type=furniture.type,
        shape=furniture.shape,
        width=furniture.width,
        depth=furniture.depth,
        height=furniture.height,
        x=furniture.x,
        y=furniture.y,
        rotation=furniture.rotation,
        custom_path=custom_path,
        color=furniture.color,
    )


def layout_to_config(
    layout: RoomLayout, settings: AnalysisSettings | None = None
) -> RoomLayoutConfiguration:
    """Convert a RoomLayout back into a configuration model.

    Raises:
        pydantic.ValidationError: If the layout falls outside the ranges
            accepted by configuration files (e.g. furniture under 20 cm).
    """
    settings = settings or AnalysisSettings()
    dims = layout.dimensions
    return RoomLayoutConfiguration(
        schema_version="1.1",
        id=layout.id,
        name=layout.name,
        dimensions=RoomDimensionsConfig(
            length=dims.length, width=dims.width, height=dims.height
        ),
        doors=[
            DoorConfig(
                id=d.id,
                width=d.width,
                height=d.height,
                wall=d.wall,
                position=d.position,
                swing_direction=d.swing_direction,
                swing_angle=d.swing_angle,
                hinge_position=d.hinge_position,
            )
            for d in layout.doors
        ],
        furniture=[furniture_to_config(f) for f in layout.furniture],
        analysis=AnalysisConfig(
            intersection_mode=settings.intersection_mode,
            door_volume=settings.door_volume,
        ),
    )
