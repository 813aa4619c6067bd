"""Single-shot geometry endpoints used by the interactive planner."""

from fastapi import APIRouter

from roomplanner.application.config import (
    config_to_dimensions,
    config_to_door,
    config_to_furniture,
)
from roomplanner.domain.services import (
    calculate_space_efficiency,
    calculate_used_area,
    check_furniture_furniture_collision,
    get_door_swing_path,
    get_door_swing_sector,
    get_furniture_corners,
)
from roomplanner.domain.value_objects import DoorVolume
from roomplanner.infrastructure import point_to_dict
from roomplanner.web.schemas.requests import (
    CollisionRequest,
    EfficiencyRequest,
    OutlineRequest,
    SwingPathRequest,
)
from roomplanner.web.schemas.responses import (
    CollisionResultSchema,
    EfficiencyResultSchema,
    PointListSchema,
)

router = APIRouter(prefix="/geometry", tags=["geometry"])


@router.post("/outline", response_model=PointListSchema)
async def furniture_outline(request: OutlineRequest) -> PointListSchema:
    """Floor outline of a furniture item in room centimeters."""
    corners = get_furniture_corners(config_to_furniture(request.furniture))
    return PointListSchema(points=[point_to_dict(p) for p in corners])


@router.post("/swing-path", response_model=PointListSchema)
async def door_swing_path(request: SwingPathRequest) -> PointListSchema:
    """Swing arc of a door, or the closed sector when door_volume is sector."""
    door = config_to_door(request.door)
    dimensions = config_to_dimensions(request.dimensions)
    if request.door_volume == DoorVolume.SECTOR:
        points = get_door_swing_sector(door, dimensions)
    else:
        points = get_door_swing_path(door, dimensions)
    return PointListSchema(points=[point_to_dict(p) for p in points])


@router.post("/collision", response_model=CollisionResultSchema)
async def furniture_collision(request: CollisionRequest) -> CollisionResultSchema:
    """Check whether two furniture items overlap."""
    collides = check_furniture_furniture_collision(
        config_to_furniture(request.first),
        config_to_furniture(request.second),
        request.intersection_mode,
    )
    return CollisionResultSchema(
        collides=collides,
        intersection_mode=request.intersection_mode.value,
    )


@router.post("/efficiency", response_model=EfficiencyResultSchema)
async def space_efficiency(request: EfficiencyRequest) -> EfficiencyResultSchema:
    """Percentage of the floor covered by furniture footprints."""
    dimensions = config_to_dimensions(request.dimensions)
    furniture = [config_to_furniture(f) for f in request.furniture]
    return EfficiencyResultSchema(
        total_area=dimensions.floor_area,
        used_area=calculate_used_area(furniture),
        efficiency=calculate_space_efficiency(furniture, dimensions),
    )
