"""Application commands (use cases) for room layout analysis."""

from __future__ import annotations

import logging
from dataclasses import replace

from roomplanner.application.config import (
    RoomLayoutConfiguration,
    config_to_layout,
    config_to_settings,
)
from roomplanner.domain.entities import RoomLayout
from roomplanner.domain.services import (
    SpaceAnalysisService,
    get_door_swing_path,
    get_door_swing_sector,
    get_furniture_corners,
)
from roomplanner.domain.value_objects import (
    AnalysisSettings,
    DoorVolume,
    IntersectionMode,
)

from .dtos import AnalysisOutput

logger = logging.getLogger(__name__)


class AnalyzeLayoutCommand:
    """Command to analyze a complete room layout.

    Runs the full-scene analysis (efficiency, interference, accessibility)
    and collects the derived geometry the planner displays.
    """

    def execute(
        self,
        layout: RoomLayout,
        settings: AnalysisSettings | None = None,
    ) -> AnalysisOutput:
        """Analyze a layout snapshot.

        Args:
            layout: The room layout.
            settings: Algorithm selection. Defaults to the legacy algorithms.

        Returns:
            AnalysisOutput with the analysis, outlines and swing paths. Swing
            paths are closed sectors when the door volume is ``SECTOR``.
        """
        settings = settings or AnalysisSettings()
        logger.info(
            f"Analyzing layout '{layout.name}' "
            f"(intersection={settings.intersection_mode.value}, "
            f"door_volume={settings.door_volume.value})"
        )

        analysis = SpaceAnalysisService(settings).analyze(layout)
        swing_region = (
            get_door_swing_sector
            if settings.door_volume == DoorVolume.SECTOR
            else get_door_swing_path
        )

        return AnalysisOutput(
            layout=layout,
            settings=settings,
            analysis=analysis,
            outlines={f.id: get_furniture_corners(f) for f in layout.furniture},
            swing_paths={
                d.id: swing_region(d, layout.dimensions) for d in layout.doors
            },
        )

    def execute_config(
        self,
        config: RoomLayoutConfiguration,
        intersection_mode: IntersectionMode | None = None,
        door_volume: DoorVolume | None = None,
    ) -> AnalysisOutput:
        """Analyze a loaded configuration.

        Explicit ``intersection_mode`` / ``door_volume`` values override the
        configuration's analysis section.
        """
        settings = config_to_settings(config)
        if intersection_mode is not None:
            settings = replace(settings, intersection_mode=intersection_mode)
        if door_volume is not None:
            settings = replace(settings, door_volume=door_volume)
        return self.execute(config_to_layout(config), settings)
