"""Unit tests for the AnalyzeLayoutCommand use case."""

from pathlib import Path

import pytest

from roomplanner.application import AnalysisOutput, AnalyzeLayoutCommand
from roomplanner.application.config import load_config
from roomplanner.domain.services import get_door_swing_path, get_hinge_point
from roomplanner.domain.value_objects import (
    AnalysisSettings,
    DoorVolume,
    IntersectionMode,
)

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


class TestAnalyzeLayoutCommand:
    """Tests for AnalyzeLayoutCommand."""

    def test_execute_collects_geometry(self, crowded_layout) -> None:
        output = AnalyzeLayoutCommand().execute(crowded_layout)

        assert isinstance(output, AnalysisOutput)
        assert output.settings == AnalysisSettings()
        assert set(output.outlines) == {"armchair", "table", "bed"}
        assert all(len(points) == 4 for points in output.outlines.values())
        assert list(output.swing_paths) == ["door-1"]
        assert len(output.swing_paths["door-1"]) == 19
        assert output.has_warnings

    def test_sector_volume_reports_closed_swing_region(self, crowded_layout) -> None:
        settings = AnalysisSettings(door_volume=DoorVolume.SECTOR)
        output = AnalyzeLayoutCommand().execute(crowded_layout, settings)

        door = crowded_layout.doors[0]
        sector = output.swing_paths[door.id]
        assert len(sector) == 20
        assert sector[0] == get_hinge_point(door, crowded_layout.dimensions)
        assert sector[1:] == get_door_swing_path(door, crowded_layout.dimensions)

    def test_execute_empty_layout(self, empty_layout) -> None:
        output = AnalyzeLayoutCommand().execute(empty_layout)

        assert output.outlines == {}
        assert output.swing_paths == {}
        assert not output.has_warnings
        assert output.analysis.accessibility_score == 100

    def test_execute_config_uses_file_settings(self) -> None:
        config = load_config(FIXTURES_PATH / "plus_cross.json")
        config = config.model_copy(
            update={
                "analysis": config.analysis.model_copy(
                    update={"intersection_mode": IntersectionMode.EXACT}
                )
            }
        )

        output = AnalyzeLayoutCommand().execute_config(config)

        assert output.settings.intersection_mode == IntersectionMode.EXACT
        assert [w.id for w in output.analysis.warnings] == ["furniture-bench-a-bench-b"]

    def test_execute_config_overrides(self) -> None:
        config = load_config(FIXTURES_PATH / "plus_cross.json")
        command = AnalyzeLayoutCommand()

        legacy = command.execute_config(config)
        exact = command.execute_config(
            config,
            intersection_mode=IntersectionMode.EXACT,
            door_volume=DoorVolume.SECTOR,
        )

        assert legacy.analysis.warnings == ()
        assert exact.settings == AnalysisSettings(
            intersection_mode=IntersectionMode.EXACT, door_volume=DoorVolume.SECTOR
        )
        assert exact.analysis.accessibility_score == 90

    def test_valid_with_warnings_fixture(self) -> None:
        config = load_config(FIXTURES_PATH / "valid_with_warnings.json")
        output = AnalyzeLayoutCommand().execute_config(config)
        analysis = output.analysis

        assert [w.id for w in analysis.warnings] == [
            "door-door-1-furniture-armchair",
            "furniture-armchair-table",
        ]
        assert analysis.accessibility_score == 70
        assert analysis.used_area == pytest.approx(3.44)

    def test_logs_analysis(self, crowded_layout, caplog) -> None:
        with caplog.at_level("INFO", logger="roomplanner.application.commands"):
            AnalyzeLayoutCommand().execute(crowded_layout)
        assert "Analyzing layout 'Crowded'" in caplog.text
