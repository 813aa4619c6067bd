"""Unit tests for the layout validator and its advisories."""

from pathlib import Path

from roomplanner.application.config import (
    ValidationResult,
    load_config,
    load_config_from_dict,
    validate_config,
)

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


def _config(**overrides):
    data = {"dimensions": {"length": 4.5, "width": 3.5}}
    data.update(overrides)
    return load_config_from_dict(data)


class TestValidationResult:
    """Tests for ValidationResult bookkeeping."""

    def test_clean(self) -> None:
        result = ValidationResult()
        assert result.is_valid
        assert not result.has_warnings
        assert result.exit_code == 0

    def test_warnings_only(self) -> None:
        result = ValidationResult().add_warning("doors[0]", "close to the corner")
        assert result.is_valid
        assert result.has_warnings
        assert result.exit_code == 2

    def test_errors_win(self) -> None:
        result = ValidationResult().add_warning("a", "w").add_error("b", "e", 3)
        assert not result.is_valid
        assert result.exit_code == 1
        assert result.errors[0].value == 3

    def test_merge(self) -> None:
        first = ValidationResult().add_warning("a", "w")
        second = ValidationResult().add_error("b", "e")
        merged = first.merge(second)
        assert merged is first
        assert len(merged.warnings) == 1
        assert len(merged.errors) == 1


class TestDoorChecks:
    """Tests for door placement advisories."""

    def test_door_fits(self) -> None:
        result = validate_config(_config(doors=[{"id": "d", "position": 0.5}]))
        assert result.exit_code == 0

    def test_door_past_wall_end(self) -> None:
        result = validate_config(
            _config(doors=[{"id": "d", "wall": "east", "position": 0.9}])
        )

        assert result.is_valid
        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.path == "doors[0].position"
        assert "35 cm" in warning.message
        assert warning.suggestion == "Set position to 0.82 or less"

    def test_door_wider_than_wall(self) -> None:
        result = validate_config(load_config(FIXTURES_PATH / "door_too_wide.json"))

        assert not result.is_valid
        assert result.errors[0].path == "doors[0].width"
        assert result.errors[0].value == 150
        assert result.warnings == []


class TestFurnitureChecks:
    """Tests for furniture advisories."""

    def test_furniture_inside(self) -> None:
        result = validate_config(
            _config(furniture=[{"id": "f", "name": "F", "width": 350, "depth": 400}])
        )
        assert result.exit_code == 0

    def test_furniture_outside(self) -> None:
        result = validate_config(
            _config(
                furniture=[
                    {"id": "f", "name": "F", "width": 100, "depth": 50, "x": 300}
                ]
            )
        )
        assert result.warnings[0].path == "furniture[0]"
        assert "outside the room" in result.warnings[0].message

    def test_rotation_can_push_furniture_outside(self) -> None:
        """A 300x40 bar at the north wall sticks out when turned 90 degrees."""
        result = validate_config(
            _config(
                furniture=[
                    {
                        "id": "bar",
                        "name": "Bar",
                        "width": 300,
                        "depth": 40,
                        "x": 20,
                        "y": 0,
                        "rotation": 90,
                    }
                ]
            )
        )
        assert [w.path for w in result.warnings] == ["furniture[0]"]

    def test_custom_without_path(self) -> None:
        result = validate_config(
            _config(
                furniture=[
                    {"id": "rug", "name": "Rug", "shape": "custom", "width": 50, "depth": 50}
                ]
            )
        )
        assert len(result.warnings) == 1
        assert result.warnings[0].path == "furniture[0].custom_path"
        assert result.warnings[0].suggestion is not None

    def test_custom_path_on_rectangle(self) -> None:
        result = validate_config(
            _config(
                furniture=[
                    {
                        "id": "box",
                        "name": "Box",
                        "width": 50,
                        "depth": 50,
                        "custom_path": [{"x": 0, "y": 0}, {"x": 1, "y": 0}, {"x": 0, "y": 1}],
                    }
                ]
            )
        )
        assert [w.path for w in result.warnings] == ["furniture[0].custom_path"]
        assert "ignored" in result.warnings[0].message


class TestFixtures:
    """Validator results for the bundled fixture layouts."""

    def test_valid_full_is_clean(self) -> None:
        result = validate_config(load_config(FIXTURES_PATH / "valid_full.json"))
        assert result.exit_code == 0

    def test_camel_case_is_clean(self) -> None:
        result = validate_config(load_config(FIXTURES_PATH / "camel_case.json"))
        assert result.exit_code == 0

    def test_valid_with_warnings(self) -> None:
        result = validate_config(load_config(FIXTURES_PATH / "valid_with_warnings.json"))

        assert result.exit_code == 2
        assert [w.path for w in result.warnings] == [
            "doors[1].position",
            "furniture[2]",
        ]
