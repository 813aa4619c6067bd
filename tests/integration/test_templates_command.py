"""Integration tests for the templates CLI command group."""

import json

import pytest
from typer.testing import CliRunner

from roomplanner.cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestTemplatesList:
    """Tests for roomplanner templates list."""

    def test_list_all(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["templates", "list"])

        assert result.exit_code == 0
        for category in ("Living Room:", "Bedroom:", "Dining Room:", "Study:"):
            assert category in result.output
        assert "sofa-standard" in result.output
        assert "coffee-table-round" in result.output

    def test_list_category(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["templates", "list", "--category", "Study"])

        assert result.exit_code == 0
        assert "desk" in result.output
        assert "bookshelf" in result.output
        assert "Bedroom:" not in result.output

    def test_list_unknown_category(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["templates", "list", "--category", "Garage"])

        assert result.exit_code == 1
        assert "No templates in category: Garage" in result.output


class TestTemplatesShow:
    """Tests for roomplanner templates show."""

    def test_show(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["templates", "show", "wardrobe"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["id"] == "wardrobe"
        assert data["default_width"] == 100
        assert data["default_depth"] == 60

    def test_show_unknown(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["templates", "show", "hammock"])

        assert result.exit_code == 1
        assert "Furniture template not found: hammock" in result.output
        assert "Available templates:" in result.output


class TestTemplatesPlace:
    """Tests for roomplanner templates place."""

    def test_place_centered(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "templates",
                "place",
                "bed-double",
                "--length",
                "4.5",
                "--width",
                "3.5",
                "--id",
                "bed",
            ],
        )

        assert result.exit_code == 0
        entry = json.loads(result.output)
        assert entry["id"] == "bed"
        assert entry["name"] == "Double Bed"
        assert (entry["x"], entry["y"]) == (100, 125)
        assert (entry["width"], entry["depth"]) == (150, 200)
        assert entry["rotation"] == 0
        assert "custom_path" not in entry

    def test_place_at_position(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            [
                "templates",
                "place",
                "desk",
                "--length",
                "3",
                "--width",
                "3",
                "--x",
                "10",
                "--y",
                "15",
            ],
        )

        assert result.exit_code == 0
        entry = json.loads(result.output)
        assert (entry["x"], entry["y"]) == (10, 15)
        assert entry["id"].startswith("desk-")

    def test_place_invalid_room(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["templates", "place", "desk", "--length", "0", "--width", "3"],
        )

        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_place_unknown_template(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app,
            ["templates", "place", "hammock", "--length", "3", "--width", "3"],
        )

        assert result.exit_code == 1
