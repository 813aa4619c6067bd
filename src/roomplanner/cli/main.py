"""Typer CLI for room layout analysis."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from roomplanner.application import AnalyzeLayoutCommand
from roomplanner.application.config import (
    ConfigError,
    RoomLayoutConfiguration,
    config_to_layout,
    load_config,
)
from roomplanner.cli.commands import templates_app, validate_command
from roomplanner.cli.commands.validate import display_load_error
from roomplanner.domain.services import get_door_swing_path, get_furniture_corners
from roomplanner.domain.value_objects import DoorVolume, IntersectionMode
from roomplanner.infrastructure import (
    AnalysisReportFormatter,
    JsonExporter,
    PointListFormatter,
)


class OutputFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


app = typer.Typer(
    name="roomplanner",
    help="Analyze room layouts: door clearance, furniture collisions and space use.",
)

# Register validate command
app.command(name="validate")(validate_command)

# Register templates subcommand group
app.add_typer(templates_app, name="templates")


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """Room layout planner."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _load_or_exit(config_file: Path) -> RoomLayoutConfiguration:
    try:
        return load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


@app.command()
def analyze(
    config_file: Annotated[
        Path, typer.Argument(help="Path to the JSON layout file")
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format: text or json"),
    ] = OutputFormat.TEXT,
    intersection_mode: Annotated[
        IntersectionMode | None,
        typer.Option(
            "--intersection-mode",
            help="Collision test: vertex (legacy) or exact (area overlap)",
        ),
    ] = None,
    door_volume: Annotated[
        DoorVolume | None,
        typer.Option(
            "--door-volume",
            help="Door swing shape: arc (legacy) or sector (hinge + arc)",
        ),
    ] = None,
) -> None:
    """Analyze a room layout.

    Reports space efficiency, the accessibility score, door/furniture
    interference and furniture collisions. Options override the layout
    file's "analysis" section.

    Examples:
        roomplanner analyze bedroom.json
        roomplanner analyze bedroom.json --format json
        roomplanner analyze bedroom.json --intersection-mode exact --door-volume sector
    """
    config = _load_or_exit(config_file)

    output = AnalyzeLayoutCommand().execute_config(
        config,
        intersection_mode=intersection_mode,
        door_volume=door_volume,
    )

    if output_format == OutputFormat.JSON:
        typer.echo(JsonExporter().export(output))
    else:
        typer.echo(AnalysisReportFormatter().format(output))


@app.command()
def outline(
    config_file: Annotated[
        Path, typer.Argument(help="Path to the JSON layout file")
    ],
    furniture_id: Annotated[str, typer.Argument(help="Furniture id")],
) -> None:
    """Print the floor outline of a furniture item in room centimeters."""
    layout = config_to_layout(_load_or_exit(config_file))

    furniture = layout.find_furniture(furniture_id)
    if furniture is None:
        typer.echo(f"Error: Furniture not found: {furniture_id}", err=True)
        raise typer.Exit(code=1)

    title = f"{furniture.name} ({furniture.shape.value})"
    typer.echo(PointListFormatter().format(title, get_furniture_corners(furniture)))


@app.command(name="swing-path")
def swing_path(
    config_file: Annotated[
        Path, typer.Argument(help="Path to the JSON layout file")
    ],
    door_id: Annotated[str, typer.Argument(help="Door id")],
) -> None:
    """Print the swing arc of a door in room centimeters."""
    layout = config_to_layout(_load_or_exit(config_file))

    door = layout.find_door(door_id)
    if door is None:
        typer.echo(f"Error: Door not found: {door_id}", err=True)
        raise typer.Exit(code=1)

    title = f"Door {door.id} ({door.wall.value} wall, {door.swing_angle:g} degrees)"
    points = get_door_swing_path(door, layout.dimensions)
    typer.echo(PointListFormatter().format(title, points))


if __name__ == "__main__":
    app()
