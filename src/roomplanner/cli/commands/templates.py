"""Templates commands for browsing the furniture template catalog.

This module provides the `templates` command group with subcommands for
listing templates, showing a single template, and placing a template into
a room as a ready-to-paste furniture entry.
"""

import json
from typing import Annotated

import typer

from roomplanner.application.config import furniture_to_config
from roomplanner.application.templates import (
    TemplateNotFoundError,
    create_furniture_from_template,
    get_template,
    list_categories,
    list_templates,
    room_center_position,
)
from roomplanner.domain.value_objects import Point2D, RoomDimensions
from roomplanner.infrastructure import template_to_dict

templates_app = typer.Typer(
    name="templates",
    help="Browse the furniture template catalog.",
)


def _get_template_or_exit(template_id: str):
    try:
        return get_template(template_id)
    except TemplateNotFoundError as e:
        available = ", ".join(t.id for t in list_templates())
        typer.echo(f"Error: {e}", err=True)
        typer.echo(f"Available templates: {available}", err=True)
        raise typer.Exit(code=1)


@templates_app.command(name="list")
def list_command(
    category: Annotated[
        str | None,
        typer.Option("--category", "-c", help="Only list templates in this category"),
    ] = None,
) -> None:
    """List furniture templates grouped by category.

    Examples:
        roomplanner templates list
        roomplanner templates list --category Bedroom
    """
    templates = list_templates(category)
    if not templates:
        typer.echo(f"No templates in category: {category}", err=True)
        typer.echo(f"Categories: {', '.join(list_categories())}", err=True)
        raise typer.Exit(code=1)

    max_id_width = max(len(t.id) for t in templates)

    for group in list_categories():
        members = [t for t in templates if t.category == group]
        if not members:
            continue
        typer.echo(f"{group}:")
        for template in members:
            typer.echo(
                f"  {template.id:<{max_id_width}}  {template.name} "
                f"({template.default_width:g} x {template.default_depth:g} cm, "
                f"{template.shape.value})"
            )
        typer.echo()

    typer.echo("Use 'roomplanner templates place <id>' to create a furniture entry.")


@templates_app.command(name="show")
def show_command(
    template_id: Annotated[str, typer.Argument(help="Template id")],
) -> None:
    """Show a single template as JSON.

    Example:
        roomplanner templates show bed-double
    """
    template = _get_template_or_exit(template_id)
    typer.echo(json.dumps(template_to_dict(template), indent=2, ensure_ascii=False))


@templates_app.command(name="place")
def place_command(
    template_id: Annotated[str, typer.Argument(help="Template id")],
    length: Annotated[
        float, typer.Option("--length", "-l", help="Room length in meters")
    ],
    width: Annotated[
        float, typer.Option("--width", "-w", help="Room width in meters")
    ],
    x: Annotated[
        float | None, typer.Option("--x", help="Left edge in centimeters")
    ] = None,
    y: Annotated[
        float | None, typer.Option("--y", help="Top edge in centimeters")
    ] = None,
    furniture_id: Annotated[
        str | None, typer.Option("--id", help="Furniture id (generated if omitted)")
    ] = None,
) -> None:
    """Print a furniture entry created from a template.

    The item is centered in the room unless --x/--y are given. The output
    can be pasted into the "furniture" list of a layout file.

    Examples:
        roomplanner templates place bed-double --length 4.5 --width 3.5
        roomplanner templates place desk --length 3 --width 3 --x 10 --y 10
    """
    template = _get_template_or_exit(template_id)

    try:
        dimensions = RoomDimensions(length=length, width=width, height=2.4)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    center = room_center_position(template, dimensions)
    position = Point2D(
        x if x is not None else center.x,
        y if y is not None else center.y,
    )
    furniture = create_furniture_from_template(template, position, furniture_id)
    entry = furniture_to_config(furniture).model_dump(mode="json", exclude_none=True)
    typer.echo(json.dumps(entry, indent=2, ensure_ascii=False))
