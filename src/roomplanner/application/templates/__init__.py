"""Furniture template catalog for seeding new furniture items."""

from roomplanner.application.templates.catalog import (
    FURNITURE_TEMPLATES,
    TemplateNotFoundError,
    create_default_door,
    create_furniture_from_template,
    get_template,
    list_categories,
    list_templates,
    room_center_position,
)

__all__ = [
    "FURNITURE_TEMPLATES",
    "TemplateNotFoundError",
    "create_default_door",
    "create_furniture_from_template",
    "get_template",
    "list_categories",
    "list_templates",
    "room_center_position",
]
