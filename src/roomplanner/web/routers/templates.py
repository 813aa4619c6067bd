"""Furniture template catalog endpoints."""

from fastapi import APIRouter

from roomplanner.application.templates import (
    get_template,
    list_categories,
    list_templates,
)
from roomplanner.infrastructure import template_to_dict
from roomplanner.web.schemas.responses import (
    CategoryListSchema,
    ErrorResponseSchema,
    TemplateListSchema,
    TemplateSchema,
)

router = APIRouter(prefix="/templates", tags=["templates"])


@router.get("", response_model=TemplateListSchema)
async def list_furniture_templates(
    category: str | None = None,
) -> TemplateListSchema:
    """List furniture templates in catalog order.

    Args:
        category: Optional category filter, e.g. "Bedroom".
    """
    templates = [
        TemplateSchema(**template_to_dict(t)) for t in list_templates(category)
    ]
    return TemplateListSchema(templates=templates)


@router.get("/categories", response_model=CategoryListSchema)
async def list_template_categories() -> CategoryListSchema:
    """List template categories in catalog order."""
    return CategoryListSchema(categories=list_categories())


@router.get(
    "/{template_id}",
    response_model=TemplateSchema,
    responses={404: {"model": ErrorResponseSchema}},
)
async def get_furniture_template(template_id: str) -> TemplateSchema:
    """Get a single furniture template.

    Raises:
        TemplateNotFoundError: If template does not exist (handled by exception handler).
    """
    return TemplateSchema(**template_to_dict(get_template(template_id)))
