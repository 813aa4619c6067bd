"""Infrastructure layer - output formatting and export."""

from .formatters import (
    AnalysisReportFormatter,
    JsonExporter,
    PointListFormatter,
    analysis_to_dict,
    point_to_dict,
    template_to_dict,
    warning_to_dict,
)

__all__ = [
    "AnalysisReportFormatter",
    "JsonExporter",
    "PointListFormatter",
    "analysis_to_dict",
    "point_to_dict",
    "template_to_dict",
    "warning_to_dict",
]
