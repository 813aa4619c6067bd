"""Output formatters and exporters for layout analyses."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from roomplanner.application.dtos import AnalysisOutput
from roomplanner.domain.entities import FurnitureTemplate
from roomplanner.domain.value_objects import (
    InterferenceWarning,
    Point2D,
    SpaceAnalysis,
)


class AnalysisReportFormatter:
    """Formats a layout analysis as a plain-text report."""

    def format(self, output: AnalysisOutput) -> str:
        layout = output.layout
        analysis = output.analysis
        dims = layout.dimensions

        lines = [
            f"SPACE ANALYSIS: {layout.name}",
            "=" * 60,
            f"Room:            {dims.length:g}m x {dims.width:g}m "
            f"({analysis.total_area:.1f} m²)",
            f"Furniture:       {len(layout.furniture)} items",
            f"Doors:           {len(layout.doors)}",
            f"Used area:       {analysis.used_area:.2f} m²",
            f"Efficiency:      {round(analysis.efficiency)}%",
            f"Accessibility:   {analysis.accessibility_score} "
            f"({analysis.accessibility_rating})",
            "-" * 60,
        ]

        if analysis.warnings:
            lines.append("WARNINGS")
            for warning in analysis.warnings:
                lines.append(f"  [{warning.severity.value.upper()}] {warning.message}")
        else:
            lines.append("No interference detected.")

        if analysis.suggestions:
            lines.append("-" * 60)
            lines.append("SUGGESTIONS")
            for suggestion in analysis.suggestions:
                lines.append(f"  - {suggestion}")

        return "\n".join(lines)


class PointListFormatter:
    """Formats an outline or swing path as one point per line."""

    def __init__(self, precision: int = 2) -> None:
        self._precision = precision

    def format(self, title: str, points: Sequence[Point2D]) -> str:
        if not points:
            return f"{title}\n  (empty)"
        p = self._precision
        lines = [title]
        for i, point in enumerate(points):
            lines.append(f"  {i:>3}: ({point.x:.{p}f}, {point.y:.{p}f})")
        return "\n".join(lines)


def point_to_dict(point: Point2D) -> dict[str, float]:
    return {"x": point.x, "y": point.y}


def warning_to_dict(warning: InterferenceWarning) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": warning.id,
        "type": warning.type.value,
        "message": warning.message,
        "severity": warning.severity.value,
        "furniture_ids": list(warning.furniture_ids),
    }
    if warning.door_id is not None:
        data["door_id"] = warning.door_id
    return data


def analysis_to_dict(analysis: SpaceAnalysis) -> dict[str, Any]:
    return {
        "total_area": analysis.total_area,
        "used_area": analysis.used_area,
        "efficiency": analysis.efficiency,
        "accessibility_score": analysis.accessibility_score,
        "accessibility_rating": analysis.accessibility_rating,
        "warnings": [warning_to_dict(w) for w in analysis.warnings],
        "suggestions": list(analysis.suggestions),
    }


def template_to_dict(template: FurnitureTemplate) -> dict[str, Any]:
    return {
        "id": template.id,
        "name": template.name,
        "category": template.category,
        "type": template.type,
        "shape": template.shape.value,
        "default_width": template.default_width,
        "default_depth": template.default_depth,
        "default_height": template.default_height,
        "icon": template.icon,
        "color": template.color,
    }


class JsonExporter:
    """Exports a layout analysis and its derived geometry as JSON."""

    def __init__(self, indent: int | None = 2) -> None:
        self._indent = indent

    def to_dict(self, output: AnalysisOutput) -> dict[str, Any]:
        return {
            "name": output.layout.name,
            "settings": {
                "intersection_mode": output.settings.intersection_mode.value,
                "door_volume": output.settings.door_volume.value,
            },
            "analysis": analysis_to_dict(output.analysis),
            "outlines": {
                fid: [point_to_dict(p) for p in points]
                for fid, points in output.outlines.items()
            },
            "swing_paths": {
                did: [point_to_dict(p) for p in points]
                for did, points in output.swing_paths.items()
            },
        }

    def export(self, output: AnalysisOutput) -> str:
        return json.dumps(self.to_dict(output), indent=self._indent, ensure_ascii=False)
