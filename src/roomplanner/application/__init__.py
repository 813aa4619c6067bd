"""Application layer - use cases and orchestration."""

from .commands import AnalyzeLayoutCommand
from .dtos import AnalysisOutput

__all__ = [
    "AnalysisOutput",
    "AnalyzeLayoutCommand",
]
