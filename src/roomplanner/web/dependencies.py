"""FastAPI dependency injection for layout services."""

from typing import Annotated

from fastapi import Depends

from roomplanner.application.commands import AnalyzeLayoutCommand


def get_analyze_command() -> AnalyzeLayoutCommand:
    """Dependency for AnalyzeLayoutCommand."""
    return AnalyzeLayoutCommand()


# Type aliases for cleaner endpoint signatures
AnalyzeCommandDep = Annotated[AnalyzeLayoutCommand, Depends(get_analyze_command)]
