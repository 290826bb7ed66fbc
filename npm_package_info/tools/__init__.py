"""Built-in MCP tools."""

from __future__ import annotations

from typing import Optional

from ..core.config import Settings, get_settings
from ..registry import ToolRegistry
from ..runner import CommandRunner
from .search_packages import SearchPackagesInput, SearchPackagesTool
from .view_package import ViewPackageInput, ViewPackageTool

__all__ = [
    "SearchPackagesInput",
    "SearchPackagesTool",
    "ViewPackageInput",
    "ViewPackageTool",
    "build_registry",
]


def build_registry(
    runner: Optional[CommandRunner] = None,
    settings: Optional[Settings] = None,
) -> ToolRegistry:
    """Create the registry holding the two npm tools."""
    settings = settings or get_settings()
    runner = runner or CommandRunner()

    registry = ToolRegistry()
    registry.register(ViewPackageTool(runner, npm_command=settings.npm_command))
    registry.register(
        SearchPackagesTool(
            runner,
            npm_command=settings.npm_command,
            default_limit=settings.default_search_limit,
        )
    )
    return registry
