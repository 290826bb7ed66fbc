"""In-memory catalog of the tools this server advertises."""

from __future__ import annotations

from typing import Dict, List

from .base import BaseTool
from .core.exceptions import ToolNotFoundError
from .core.logging import get_logger
from .protocol import ToolDescriptor

logger = get_logger(__name__)

class ToolRegistry:
    """Name-keyed registry of MCP tools, in registration order."""

    def __init__(self) -> None:
        self._tools: Dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> None:
        """Register a tool implementation."""
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool
        logger.debug("Registered MCP tool", tool=tool.name)

    def list_tools(self) -> List[ToolDescriptor]:
        """Return descriptors for discovery."""
        return [tool.descriptor() for tool in self._tools.values()]

    def resolve(self, tool_name: str) -> BaseTool:
        """Return a tool implementation or raise ToolNotFoundError."""
        tool = self._tools.get(tool_name)
        if tool is None:
            raise ToolNotFoundError(tool_name)
        return tool
