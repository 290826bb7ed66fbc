"""Routes tool calls and flattens every outcome into a text response."""

from __future__ import annotations

import time
from typing import Any, Mapping, Optional

from .core.exceptions import ToolNotFoundError
from .core.logging import get_logger
from .protocol import CallRequest, CallResult, ToolFailure
from .registry import ToolRegistry

logger = get_logger(__name__)

class Dispatcher:
    """Dispatch call-by-name requests against a ToolRegistry.

    Business failures never escape as exceptions: unknown tools, invalid
    arguments, command failures and unexpected crashes all come back as a
    ``CallResult`` whose text starts with ``Error: ``.
    """

    def __init__(self, registry: ToolRegistry) -> None:
        if registry is None:
            raise ValueError("registry is required")
        self.registry = registry

    async def dispatch(
        self,
        tool_name: str,
        arguments: Optional[Mapping[str, Any]] = None,
    ) -> CallResult:
        started = time.perf_counter()
        try:
            tool = self.registry.resolve(tool_name)
        except ToolNotFoundError as exc:
            logger.warning("Requested MCP tool not found", tool=tool_name)
            return ToolFailure(message=str(exc), code="unknown_tool").to_call_result()

        try:
            outcome = await tool.invoke(arguments or {})
        except Exception as exc:
            logger.error(
                "Tool invocation crashed",
                tool=tool_name,
                error=str(exc),
                exc_info=True,
            )
            outcome = ToolFailure(
                message=str(exc) or "Unknown error occurred",
                code="internal_error",
            )

        logger.info(
            "Tool call finished",
            tool=tool_name,
            status=outcome.status,
            latency_ms=int((time.perf_counter() - started) * 1000),
        )
        return outcome.to_call_result()

    async def handle(self, request: CallRequest) -> CallResult:
        return await self.dispatch(request.tool_name, request.arguments)
