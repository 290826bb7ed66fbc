"""Exceptions raised while handling tool calls.

Every error a handler can produce derives from ``ToolExecutionError`` so the
dispatcher can turn it into an ``Error: <message>`` text response.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ToolExecutionError(RuntimeError):
    """Raised when a tool fails to produce a result."""

    code = "tool_error"

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        if code is not None:
            self.code = code
        self.details = details or {}


class ToolArgumentError(ToolExecutionError):
    """Raised when call arguments fail validation."""

    code = "invalid_arguments"


class CommandExecutionError(ToolExecutionError):
    """Raised when the external command cannot be started."""

    code = "command_error"


class RegistryCommandError(ToolExecutionError):
    """Raised when the registry tool reports a failure."""

    code = "registry_error"


class PackageNotFoundError(RegistryCommandError):
    """Raised when the registry has no package with the requested name."""

    code = "package_not_found"

    def __init__(self, package_name: str) -> None:
        super().__init__(
            f'Package "{package_name}" not found in NPM registry',
            details={"package_name": package_name},
        )
        self.package_name = package_name


class OutputParseError(ToolExecutionError):
    """Raised when structured output from the registry tool cannot be parsed."""

    code = "parse_error"


class ToolNotFoundError(LookupError):
    """Raised when the requested tool is not registered."""

    def __init__(self, tool_name: str) -> None:
        super().__init__(f"Unknown tool: {tool_name}")
        self.tool_name = tool_name
