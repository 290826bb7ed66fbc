"""Base abstractions for MCP tools."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from .core.exceptions import ToolArgumentError, ToolExecutionError
from .core.logging import get_logger
from .protocol import ToolDescriptor, ToolFailure, ToolOutcome, ToolSuccess

logger = get_logger(__name__)


class BaseTool(ABC):
    """Abstract base class for MCP tools.

    Subclasses declare a pydantic ``input_model`` and map its fields to the
    message reported when that argument is missing or invalid.
    """

    name: ClassVar[str]
    description: ClassVar[str] = ""
    input_model: ClassVar[Type[BaseModel]]
    argument_errors: ClassVar[Dict[str, str]] = {}

    def input_schema(self) -> Dict[str, Any]:
        """JSON schema advertised for this tool's arguments."""
        return self.input_model.model_json_schema()

    def descriptor(self) -> ToolDescriptor:
        """Return ToolDescriptor for discovery."""
        return ToolDescriptor(
            name=self.name,
            description=self.description,
            input_schema=self.input_schema(),
        )

    def parse_arguments(self, arguments: Optional[Mapping[str, Any]]) -> BaseModel:
        """Validate raw call arguments against ``input_model``."""
        try:
            return self.input_model.model_validate(dict(arguments or {}))
        except ValidationError as exc:
            raise ToolArgumentError(
                self._argument_error_message(exc),
                details={"errors": exc.errors(include_url=False, include_context=False)},
            ) from exc

    async def invoke(self, arguments: Optional[Mapping[str, Any]]) -> ToolOutcome:
        """Validate arguments and delegate to the concrete implementation."""
        try:
            parsed = self.parse_arguments(arguments)
            text = await self._execute(parsed)
        except ToolExecutionError as exc:
            logger.warning(
                "Tool invocation failed",
                tool=self.name,
                code=exc.code,
                error=str(exc),
                details=exc.details,
            )
            return ToolFailure(message=str(exc), code=exc.code, details=exc.details)
        return ToolSuccess(text=text)

    def _argument_error_message(self, exc: ValidationError) -> str:
        for error in exc.errors():
            loc = error.get("loc") or ()
            if loc and loc[0] in self.argument_errors:
                return self.argument_errors[loc[0]]
        first = exc.errors()[0]
        return f"Invalid arguments: {first.get('msg', 'validation failed')}"

    @abstractmethod
    async def _execute(self, payload: Any) -> str:
        """Execute tool logic and return the rendered text."""
