"""search_packages tool: keyword search via ``npm search``."""

from __future__ import annotations

import copy
from typing import Any, Dict

from pydantic import BaseModel, Field

from ..base import BaseTool
from ..core.exceptions import OutputParseError, RegistryCommandError
from ..core.logging import get_logger
from ..formatting import format_no_results, format_search_results, parse_structured
from ..runner import CommandRunner

logger = get_logger(__name__)


class SearchPackagesInput(BaseModel):
    query: str = Field(..., min_length=1, description="Search query for NPM packages")
    limit: int = Field(
        default=10,
        ge=1,
        strict=True,
        description="Maximum number of results to return (default: 10)",
    )


class SearchPackagesTool(BaseTool):
    """Search the registry by keyword and render a numbered result list."""

    name = "search_packages"
    description = "Search for NPM packages by keyword or name"
    input_model = SearchPackagesInput
    argument_errors = {
        "query": "Search query is required and must be a string",
        "limit": "Limit must be a positive integer",
    }

    def __init__(
        self,
        runner: CommandRunner,
        npm_command: str = "npm",
        default_limit: int = 10,
    ) -> None:
        self.runner = runner
        self.npm_command = npm_command
        self.default_limit = default_limit

    def input_schema(self) -> Dict[str, Any]:
        schema = copy.deepcopy(super().input_schema())
        limit = schema["properties"]["limit"]
        limit["default"] = self.default_limit
        limit["description"] = f"Maximum number of results to return (default: {self.default_limit})"
        return schema

    def build_command(self, query: str, limit: int) -> str:
        return f'{self.npm_command} search "{query}" --json --searchlimit={limit}'

    async def _execute(self, payload: SearchPackagesInput) -> str:
        limit = payload.limit if "limit" in payload.model_fields_set else self.default_limit
        outcome = await self.runner.run(self.build_command(payload.query, limit))

        if outcome.failed_without_output:
            raise RegistryCommandError(
                f"Search failed: {outcome.stderr.strip()}",
                details={"exit_code": outcome.exit_code},
            )
        if not outcome.succeeded:
            raise RegistryCommandError(
                f"Failed to search packages: {(outcome.stderr or outcome.stdout).strip()}",
                details={"exit_code": outcome.exit_code},
            )

        try:
            results = parse_structured(outcome.stdout)
        except ValueError as exc:
            raise OutputParseError("Failed to parse search results") from exc

        if not isinstance(results, list) or not results:
            return format_no_results(payload.query)
        if not all(isinstance(entry, dict) for entry in results):
            raise OutputParseError("Failed to parse search results")

        logger.info("Search completed", query=payload.query, count=len(results))
        return format_search_results(payload.query, results)
