"""view_package tool: package metadata via ``npm view``."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..base import BaseTool
from ..core.exceptions import PackageNotFoundError, RegistryCommandError
from ..core.logging import get_logger
from ..formatting import format_package_info, parse_or_text
from ..runner import CommandRunner

logger = get_logger(__name__)

NOT_FOUND_MARKERS = ("404", "e404", "not found")


class ViewPackageInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    package_name: str = Field(
        ...,
        alias="packageName",
        min_length=1,
        description='The name of the NPM package to query (e.g., "react", "@types/node")',
    )
    field: Optional[str] = Field(
        default=None,
        description='Optional specific field to retrieve (e.g., "version", "description", "dependencies")',
    )


def signals_not_found(*texts: str) -> bool:
    """True when any diagnostic text reports a missing package."""
    lowered = " ".join(texts).lower()
    return any(marker in lowered for marker in NOT_FOUND_MARKERS)


class ViewPackageTool(BaseTool):
    """Fetch registry metadata for one package, optionally a single field."""

    name = "view_package"
    description = "Get detailed information about an NPM package using npm view command"
    input_model = ViewPackageInput
    argument_errors = {
        "packageName": "Package name is required and must be a string",
        "field": "Field must be a string",
    }

    def __init__(self, runner: CommandRunner, npm_command: str = "npm") -> None:
        self.runner = runner
        self.npm_command = npm_command

    def build_command(self, package_name: str, field: Optional[str] = None) -> str:
        # Quoted like the shell form npm users type; see DESIGN.md on quoting.
        if field:
            return f'{self.npm_command} view "{package_name}" {field} --json'
        return f'{self.npm_command} view "{package_name}" --json'

    async def _execute(self, payload: ViewPackageInput) -> str:
        outcome = await self.runner.run(self.build_command(payload.package_name, payload.field))

        if outcome.failed_without_output:
            if signals_not_found(outcome.stderr):
                raise PackageNotFoundError(payload.package_name)
            raise RegistryCommandError(
                f"Package not found or error occurred: {outcome.stderr.strip()}",
                details={"exit_code": outcome.exit_code},
            )

        if not outcome.succeeded:
            # npm reports registry errors as a JSON document on stdout
            if signals_not_found(outcome.stderr, outcome.stdout):
                raise PackageNotFoundError(payload.package_name)
            raise RegistryCommandError(
                "Failed to fetch package information: "
                f"{(outcome.stderr or outcome.stdout).strip()}",
                details={"exit_code": outcome.exit_code},
            )

        result = parse_or_text(outcome.stdout)
        logger.info(
            "Fetched package information",
            package=payload.package_name,
            field=payload.field,
        )
        return format_package_info(payload.package_name, result, payload.field)
