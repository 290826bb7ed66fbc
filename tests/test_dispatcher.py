"""Unit tests for the request dispatcher and tool registry."""

from unittest.mock import AsyncMock

import pytest
from pydantic import BaseModel

from npm_package_info.base import BaseTool
from npm_package_info.core.exceptions import CommandExecutionError, ToolNotFoundError
from npm_package_info.dispatcher import Dispatcher
from npm_package_info.protocol import CallRequest, ToolFailure, ToolSuccess
from npm_package_info.registry import ToolRegistry


class EchoInput(BaseModel):
    message: str


class EchoTool(BaseTool):
    """Mock tool for testing."""

    name = "echo"
    description = "Echo the message back"
    input_model = EchoInput
    argument_errors = {"message": "Message is required"}

    async def _execute(self, payload):
        return payload.message


class CrashingTool(EchoTool):
    name = "crash"

    async def _execute(self, payload):
        raise KeyError("boom")


class TestToolRegistry:
    """Test suite for ToolRegistry."""

    def test_default_catalog(self, registry):
        """The built registry advertises view_package then search_packages."""
        names = [descriptor.name for descriptor in registry.list_tools()]
        assert names == ["view_package", "search_packages"]

    def test_view_package_schema(self, registry):
        schema = registry.resolve("view_package").descriptor().input_schema
        assert schema["type"] == "object"
        assert schema["required"] == ["packageName"]
        assert schema["properties"]["packageName"]["type"] == "string"
        assert "field" in schema["properties"]

    def test_search_packages_schema(self, registry):
        schema = registry.resolve("search_packages").descriptor().input_schema
        assert schema["required"] == ["query"]
        assert schema["properties"]["limit"]["type"] == "integer"
        assert schema["properties"]["limit"]["default"] == 10

    def test_register_duplicate_tool_raises_error(self):
        registry = ToolRegistry()
        registry.register(EchoTool())
        with pytest.raises(ValueError, match="already registered"):
            registry.register(EchoTool())

    def test_resolve_unknown_tool(self):
        registry = ToolRegistry()
        with pytest.raises(ToolNotFoundError, match="Unknown tool: missing"):
            registry.resolve("missing")


class TestDispatcher:
    """Test suite for Dispatcher."""

    @pytest.fixture
    def echo_dispatcher(self):
        registry = ToolRegistry()
        registry.register(EchoTool())
        registry.register(CrashingTool())
        return Dispatcher(registry)

    def test_requires_registry(self):
        with pytest.raises(ValueError, match="registry is required"):
            Dispatcher(None)

    @pytest.mark.asyncio
    async def test_dispatch_success(self, echo_dispatcher):
        result = await echo_dispatcher.dispatch("echo", {"message": "hello"})
        assert result.text == "hello"
        assert [item.type for item in result.content] == ["text"]

    @pytest.mark.asyncio
    async def test_unknown_tool(self, dispatcher):
        result = await dispatcher.dispatch("npm_install", {"packageName": "react"})
        assert result.text == "Error: Unknown tool: npm_install"

    @pytest.mark.asyncio
    async def test_argument_error(self, echo_dispatcher):
        result = await echo_dispatcher.dispatch("echo", {})
        assert result.text == "Error: Message is required"

    @pytest.mark.asyncio
    async def test_none_arguments_are_empty(self, echo_dispatcher):
        result = await echo_dispatcher.dispatch("echo", None)
        assert result.text == "Error: Message is required"

    @pytest.mark.asyncio
    async def test_unexpected_exception_becomes_error_text(self, echo_dispatcher):
        result = await echo_dispatcher.dispatch("crash", {"message": "x"})
        assert result.text == "Error: 'boom'"

    @pytest.mark.asyncio
    async def test_command_execution_error(self, dispatcher, runner):
        runner.run.side_effect = CommandExecutionError("Failed to start command: [Errno 2] No such file")

        result = await dispatcher.dispatch("search_packages", {"query": "react"})

        assert result.text == "Error: Failed to start command: [Errno 2] No such file"

    @pytest.mark.asyncio
    async def test_crash_inside_invoke_is_contained(self, registry):
        tool = registry.resolve("view_package")
        tool.invoke = AsyncMock(side_effect=RuntimeError("transport gone"))

        result = await Dispatcher(registry).dispatch("view_package", {"packageName": "react"})

        assert result.text == "Error: transport gone"

    @pytest.mark.asyncio
    async def test_handle_call_request(self, echo_dispatcher):
        result = await echo_dispatcher.handle(CallRequest(tool_name="echo", arguments={"message": "hi"}))
        assert result.text == "hi"


class TestToolOutcome:
    def test_success_flattens_to_text(self):
        assert ToolSuccess(text="done").to_call_result().text == "done"

    def test_failure_flattens_with_error_prefix(self):
        assert ToolFailure(message="bad").to_call_result().text == "Error: bad"

    @pytest.mark.asyncio
    async def test_invoke_returns_failure_outcome(self):
        outcome = await EchoTool().invoke({})
        assert outcome.status == "error"
        assert outcome.code == "invalid_arguments"

    @pytest.mark.asyncio
    async def test_failure_outcome_keeps_validation_details(self):
        outcome = await EchoTool().invoke({})
        assert outcome.details["errors"][0]["loc"] == ("message",)
        assert outcome.details["errors"][0]["type"] == "missing"

    @pytest.mark.asyncio
    async def test_failure_outcome_keeps_command_details(self):
        class FailingTool(EchoTool):
            name = "fail"

            async def _execute(self, payload):
                raise CommandExecutionError("npm exploded", details={"exit_code": 2})

        outcome = await FailingTool().invoke({"message": "hi"})

        assert outcome.code == "command_error"
        assert outcome.details == {"exit_code": 2}
        assert outcome.to_call_result().text == "Error: npm exploded"

    def test_failure_details_default_to_empty(self):
        assert ToolFailure(message="bad").details == {}
