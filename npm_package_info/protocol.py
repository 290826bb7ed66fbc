"""Shared Pydantic contracts for the MCP tool surface."""

from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from mcp import types
from pydantic import BaseModel, ConfigDict, Field


class ToolDescriptor(BaseModel):
    """Public metadata describing a tool."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Unique tool name")
    description: str = Field(..., description="Human readable summary")
    input_schema: Dict[str, Any] = Field(..., description="JSON schema for call arguments")

    def to_mcp(self) -> types.Tool:
        """Serialize as an MCP tool listing entry."""
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )


class CallRequest(BaseModel):
    """A call-by-name request received from the transport."""

    tool_name: str
    arguments: Dict[str, Any] = Field(default_factory=dict)


class TextContent(BaseModel):
    type: Literal["text"] = "text"
    text: str


class CallResult(BaseModel):
    """Uniform response envelope returned for every call."""

    content: List[TextContent] = Field(..., min_length=1)

    @classmethod
    def from_text(cls, text: str) -> "CallResult":
        return cls(content=[TextContent(text=text)])

    @property
    def text(self) -> str:
        return "\n".join(item.text for item in self.content)

    def to_mcp(self) -> List[types.TextContent]:
        return [types.TextContent(type="text", text=item.text) for item in self.content]


class ToolSuccess(BaseModel):
    status: Literal["ok"] = "ok"
    text: str

    def to_call_result(self) -> CallResult:
        return CallResult.from_text(self.text)


class ToolFailure(BaseModel):
    status: Literal["error"] = "error"
    message: str
    code: str = Field("tool_error", description="Machine-friendly error code")
    details: Dict[str, Any] = Field(default_factory=dict)

    def to_call_result(self) -> CallResult:
        return CallResult.from_text(f"Error: {self.message}")


ToolOutcome = Annotated[Union[ToolSuccess, ToolFailure], Field(discriminator="status")]


class CommandOutcome(BaseModel):
    """Captured result of one external command invocation."""

    command: str
    stdout: str = ""
    stderr: str = ""
    exit_code: Optional[int] = None

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    @property
    def failed_without_output(self) -> bool:
        """True when the command failed (or complained) and printed nothing on stdout."""
        return (not self.succeeded or bool(self.stderr)) and not self.stdout.strip()
