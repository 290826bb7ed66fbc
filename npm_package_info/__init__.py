"""
NPM package info MCP server.

Exposes two tools over the Model Context Protocol, both backed by the
installed ``npm`` command-line tool:

- view_package: package metadata, optionally a single field
- search_packages: keyword search with a result cap

Usage:
    from npm_package_info import Dispatcher
    from npm_package_info.tools import build_registry

    dispatcher = Dispatcher(build_registry())
    result = await dispatcher.dispatch("view_package", {"packageName": "react"})
    print(result.text)
"""

from .dispatcher import Dispatcher
from .protocol import CallRequest, CallResult, CommandOutcome, ToolDescriptor
from .registry import ToolRegistry

__all__ = [
    "CallRequest",
    "CallResult",
    "CommandOutcome",
    "Dispatcher",
    "ToolDescriptor",
    "ToolRegistry",
]

__version__ = "1.0.0"
