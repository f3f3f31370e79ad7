"""MCP server for mindbridge.

Exposes 3 tools over stdio:
- getSecondOpinion
- listProviders
- listReasoningModels

Error envelopes are reported to the host as ``isError`` tool results by
raising :class:`ToolCallError`; the MCP runtime converts the exception into an
error result carrying the envelope text.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from mcp.server import Server
from mcp.server.lowlevel import NotificationOptions
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from ..base.http import aclose_all_clients
from ..base.logging import get_logger, log_event
from ..base.models import ToolEnvelope
from ..base.registry import ProviderRegistry
from ..config import ServerConfig, load_config
from ..config.defaults import SERVER_NAME, SERVER_VERSION
from . import tools
from .dispatcher import RequestDispatcher

logger = get_logger("mindbridge.service")


class ToolCallError(Exception):
    """Carries an error envelope's text to the MCP runtime."""


def envelope_to_content(envelope: ToolEnvelope) -> List[TextContent]:
    """Convert an envelope into MCP text content, raising for error envelopes."""
    if envelope.is_error:
        raise ToolCallError(envelope.first_text)
    return [TextContent(type="text", text=block["text"]) for block in envelope.content]


class MindBridgeServer:
    """MCP server wrapping one registry and dispatcher.

    Parameters:
        registry: Pre-built registry; when omitted it is built from
            ``config`` (or from the environment when ``config`` is omitted too).
    """

    def __init__(self, registry: Optional[ProviderRegistry] = None, config: Optional[ServerConfig] = None) -> None:
        if registry is None:
            registry = ProviderRegistry.from_config(config if config is not None else load_config())
        self.registry = registry
        self.dispatcher = RequestDispatcher(self.registry)
        self.server = Server(SERVER_NAME)
        self._setup_handlers()

    def list_tool_definitions(self) -> List[Tool]:
        schemas = tools.tool_input_schemas()
        return [
            Tool(name=name, description=tools.TOOL_DESCRIPTIONS[name], inputSchema=schemas[name])
            for name in (tools.GET_SECOND_OPINION, tools.LIST_PROVIDERS, tools.LIST_REASONING_MODELS)
        ]

    async def call(self, name: str, arguments: Optional[Dict[str, Any]]) -> ToolEnvelope:
        """Route a tool call by name to its handler."""
        if name == tools.GET_SECOND_OPINION:
            return await tools.get_second_opinion(self.dispatcher, arguments)
        if name == tools.LIST_PROVIDERS:
            return tools.list_providers(self.registry)
        if name == tools.LIST_REASONING_MODELS:
            return tools.list_reasoning_models()
        return ToolEnvelope.from_text(f"Error: Unknown tool: {name}", is_error=True)

    def _setup_handlers(self) -> None:
        """Register MCP handlers."""

        @self.server.list_tools()
        async def list_tools() -> List[Tool]:
            return self.list_tool_definitions()

        # UnifiedRequest owns argument validation
        @self.server.call_tool(validate_input=False)
        async def call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[TextContent]:
            log_event(logger, "tool.call", tool=name)
            return envelope_to_content(await self.call(name, arguments))

    async def start(self) -> None:
        """Serve over stdio until the host closes the stream."""
        try:
            async with stdio_server() as (read_stream, write_stream):
                await self.server.run(
                    read_stream,
                    write_stream,
                    InitializationOptions(
                        server_name=SERVER_NAME,
                        server_version=SERVER_VERSION,
                        capabilities=self.server.get_capabilities(
                            notification_options=NotificationOptions(),
                            experimental_capabilities={},
                        ),
                    ),
                )
        finally:
            await aclose_all_clients()


__all__ = ["MindBridgeServer", "ToolCallError", "envelope_to_content"]
