"""MCP server implementation for Image Vision."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, List

from mcp import types
from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server

from ..config import VisionConfig
from ..dispatcher import DescriptionDispatcher
from ..provider import DescriptionProvider, OllamaDescriptionProvider

logger = logging.getLogger(__name__)

SERVER_NAME = "Image Vision MCP"
SERVER_VERSION = "0.85.1"

ToolHandler = Callable[[DescriptionDispatcher, Dict[str, Any]], Awaitable[str]]
ResourceReader = Callable[[VisionConfig], str]


class ImageVisionServer:
    """MCP server exposing the image description tools."""

    def __init__(
        self,
        config: VisionConfig,
        provider: DescriptionProvider | None = None,
    ):
        self.config = config
        self.server = Server(SERVER_NAME, version=SERVER_VERSION)
        self.dispatcher = DescriptionDispatcher(
            config, provider or OllamaDescriptionProvider(config)
        )
        self.tools: Dict[str, ToolHandler] = {}
        self.tool_metadata: Dict[str, tuple[str, Dict]] = {}
        self.resources: Dict[str, ResourceReader] = {}
        self.resource_metadata: Dict[str, tuple[str, str, str]] = {}

        # Register handlers once at initialization
        self._setup_handlers()

    def _setup_handlers(self) -> None:
        """Set up MCP protocol handlers."""

        @self.server.list_tools()
        async def list_tools() -> list[types.Tool]:
            return [
                types.Tool(
                    name=tool_name,
                    description=desc,
                    inputSchema=schema,
                )
                for tool_name, (desc, schema) in self.tool_metadata.items()
            ]

        @self.server.call_tool()
        async def call_tool(name: str, arguments: dict) -> list[types.TextContent]:
            return await self.dispatch(name, arguments)

        @self.server.list_resources()
        async def list_resources() -> list[types.Resource]:
            return [
                types.Resource(
                    uri=uri,
                    name=name,
                    description=desc,
                    mimeType=mime_type,
                )
                for uri, (name, desc, mime_type) in self.resource_metadata.items()
            ]

        @self.server.read_resource()
        async def read_resource(uri) -> list[ReadResourceContents]:
            return self.read(str(uri))

    async def dispatch(self, name: str, arguments: Dict[str, Any] | None) -> List[types.TextContent]:
        """Invoke a registered tool and wrap its JSON text in a content block."""
        if name not in self.tools:
            raise ValueError(f"Unknown tool: {name}")

        logger.info("Calling tool %s", name)
        result = await self.tools[name](self.dispatcher, arguments or {})
        return [types.TextContent(type="text", text=result)]

    def read(self, uri: str) -> List[ReadResourceContents]:
        # pydantic may append a trailing slash when it parses the URI
        key = uri if uri in self.resources else uri.rstrip("/")
        if key not in self.resources:
            raise ValueError(f"Unknown resource: {uri}")
        _, _, mime_type = self.resource_metadata[key]
        return [ReadResourceContents(content=self.resources[key](self.config), mime_type=mime_type)]

    def register_tool(
        self,
        name: str,
        description: str,
        input_schema: Dict[str, Any],
        handler: ToolHandler,
    ) -> None:
        """Register an MCP tool.

        Parameters
        ----------
        name:
            Tool name
        description:
            Tool description
        input_schema:
            JSON schema for tool inputs
        handler:
            Coroutine called with the dispatcher and the tool arguments
        """
        self.tools[name] = handler
        self.tool_metadata[name] = (description, input_schema)

    def register_resource(
        self,
        uri: str,
        name: str,
        description: str,
        reader: ResourceReader,
        mime_type: str = "application/json",
    ) -> None:
        """Register a read-only resource served from the configuration."""
        self.resources[uri] = reader
        self.resource_metadata[uri] = (name, description, mime_type)

    async def run(self) -> None:
        """Run the MCP server with stdio transport."""
        logger.info(
            "Serving %s on stdio (model %s at %s, roots: %s)",
            SERVER_NAME,
            self.config.model,
            self.config.host,
            ", ".join(self.config.roots_as_strings()),
        )
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options(),
            )


def create_server(
    config: VisionConfig,
    provider: DescriptionProvider | None = None,
) -> ImageVisionServer:
    """Create and configure an MCP server instance.

    Parameters
    ----------
    config:
        Startup configuration
    provider:
        Description provider; defaults to the configured Ollama endpoint

    Returns
    -------
    Configured ImageVisionServer instance
    """
    server = ImageVisionServer(config, provider)

    from .tools import describe, directories

    # Register description tools
    describe.register_tools(server)

    # Register the permitted directories resource
    directories.register_resources(server)

    return server
