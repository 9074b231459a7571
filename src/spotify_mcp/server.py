"""Main MCP Server class with stdio transport for Claude Desktop integration.

This module implements the MCPServer class that builds the Spotify and
GetSongBPM clients from configuration, registers the tools, and serves them
over stdio.
"""

import asyncio
import logging
import sys
from typing import Any, Optional

import mcp.server.stdio
import mcp.types as types
from mcp.server import Server

from getsongbpm import GetSongBPMClient
from spotify_client import SpotifyClient

from .config import ConfigurationError, ServerConfig
from .logger import setup_logging
from .tools import ToolRegistry

logger = logging.getLogger(__name__)

SERVER_NAME = "spotify-mcp"


class MCPServer:
    """Main MCP server class coordinating the Spotify tools.

    This class:
    - Builds SpotifyClient (and GetSongBPMClient when configured) from ServerConfig
    - Registers the consolidated tools, plus the read tools in the full tool set
    - Provides stdio transport for Claude Desktop
    """

    def __init__(
        self,
        config: Optional[ServerConfig] = None,
        spotify_client: Optional[SpotifyClient] = None,
        tempo_client: Optional[GetSongBPMClient] = None,
    ):
        """Initialize MCP server.

        Args:
            config: Server configuration (read from the environment when omitted)
            spotify_client: Pre-built Spotify client (built from config when omitted)
            tempo_client: Pre-built GetSongBPM client (built when a key is configured)

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        self.config = config or ServerConfig.from_environment()

        self.spotify_client = spotify_client or SpotifyClient(self.config.spotify_config())
        if tempo_client is None and self.config.tempo_lookup_enabled:
            tempo_client = GetSongBPMClient(
                api_key=self.config.getsongbpm_api_key,
                timeout=self.config.request_timeout,
            )
        self.tempo_client = tempo_client

        self.tool_registry = ToolRegistry(
            self.spotify_client, self.tempo_client, toolset=self.config.toolset
        )

        self.server = Server(SERVER_NAME)
        self._register_handlers()

        logger.info(
            f"Spotify MCP Server initialized ({self.config.toolset} tool set, "
            f"tempo lookup {'enabled' if self.tempo_client else 'disabled'})"
        )

    def _register_handlers(self):
        """Register all MCP protocol handlers."""

        @self.server.list_tools()
        async def list_tools() -> list[types.Tool]:
            """Return all available tools."""
            tools = self.tool_registry.get_all()
            logger.info(f"Listing {len(tools)} tools")
            return tools

        @self.server.call_tool()
        async def call_tool(
            name: str, arguments: dict[str, Any]
        ) -> list[types.TextContent]:
            """Execute a tool by name."""
            logger.info(f"Executing tool: {name} with args: {arguments}")
            return await self.tool_registry.execute(name, arguments)

    async def run(self):
        """Run the MCP server with stdio transport until stdin closes."""
        logger.info("Starting Spotify MCP Server with stdio transport")

        try:
            async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
                await self.server.run(
                    read_stream,
                    write_stream,
                    self.server.create_initialization_options(),
                )
        finally:
            await self.close()

    async def close(self):
        """Release HTTP resources."""
        if self.tempo_client is not None:
            await self.tempo_client.close()


async def main():
    """Main entry point for the MCP server."""
    setup_logging()

    server = MCPServer()
    await server.run()


def run():
    """Console script entry point; exits non-zero on fatal startup failure."""
    try:
        asyncio.run(main())
    except ConfigurationError as e:
        logger.critical(f"Invalid configuration: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    run()
