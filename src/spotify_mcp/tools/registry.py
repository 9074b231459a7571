"""MCP Tools Registry for Spotify operations.

The ``slim`` tool set advertises three consolidated tools (spotify_playback,
spotify_library, spotify_info). The ``full`` tool set adds single-purpose read
tools bound to the same operations. get_enriched_now_playing is added to
either set when a GetSongBPM client is configured.
"""

import logging
from typing import Any, Optional, Union

import mcp.types as types

from getsongbpm import GetSongBPMClient
from spotify_client import SpotifyClient

from .base import ITEM_TYPES, OperationTool, SpotifyTool
from .info import InfoTool
from .library import LibraryTool
from .playback import PlaybackTool
from .tempo import TempoTool

logger = logging.getLogger(__name__)

Tool = Union[SpotifyTool, OperationTool]

LIMIT_PROPERTY = {
    "type": "integer",
    "minimum": 1,
    "maximum": 50,
    "description": "Maximum number of items to return (1-50)",
}
OFFSET_PROPERTY = {
    "type": "integer",
    "minimum": 0,
    "description": "Offset for pagination (0-based index)",
}


class ToolRegistry:
    """Registry for all Spotify MCP tools.

    Provides:
        1. spotify_playback - play, pause, resume, skip, queue, playlist edits
        2. spotify_library - search, playlists, saved tracks, history, albums
        3. spotify_info - now playing, enriched now playing, queue, audio features
        4. get_enriched_now_playing - GetSongBPM lookup (when configured)
        5-12. Single-purpose read tools (``full`` tool set only)
    """

    def __init__(
        self,
        spotify_client: SpotifyClient,
        tempo_client: Optional[GetSongBPMClient] = None,
        toolset: str = "slim",
    ):
        """Initialize tool registry.

        Args:
            spotify_client: Configured SpotifyClient instance
            tempo_client: Optional GetSongBPM client
            toolset: "slim" or "full"
        """
        self.client = spotify_client
        self.tempo_client = tempo_client
        self.toolset = toolset
        self.tools = self._define_tools()

    def _define_tools(self) -> dict[str, Tool]:
        """Build the tool instances for the configured tool set."""
        playback = PlaybackTool(self.client)
        library = LibraryTool(self.client)
        info = InfoTool(self.client, self.tempo_client)

        tools: list[Tool] = [playback, library, info]

        if self.tempo_client is not None:
            tempo = TempoTool(self.client, self.tempo_client)
            tools.append(
                OperationTool(tempo.name, tempo.description, tempo, "lookup")
            )

        if self.toolset == "full":
            tools.extend(self._read_tools(library, info))

        return {tool.name: tool for tool in tools}

    @staticmethod
    def _read_tools(library: LibraryTool, info: InfoTool) -> list[OperationTool]:
        """Single-purpose read tools for the ``full`` tool set."""
        return [
            OperationTool(
                "search_spotify",
                "Search for tracks, albums, artists, or playlists on Spotify",
                library,
                "search",
                properties={
                    "query": {"type": "string", "description": "The search query"},
                    "type": {
                        "type": "string",
                        "enum": ITEM_TYPES,
                        "description": "The type of item to search for either track, album, artist, or playlist",
                    },
                    "limit": {**LIMIT_PROPERTY, "description": "Maximum number of results to return (1-50)"},
                },
                required=["query", "type"],
            ),
            OperationTool(
                "get_now_playing",
                "Get information about the currently playing track on Spotify",
                info,
                "now_playing",
            ),
            OperationTool(
                "get_my_playlists",
                "Get a list of the current user's playlists on Spotify",
                library,
                "playlists",
                properties={"limit": LIMIT_PROPERTY, "offset": OFFSET_PROPERTY},
            ),
            OperationTool(
                "get_playlist_tracks",
                "Get a list of tracks in a Spotify playlist",
                library,
                "playlist_tracks",
                properties={
                    "playlist_id": {"type": "string", "description": "The Spotify ID of the playlist"},
                    "limit": LIMIT_PROPERTY,
                    "offset": OFFSET_PROPERTY,
                },
                required=["playlist_id"],
            ),
            OperationTool(
                "get_recently_played",
                "Get a list of recently played tracks on Spotify",
                library,
                "recently_played",
                properties={"limit": LIMIT_PROPERTY},
            ),
            OperationTool(
                "get_users_saved_tracks",
                "Get a list of tracks saved in the user's \"Liked Songs\" library",
                library,
                "saved_tracks",
                properties={"limit": LIMIT_PROPERTY, "offset": OFFSET_PROPERTY},
            ),
            OperationTool(
                "get_queue",
                "Get a list of the currently playing track and the next items in your Spotify queue",
                info,
                "queue",
                properties={
                    "limit": {**LIMIT_PROPERTY, "description": "Maximum number of upcoming items to show (1-50)"}
                },
            ),
            OperationTool(
                "get_track_audio_features",
                "Get audio features (BPM, key, energy, danceability, etc.) for a Spotify track",
                info,
                "audio_features",
                properties={"track_id": {"type": "string", "description": "The Spotify ID of the track"}},
                required=["track_id"],
            ),
        ]

    def get_all(self) -> list[types.Tool]:
        """Get all tool definitions.

        Returns:
            List of MCP Tool objects in registration order
        """
        return [tool.definition() for tool in self.tools.values()]

    async def execute(self, tool_name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        """Execute a tool by name.

        Args:
            tool_name: Name of tool to execute
            arguments: Tool arguments

        Returns:
            Tool response content

        Raises:
            ValueError: If tool_name is invalid
        """
        tool = self.tools.get(tool_name)
        if tool is None:
            raise ValueError(f"Unknown tool: {tool_name}")
        return await tool.execute(arguments or {})
