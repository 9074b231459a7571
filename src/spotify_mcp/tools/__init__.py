"""Spotify MCP tools."""

from .base import Operation, OperationTool, SpotifyTool
from .info import InfoTool
from .library import LibraryTool
from .playback import PlaybackTool
from .registry import ToolRegistry
from .tempo import TempoTool

__all__ = [
    "ToolRegistry",
    "SpotifyTool",
    "OperationTool",
    "Operation",
    "PlaybackTool",
    "LibraryTool",
    "InfoTool",
    "TempoTool",
]
