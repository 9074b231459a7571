"""Error handling utilities for Spotify MCP Server.

This module provides the single error boundary every tool call goes through:
input validation failures become ``Error: ...`` lines and external failures
become ``Error <context>: <message>`` lines, so no tool call ever surfaces an
exception to the MCP runtime.
"""

import logging
from typing import Any, Awaitable, Callable, List, Optional

import mcp.types as types

from spotify_client.exceptions import (
    SpotifyAuthenticationError,
    SpotifyAuthorizationError,
    SpotifyClientError,
    SpotifyConnectionError,
    SpotifyNotFoundError,
    SpotifyParameterError,
    SpotifyRateLimitError,
)

logger = logging.getLogger(__name__)

MAX_LIMIT = 50


class InvalidArgumentsError(ValueError):
    """Tool arguments failed validation; the message is shown to the caller."""

    pass


def text_content(text: str) -> List[types.TextContent]:
    """Wrap text in the MCP content envelope."""
    return [types.TextContent(type="text", text=text)]


async def safe_tool_execution(
    tool_name: str,
    handler: Callable[[dict[str, Any]], Awaitable[str]],
    arguments: dict[str, Any],
    context: str,
) -> List[types.TextContent]:
    """Execute a tool operation with uniform error handling.

    Args:
        tool_name: Name of the tool being executed
        handler: Async function returning the response text
        arguments: Tool arguments
        context: What the operation is doing, e.g. "searching for tracks"

    Returns:
        list[types.TextContent]: Tool result or error message
    """
    try:
        result = await handler(arguments)
        return text_content(result)

    except InvalidArgumentsError as e:
        logger.info(f"Invalid arguments for {tool_name}: {e}")
        return text_content(f"Error: {e}")

    except SpotifyClientError as e:
        logger.error(f"Spotify error in {tool_name} while {context}: {e}")
        return text_content(f"Error {context}: {describe_spotify_error(e, arguments)}")

    except Exception as e:
        logger.exception(f"Unexpected error in {tool_name}")
        return text_content(f"Error {context}: {e}")


def describe_spotify_error(error: SpotifyClientError, arguments: dict[str, Any]) -> str:
    """Turn a Spotify client error into a user-facing message."""
    if isinstance(error, SpotifyAuthenticationError):
        return (
            "Authentication failed. Verify SPOTIFY_CLIENT_ID and SPOTIFY_CLIENT_SECRET "
            f"and re-authorize ({error.message})"
        )
    elif isinstance(error, SpotifyAuthorizationError):
        return f"Permission denied. The token is missing a required scope or Premium is required ({error.message})"
    elif isinstance(error, SpotifyNotFoundError):
        resource_id = _get_resource_id(arguments)
        if resource_id is None:
            return f"Not found. Make sure a Spotify device is active ({error.message})"
        resource_type = _infer_resource_type(arguments)
        return f"{resource_type} with ID '{resource_id}' was not found"
    elif isinstance(error, SpotifyRateLimitError):
        if error.retry_after is not None:
            return f"Rate limited by Spotify. Retry after {error.retry_after}s"
        return "Rate limited by Spotify. Please retry shortly"
    elif isinstance(error, SpotifyConnectionError):
        return f"Unable to reach Spotify. Check your network connection ({error.message})"
    elif isinstance(error, SpotifyParameterError):
        return f"Invalid request: {error.message}"
    return error.message


def _infer_resource_type(arguments: dict[str, Any]) -> str:
    """Infer a human-friendly resource type from the arguments."""
    if arguments.get("playlist_id"):
        return "Playlist"
    elif arguments.get("album_ids"):
        return "Album"
    elif arguments.get("track_id"):
        return "Track"
    elif arguments.get("type"):
        return str(arguments["type"]).capitalize()
    return "Resource"


def _get_resource_id(arguments: dict[str, Any]) -> Optional[str]:
    """Extract the resource ID from the arguments, if any."""
    for key in ["playlist_id", "track_id", "id", "uri"]:
        if arguments.get(key):
            return str(arguments[key])
    album_ids = arguments.get("album_ids")
    if album_ids:
        return ", ".join(str(album_id) for album_id in album_ids)
    return None


def clamp_limit(value: Any, default: int) -> int:
    """Coerce a limit argument into 1..50, falling back to ``default``.

    Examples:
        >>> clamp_limit(None, 20)
        20
        >>> clamp_limit(500, 20)
        50
        >>> clamp_limit(0, 20)
        1
    """
    if value is None:
        return default
    try:
        limit = int(value)
    except (TypeError, ValueError):
        return default
    return max(1, min(MAX_LIMIT, limit))


def clamp_offset(value: Any) -> int:
    """Coerce an offset argument into a non-negative integer."""
    if value is None:
        return 0
    try:
        return max(0, int(value))
    except (TypeError, ValueError):
        return 0
