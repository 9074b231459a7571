"""Base classes for Spotify MCP tools.

A consolidated tool advertises one JSON schema with an ``operation`` enum and
dispatches each call to the handler registered for that operation. Every
handler runs inside :func:`safe_tool_execution`, so handlers only return text
or raise.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import mcp.types as types

from spotify_client import SpotifyClient

from ..utils import InvalidArgumentsError, safe_tool_execution, text_content

logger = logging.getLogger(__name__)

ITEM_TYPES = ["track", "album", "artist", "playlist"]


@dataclass(frozen=True)
class Operation:
    """One branch of a tool's dispatch table.

    Attributes:
        handler: Name of the handler method on the tool
        context: Error context, formatted with the call arguments
            (e.g. "searching for {type}s")
    """

    handler: str
    context: str


class _ContextArguments(dict):
    def __missing__(self, key: str) -> str:
        return "item"


def format_context(context: str, arguments: Dict[str, Any]) -> str:
    """Fill the error context template from the call arguments.

    Examples:
        >>> format_context("searching for {type}s", {"type": "album"})
        'searching for albums'
        >>> format_context("searching for {type}s", {})
        'searching for items'
    """
    values = _ContextArguments({k: v for k, v in arguments.items() if v is not None})
    return context.format_map(values)


class SpotifyTool:
    """Consolidated tool: one schema, many operations."""

    name: str = ""
    description: str = ""
    operations: Dict[str, Operation] = {}

    def __init__(self, client: SpotifyClient):
        """Initialize the tool.

        Args:
            client: Spotify client used by every operation
        """
        self.client = client

    def properties(self) -> Dict[str, Any]:
        """JSON schema properties besides ``operation``."""
        raise NotImplementedError

    def input_schema(self) -> Dict[str, Any]:
        """Full JSON schema for the tool input."""
        names = list(self.operations)
        return {
            "type": "object",
            "properties": {
                "operation": {
                    "type": "string",
                    "enum": names,
                    "description": f"Operation: {', '.join(names)}",
                },
                **self.properties(),
            },
            "required": ["operation"],
        }

    def definition(self) -> types.Tool:
        """MCP tool definition."""
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema(),
        )

    async def execute(self, arguments: Dict[str, Any]) -> List[types.TextContent]:
        """Dispatch a call to the handler for ``arguments["operation"]``."""
        operation_name = arguments.get("operation")
        operation = self.operations.get(operation_name)
        if operation is None:
            return text_content(f"Unknown operation: {operation_name}")

        logger.info(f"{self.name}: {operation_name}")
        handler = getattr(self, operation.handler)
        return await safe_tool_execution(
            self.name, handler, arguments, format_context(operation.context, arguments)
        )


class OperationTool:
    """Single-purpose tool bound to one operation of a consolidated tool.

    Used by the non-consolidated tool set so both surfaces share validation
    and formatting.
    """

    def __init__(
        self,
        name: str,
        description: str,
        target: SpotifyTool,
        operation: str,
        properties: Optional[Dict[str, Any]] = None,
        required: Optional[List[str]] = None,
    ):
        if operation not in target.operations:
            raise ValueError(f"{target.name} has no operation '{operation}'")

        self.name = name
        self.description = description
        self.target = target
        self.operation = operation
        self._properties = properties or {}
        self._required = required or []

    def input_schema(self) -> Dict[str, Any]:
        """JSON schema for the tool input."""
        schema: Dict[str, Any] = {"type": "object", "properties": dict(self._properties)}
        if self._required:
            schema["required"] = list(self._required)
        return schema

    def definition(self) -> types.Tool:
        """MCP tool definition."""
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema(),
        )

    async def execute(self, arguments: Dict[str, Any]) -> List[types.TextContent]:
        """Run the bound operation."""
        return await self.target.execute({**arguments, "operation": self.operation})


def require(condition: Any, message: str) -> None:
    """Raise InvalidArgumentsError with ``message`` unless ``condition`` holds."""
    if not condition:
        raise InvalidArgumentsError(message)


def string_list(value: Any) -> List[str]:
    """Normalize a list argument, dropping empty entries."""
    if not value:
        return []
    if isinstance(value, str):
        value = [value]
    return [str(item) for item in value if item]
