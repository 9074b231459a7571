"""Spotify MCP Server - Model Context Protocol integration for the Spotify Web API.

This package provides a Model Context Protocol (MCP) server that exposes Spotify
search, playback control, playlists, saved items and audio features to LLM
applications like Claude Desktop.

Components:
    - server.py: Main MCP server class with stdio transport
    - tools/: Consolidated playback, library and info tools plus the read tool set
    - formatting.py: Text rendering for tool responses
    - config.py: Environment configuration
    - utils.py: Error handling and argument helpers
"""

__version__ = "2.0.0"
