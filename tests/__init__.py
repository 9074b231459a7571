"""Test suite for the Spotify MCP Server.

All tests use a mocked SpotifyClient or a mocked spotipy instance to avoid
dependency on the real Spotify Web API.
"""
