"""Configuration management for the Spotify MCP server.

This module handles environment variable validation and configuration loading.
All configuration is read from environment variables (NO .env files) once at
startup and passed explicitly to the components that make outbound calls.
"""
import os
from dataclasses import dataclass
from typing import Optional

from spotify_client.models import (
    DEFAULT_REDIRECT_URI,
    DEFAULT_SCOPE,
    DEFAULT_TOKEN_CACHE,
    SpotifyConfig,
)

TOOLSETS = ("slim", "full")


class ConfigurationError(EnvironmentError):
    """Raised when required configuration is missing or invalid."""

    pass


@dataclass
class ServerConfig:
    """Configuration for the Spotify MCP server (reads from environment)."""

    # Required: Spotify application credentials
    spotify_client_id: str
    spotify_client_secret: str

    # Optional: OAuth
    spotify_redirect_uri: str = DEFAULT_REDIRECT_URI
    spotify_scope: str = DEFAULT_SCOPE
    spotify_token_cache: str = DEFAULT_TOKEN_CACHE
    request_timeout: float = 10.0

    # Optional: GetSongBPM tempo lookups
    getsongbpm_api_key: Optional[str] = None

    # Optional: "slim" (3 consolidated tools) or "full" (plus single-purpose read tools)
    toolset: str = "slim"

    @classmethod
    def from_environment(cls) -> 'ServerConfig':
        """Load configuration from environment variables (NO .env files).

        Returns:
            ServerConfig: Loaded configuration object

        Raises:
            ConfigurationError: If required variables are missing or values are invalid
        """
        required = {
            'SPOTIFY_CLIENT_ID': os.getenv('SPOTIFY_CLIENT_ID'),
            'SPOTIFY_CLIENT_SECRET': os.getenv('SPOTIFY_CLIENT_SECRET'),
        }

        missing = [var for var, value in required.items() if not value]
        if missing:
            raise ConfigurationError(
                f"Required environment variables missing: {', '.join(missing)}\n"
                f"Create an application at https://developer.spotify.com/dashboard and export its credentials.\n"
                f"Example: export SPOTIFY_CLIENT_ID='your-client-id'"
            )

        timeout_raw = os.getenv('SPOTIFY_REQUEST_TIMEOUT', '10')
        try:
            request_timeout = float(timeout_raw)
        except ValueError:
            raise ConfigurationError(
                f"SPOTIFY_REQUEST_TIMEOUT must be a number of seconds, got '{timeout_raw}'"
            )

        config = cls(
            spotify_client_id=required['SPOTIFY_CLIENT_ID'],
            spotify_client_secret=required['SPOTIFY_CLIENT_SECRET'],
            spotify_redirect_uri=os.getenv('SPOTIFY_REDIRECT_URI', DEFAULT_REDIRECT_URI),
            spotify_scope=os.getenv('SPOTIFY_SCOPE', DEFAULT_SCOPE),
            spotify_token_cache=os.path.expanduser(
                os.getenv('SPOTIFY_TOKEN_CACHE', DEFAULT_TOKEN_CACHE)
            ),
            request_timeout=request_timeout,
            getsongbpm_api_key=os.getenv('GETSONGBPM_API_KEY') or None,
            toolset=os.getenv('SPOTIFY_MCP_TOOLSET', 'slim').lower(),
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Validate field values.

        Raises:
            ConfigurationError: If any value is out of range
        """
        if self.toolset not in TOOLSETS:
            raise ConfigurationError(
                f"SPOTIFY_MCP_TOOLSET must be one of {', '.join(TOOLSETS)}, got '{self.toolset}'"
            )
        if self.request_timeout <= 0:
            raise ConfigurationError("SPOTIFY_REQUEST_TIMEOUT must be positive")
        if not self.spotify_redirect_uri.startswith(('http://', 'https://')):
            raise ConfigurationError("SPOTIFY_REDIRECT_URI must be a valid HTTP/HTTPS URL")

    @property
    def tempo_lookup_enabled(self) -> bool:
        """Whether GetSongBPM lookups are configured."""
        return bool(self.getsongbpm_api_key)

    def spotify_config(self) -> SpotifyConfig:
        """Build the SpotifyConfig for the API client."""
        return SpotifyConfig(
            client_id=self.spotify_client_id,
            client_secret=self.spotify_client_secret,
            redirect_uri=self.spotify_redirect_uri,
            scope=self.spotify_scope,
            token_cache_path=self.spotify_token_cache,
            requests_timeout=self.request_timeout,
        )
