"""Spotify Web API client module for catalog, player and library access."""

__version__ = "1.0.0"

from .client import MAX_ALBUM_IDS, SEARCH_TYPES, SpotifyClient, translate_spotify_exception
from .exceptions import (
    SpotifyAuthenticationError,
    SpotifyAuthorizationError,
    SpotifyClientError,
    SpotifyConnectionError,
    SpotifyNotFoundError,
    SpotifyParameterError,
    SpotifyRateLimitError,
)
from .models import (
    Album,
    Artist,
    AudioFeatures,
    Episode,
    LibraryEntry,
    Page,
    PlayableItem,
    PlaybackState,
    Playlist,
    QueueState,
    SpotifyConfig,
    Track,
    UnknownItem,
    UserProfile,
)
from .transform import build_uri

__all__ = [
    # Client
    "SpotifyClient",
    "translate_spotify_exception",
    "build_uri",
    "SEARCH_TYPES",
    "MAX_ALBUM_IDS",
    # Models
    "SpotifyConfig",
    "Artist",
    "Track",
    "Episode",
    "UnknownItem",
    "PlayableItem",
    "Album",
    "Playlist",
    "LibraryEntry",
    "Page",
    "PlaybackState",
    "QueueState",
    "AudioFeatures",
    "UserProfile",
    # Exceptions
    "SpotifyClientError",
    "SpotifyParameterError",
    "SpotifyAuthenticationError",
    "SpotifyAuthorizationError",
    "SpotifyNotFoundError",
    "SpotifyRateLimitError",
    "SpotifyConnectionError",
]
