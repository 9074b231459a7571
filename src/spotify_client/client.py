"""Async client for the Spotify Web API built on spotipy."""

import asyncio
import logging
from typing import Callable, List, Optional, TypeVar, Union

import requests
import spotipy
from spotipy.cache_handler import CacheFileHandler
from spotipy.exceptions import SpotifyException
from spotipy.oauth2 import SpotifyOAuth, SpotifyOauthError

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
    LibraryEntry,
    Page,
    PlaybackState,
    Playlist,
    QueueState,
    SpotifyConfig,
    Track,
    UserProfile,
)
from .transform import (
    transform_album,
    transform_artist,
    transform_audio_features,
    transform_entry,
    transform_page,
    transform_playback,
    transform_playlist,
    transform_queue,
    transform_track,
    transform_user,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

SEARCH_TYPES = ("track", "album", "artist", "playlist")
MAX_ALBUM_IDS = 20

SearchResult = Union[Track, Album, Artist, Playlist]


def translate_spotify_exception(exc: SpotifyException) -> SpotifyClientError:
    """Map a spotipy exception to the typed exception for its HTTP status.

    Args:
        exc: Exception raised by spotipy

    Returns:
        SpotifyClientError subclass matching the status
    """
    status = exc.http_status
    message = exc.msg or str(exc)

    if status == 400:
        return SpotifyParameterError(status, message)
    elif status == 401:
        return SpotifyAuthenticationError(status, message)
    elif status == 403:
        return SpotifyAuthorizationError(status, message)
    elif status == 404:
        return SpotifyNotFoundError(status, message)
    elif status == 429:
        headers = exc.headers or {}
        retry_after = headers.get("Retry-After")
        return SpotifyRateLimitError(
            status, message, int(retry_after) if retry_after is not None else None
        )
    return SpotifyClientError(status, message)


class SpotifyClient:
    """Async facade over a spotipy.Spotify instance.

    spotipy is synchronous; every call is executed in a worker thread through
    :meth:`request`, which is the single place where the underlying client is
    obtained and where failures are translated. Token acquisition and refresh
    are handled by spotipy's ``SpotifyOAuth`` auth manager and its cache file.

    Attributes:
        config: SpotifyConfig with credentials and OAuth settings

    Example:
        >>> client = SpotifyClient(SpotifyConfig(client_id="id", client_secret="secret"))
        >>> state = await client.get_currently_playing()
    """

    def __init__(self, config: SpotifyConfig, api: Optional[spotipy.Spotify] = None):
        """Initialize the client.

        Args:
            config: SpotifyConfig with credentials and OAuth settings
            api: Pre-built spotipy client (skips OAuth setup)
        """
        self.config = config
        self._api = api

    def _get_api(self) -> spotipy.Spotify:
        """Return the spotipy client, creating it on first use."""
        if self._api is not None:
            return self._api

        cache_handler = CacheFileHandler(cache_path=self.config.token_cache_path)
        auth_manager = SpotifyOAuth(
            client_id=self.config.client_id,
            client_secret=self.config.client_secret,
            redirect_uri=self.config.redirect_uri,
            scope=self.config.scope,
            cache_handler=cache_handler,
            open_browser=not cache_handler.get_cached_token(),
        )
        # retries=0: failures surface to the caller, spotipy does not back off
        self._api = spotipy.Spotify(
            auth_manager=auth_manager,
            requests_timeout=self.config.requests_timeout,
            retries=0,
            status_retries=0,
        )
        logger.info("Initialized Spotify client")
        return self._api

    async def request(self, operation: Callable[[spotipy.Spotify], T]) -> T:
        """Run ``operation`` against the spotipy client in a worker thread.

        Args:
            operation: Callable receiving the spotipy client

        Returns:
            Whatever ``operation`` returns

        Raises:
            SpotifyParameterError: For malformed requests (400)
            SpotifyAuthenticationError: For missing or expired tokens (401)
            SpotifyAuthorizationError: For missing scopes (403)
            SpotifyNotFoundError: For missing resources or devices (404)
            SpotifyRateLimitError: When rate limited (429)
            SpotifyConnectionError: When Spotify cannot be reached
            SpotifyClientError: For any other API error
        """

        def _call() -> T:
            return operation(self._get_api())

        try:
            return await asyncio.to_thread(_call)
        except SpotifyException as e:
            error = translate_spotify_exception(e)
            logger.error(f"Spotify API error {e.http_status}: {error.message}")
            raise error from e
        except SpotifyOauthError as e:
            logger.error(f"Spotify OAuth error: {e}")
            raise SpotifyAuthenticationError(401, str(e)) from e
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Unable to reach Spotify: {e}")
            raise SpotifyConnectionError(str(e)) from e

    # Catalog

    async def search(self, query: str, search_type: str, limit: int = 10) -> List[SearchResult]:
        """Search the catalog for one item type.

        Args:
            query: Search query
            search_type: One of track, album, artist, playlist
            limit: Maximum results (1-50)

        Returns:
            Parsed results; null entries Spotify returns are dropped
        """
        if search_type not in SEARCH_TYPES:
            raise ValueError(f"Unsupported search type: {search_type}")

        data = await self.request(lambda api: api.search(q=query, limit=limit, type=search_type))
        section = (data or {}).get(f"{search_type}s") or {}
        transform = {
            "track": transform_track,
            "album": transform_album,
            "artist": transform_artist,
            "playlist": transform_playlist,
        }[search_type]
        return [transform(item) for item in section.get("items") or [] if item]

    async def get_albums(self, album_ids: List[str]) -> List[Album]:
        """Get albums by ID (at most 20 per request)."""
        ids = album_ids[:MAX_ALBUM_IDS]
        data = await self.request(lambda api: api.albums(ids))
        return [transform_album(album) for album in (data or {}).get("albums") or [] if album]

    async def get_album_tracks(self, album_id: str, limit: int = 50, offset: int = 0) -> Page[Track]:
        """Get one page of an album's tracks."""
        data = await self.request(lambda api: api.album_tracks(album_id, limit=limit, offset=offset))
        return transform_page(data, transform_track)

    async def get_audio_features(self, track_id: str) -> Optional[AudioFeatures]:
        """Get audio features for a track (None when Spotify has none)."""
        data = await self.request(lambda api: api.audio_features([track_id]))
        if not data:
            return None
        return transform_audio_features(data[0])

    # Player

    async def get_currently_playing(self) -> Optional[PlaybackState]:
        """Get the currently playing item (None when nothing is active)."""
        data = await self.request(
            lambda api: api.currently_playing(additional_types="track,episode")
        )
        return transform_playback(data)

    async def get_queue(self) -> QueueState:
        """Get the user's playback queue."""
        data = await self.request(lambda api: api.queue())
        return transform_queue(data)

    async def start_playback(
        self,
        device_id: Optional[str] = None,
        context_uri: Optional[str] = None,
        uris: Optional[List[str]] = None,
    ) -> None:
        """Start a context or a list of tracks, or resume when neither is given."""
        await self.request(
            lambda api: api.start_playback(device_id=device_id, context_uri=context_uri, uris=uris)
        )

    async def pause_playback(self, device_id: Optional[str] = None) -> None:
        """Pause playback."""
        await self.request(lambda api: api.pause_playback(device_id=device_id))

    async def next_track(self, device_id: Optional[str] = None) -> None:
        """Skip to the next item."""
        await self.request(lambda api: api.next_track(device_id=device_id))

    async def previous_track(self, device_id: Optional[str] = None) -> None:
        """Skip to the previous item."""
        await self.request(lambda api: api.previous_track(device_id=device_id))

    async def add_to_queue(self, uri: str, device_id: Optional[str] = None) -> None:
        """Append a track or episode URI to the queue."""
        await self.request(lambda api: api.add_to_queue(uri, device_id=device_id))

    async def get_recently_played(self, limit: int = 50) -> Page[LibraryEntry]:
        """Get the user's play history."""
        data = await self.request(lambda api: api.current_user_recently_played(limit=limit))
        return transform_page(data, transform_entry)

    # Current user, playlists and library

    async def get_current_user(self) -> UserProfile:
        """Get the current user's profile."""
        data = await self.request(lambda api: api.current_user())
        return transform_user(data)

    async def get_playlists(self, limit: int = 50, offset: int = 0) -> Page[Playlist]:
        """Get the current user's playlists."""
        data = await self.request(
            lambda api: api.current_user_playlists(limit=limit, offset=offset)
        )
        return transform_page(data, transform_playlist)

    async def get_playlist_items(
        self, playlist_id: str, limit: int = 50, offset: int = 0
    ) -> Page[LibraryEntry]:
        """Get one page of a playlist's items."""
        data = await self.request(
            lambda api: api.playlist_items(playlist_id, limit=limit, offset=offset)
        )
        return transform_page(data, transform_entry)

    async def create_playlist(
        self, name: str, public: bool = False, description: Optional[str] = None
    ) -> Playlist:
        """Create a playlist owned by the current user.

        Args:
            name: Playlist name
            public: Whether the playlist is public (default private)
            description: Optional description

        Returns:
            The created playlist
        """
        user = await self.get_current_user()
        data = await self.request(
            lambda api: api.user_playlist_create(
                user.id, name, public=public, description=description or ""
            )
        )
        return transform_playlist(data)

    async def add_to_playlist(
        self, playlist_id: str, uris: List[str], position: Optional[int] = None
    ) -> None:
        """Add item URIs to a playlist, optionally at ``position``."""
        await self.request(
            lambda api: api.playlist_add_items(playlist_id, uris, position=position)
        )

    async def get_saved_tracks(self, limit: int = 50, offset: int = 0) -> Page[LibraryEntry]:
        """Get one page of the user's Liked Songs."""
        data = await self.request(
            lambda api: api.current_user_saved_tracks(limit=limit, offset=offset)
        )
        return transform_page(data, transform_entry)

    async def save_albums(self, album_ids: List[str]) -> None:
        """Save albums to the user's library (at most 20)."""
        ids = album_ids[:MAX_ALBUM_IDS]
        await self.request(lambda api: api.current_user_saved_albums_add(ids))

    async def remove_saved_albums(self, album_ids: List[str]) -> None:
        """Remove albums from the user's library (at most 20)."""
        ids = album_ids[:MAX_ALBUM_IDS]
        await self.request(lambda api: api.current_user_saved_albums_delete(ids))

    async def check_saved_albums(self, album_ids: List[str]) -> List[bool]:
        """Check which albums are saved, in the order given (at most 20)."""
        ids = album_ids[:MAX_ALBUM_IDS]
        data = await self.request(lambda api: api.current_user_saved_albums_contains(ids))
        return [bool(saved) for saved in data or []]
