"""Data models for Spotify Web API integration."""

import os
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar, Union

DEFAULT_REDIRECT_URI = "http://127.0.0.1:8888/callback"
DEFAULT_TOKEN_CACHE = os.path.expanduser("~/.cache/spotify-mcp/token.json")
DEFAULT_SCOPE = " ".join(
    [
        "user-read-playback-state",
        "user-modify-playback-state",
        "user-read-currently-playing",
        "user-read-recently-played",
        "user-library-read",
        "user-library-modify",
        "playlist-read-private",
        "playlist-modify-private",
        "playlist-modify-public",
    ]
)

T = TypeVar("T")


@dataclass
class SpotifyConfig:
    """Configuration for connecting to the Spotify Web API.

    Attributes:
        client_id: Spotify application client ID
        client_secret: Spotify application client secret
        redirect_uri: OAuth redirect URI registered for the application
        scope: Space-separated OAuth scopes
        token_cache_path: File where spotipy persists the OAuth token
        requests_timeout: Per-request timeout in seconds
    """

    client_id: str
    client_secret: str
    redirect_uri: str = DEFAULT_REDIRECT_URI
    scope: str = DEFAULT_SCOPE
    token_cache_path: str = DEFAULT_TOKEN_CACHE
    requests_timeout: float = 10.0

    def __post_init__(self):
        """Validate configuration on initialization."""
        if not self.client_id:
            raise ValueError("client_id is required")
        if not self.client_secret:
            raise ValueError("client_secret is required")
        if not self.redirect_uri.startswith(("http://", "https://")):
            raise ValueError("redirect_uri must be a valid HTTP/HTTPS URL")
        if self.requests_timeout <= 0:
            raise ValueError("requests_timeout must be positive")


@dataclass
class Artist:
    """Artist reference (simplified artist object)."""

    id: str
    name: str


@dataclass
class Track:
    """Playable track.

    Attributes:
        id: Spotify track ID
        name: Track title
        artists: Credited artists in order
        album_name: Album title (None for album track listings)
        duration_ms: Duration in milliseconds
        uri: Spotify URI (spotify:track:<id>)
    """

    id: str
    name: str
    artists: List[Artist]
    album_name: Optional[str]
    duration_ms: int
    uri: str


@dataclass
class Episode:
    """Podcast episode, the other playable item Spotify returns."""

    id: str
    name: str
    show_name: Optional[str]
    duration_ms: int
    uri: str


@dataclass
class UnknownItem:
    """Playable payload of a type this client does not model."""

    item_type: str
    name: Optional[str] = None


PlayableItem = Union[Track, Episode, UnknownItem]


@dataclass
class Album:
    """Album metadata from search or the albums endpoint."""

    id: str
    name: str
    artists: List[Artist]
    total_tracks: int
    release_date: Optional[str] = None


@dataclass
class Playlist:
    """Playlist summary.

    Attributes:
        id: Spotify playlist ID
        name: Playlist name
        owner_name: Owner display name (falls back to owner ID)
        track_count: Number of items in the playlist
        description: Playlist description (may be empty)
    """

    id: str
    name: str
    owner_name: Optional[str]
    track_count: int
    description: Optional[str] = None


@dataclass
class LibraryEntry:
    """Wrapper Spotify puts around playlist items, saved tracks and play history.

    ``item`` is None when the underlying track was removed from Spotify.
    """

    item: Optional[PlayableItem]
    added_at: Optional[str] = None
    played_at: Optional[str] = None


@dataclass
class Page(Generic[T]):
    """One page of a paginated listing."""

    items: List[T]
    total: int
    offset: int = 0
    limit: int = 0


@dataclass
class PlaybackState:
    """Currently playing item and progress."""

    item: Optional[PlayableItem]
    progress_ms: int = 0
    is_playing: bool = False


@dataclass
class QueueState:
    """User's playback queue."""

    currently_playing: Optional[PlayableItem] = None
    queue: List[PlayableItem] = field(default_factory=list)


@dataclass
class AudioFeatures:
    """Audio analysis attributes for one track.

    Attributes:
        track_id: Spotify track ID
        tempo: Estimated tempo in BPM
        key: Pitch class 0-11, or -1 when no key was detected
        mode: 1 for major, 0 for minor
        energy, danceability, valence, acousticness, instrumentalness,
        liveness, speechiness: Confidence values between 0 and 1
        loudness: Average loudness in dB
        time_signature: Estimated beats per bar
    """

    track_id: str
    tempo: float
    key: int
    mode: int
    energy: float
    danceability: float
    valence: float
    acousticness: float
    instrumentalness: float
    liveness: float
    speechiness: float
    loudness: float
    time_signature: int


@dataclass
class UserProfile:
    """Current user's public profile."""

    id: str
    display_name: Optional[str] = None
