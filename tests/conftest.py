"""Test configuration and shared fixtures for Spotify MCP Server tests.

This module provides pytest fixtures for mocking SpotifyClient and common test data.
All tests use a mocked SpotifyClient (or a mocked spotipy instance) to avoid
dependency on the real Spotify Web API.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from spotify_client.models import (
    Album,
    Artist,
    AudioFeatures,
    Episode,
    LibraryEntry,
    Page,
    PlaybackState,
    Playlist,
    QueueState,
    SpotifyConfig,
    Track,
    UserProfile,
)


@pytest.fixture
def mock_spotify_client():
    """Create a mocked SpotifyClient for testing.

    Returns:
        MagicMock: Mocked SpotifyClient with async methods
    """
    client = MagicMock()

    # Mock all SpotifyClient methods as AsyncMock
    client.search = AsyncMock(return_value=[])
    client.get_albums = AsyncMock(return_value=[])
    client.get_album_tracks = AsyncMock()
    client.get_audio_features = AsyncMock(return_value=None)
    client.get_currently_playing = AsyncMock(return_value=None)
    client.get_queue = AsyncMock(return_value=QueueState())
    client.start_playback = AsyncMock()
    client.pause_playback = AsyncMock()
    client.next_track = AsyncMock()
    client.previous_track = AsyncMock()
    client.add_to_queue = AsyncMock()
    client.get_recently_played = AsyncMock()
    client.get_current_user = AsyncMock(return_value=UserProfile(id="user-1", display_name="Test User"))
    client.get_playlists = AsyncMock()
    client.get_playlist_items = AsyncMock()
    client.create_playlist = AsyncMock()
    client.add_to_playlist = AsyncMock()
    client.get_saved_tracks = AsyncMock()
    client.save_albums = AsyncMock()
    client.remove_saved_albums = AsyncMock()
    client.check_saved_albums = AsyncMock(return_value=[])

    return client


@pytest.fixture
def mock_tempo_client():
    """Create a mocked GetSongBPMClient."""
    client = MagicMock()
    client.lookup = AsyncMock(return_value=None)
    client.close = AsyncMock()
    return client


@pytest.fixture
def spotify_config(tmp_path):
    """Valid SpotifyConfig with the token cache in a temp directory."""
    return SpotifyConfig(
        client_id="test-client-id",
        client_secret="test-client-secret",
        token_cache_path=str(tmp_path / "token.json"),
    )


@pytest.fixture
def sample_track():
    """Sample track for testing.

    Returns:
        Track: Fully populated track
    """
    return Track(
        id="track-123",
        name="Come Together",
        artists=[Artist(id="artist-1", name="The Beatles")],
        album_name="Abbey Road",
        duration_ms=259000,
        uri="spotify:track:track-123",
    )


@pytest.fixture
def sample_episode():
    """Sample podcast episode."""
    return Episode(
        id="episode-9",
        name="Episode 42",
        show_name="Some Podcast",
        duration_ms=1800000,
        uri="spotify:episode:episode-9",
    )


@pytest.fixture
def sample_album():
    """Sample album for testing."""
    return Album(
        id="album-789",
        name="Abbey Road",
        artists=[Artist(id="artist-1", name="The Beatles")],
        total_tracks=17,
        release_date="1969-09-26",
    )


@pytest.fixture
def sample_playlist():
    """Sample playlist for testing."""
    return Playlist(
        id="playlist-001",
        name="Classic Rock Favorites",
        owner_name="Test User",
        track_count=25,
        description="Best of 70s and 80s rock",
    )


@pytest.fixture
def sample_features():
    """Sample audio features for testing."""
    return AudioFeatures(
        track_id="track-123",
        tempo=165.2,
        key=9,
        mode=0,
        energy=0.376,
        danceability=0.533,
        valence=0.187,
        acousticness=0.0302,
        instrumentalness=0.248,
        liveness=0.0926,
        speechiness=0.0393,
        loudness=-11.913,
        time_signature=4,
    )


@pytest.fixture
def playing_state(sample_track):
    """Playback state with sample_track playing at 1:05."""
    return PlaybackState(item=sample_track, progress_ms=65000, is_playing=True)


def make_page(items, total=None, offset=0, limit=50):
    """Build a Page for mocked client responses."""
    return Page(items=list(items), total=len(items) if total is None else total, offset=offset, limit=limit)


def make_entries(*items, added_at=None, played_at=None):
    """Wrap playable items in LibraryEntry objects."""
    return [LibraryEntry(item=item, added_at=added_at, played_at=played_at) for item in items]


@pytest.fixture
def track_payload():
    """Raw Spotify track object."""
    return {
        "type": "track",
        "id": "4uLU6hMCjMI75M1A2tKUQC",
        "name": "Never Gonna Give You Up",
        "uri": "spotify:track:4uLU6hMCjMI75M1A2tKUQC",
        "duration_ms": 213573,
        "artists": [{"id": "0gxyHStUsqpMadRV0Di1Qt", "name": "Rick Astley", "type": "artist"}],
        "album": {"id": "6XhjNHCyCDyyGJRM5mg40G", "name": "Whenever You Need Somebody"},
    }


@pytest.fixture
def episode_payload():
    """Raw Spotify episode object."""
    return {
        "type": "episode",
        "id": "512ojhOuo1ktJprKbVcKyQ",
        "name": "Tech News",
        "uri": "spotify:episode:512ojhOuo1ktJprKbVcKyQ",
        "duration_ms": 1686230,
        "show": {"id": "38bS44xjbVVZ3No3ByF1dJ", "name": "Daily Tech"},
    }


@pytest.fixture
def features_payload():
    """Raw Spotify audio features object."""
    return {
        "id": "4uLU6hMCjMI75M1A2tKUQC",
        "tempo": 113.3,
        "key": 8,
        "mode": 1,
        "energy": 0.939,
        "danceability": 0.727,
        "valence": 0.915,
        "acousticness": 0.144,
        "instrumentalness": 0.0,
        "liveness": 0.151,
        "speechiness": 0.0369,
        "loudness": -11.855,
        "time_signature": 4,
    }
