"""Tests for the spotify_playback tool."""

import pytest

from spotify_client.exceptions import SpotifyNotFoundError
from spotify_client.models import Playlist
from spotify_mcp.tools import PlaybackTool


@pytest.fixture
def playback(mock_spotify_client):
    return PlaybackTool(mock_spotify_client)


async def run(tool, **arguments):
    """Execute the tool and return the response text."""
    result = await tool.execute(arguments)
    assert len(result) == 1
    return result[0].text


# play


@pytest.mark.asyncio
async def test_play_track_by_type_and_id(playback, mock_spotify_client):
    """Tracks are started as a one-item URI list."""
    text = await run(playback, operation="play", type="track", id="track-123")

    assert text == "Playing track"
    mock_spotify_client.start_playback.assert_called_once_with(
        device_id=None, uris=["spotify:track:track-123"]
    )


@pytest.mark.asyncio
async def test_play_album_as_context(playback, mock_spotify_client):
    text = await run(playback, operation="play", type="album", id="album-789", device_id="dev-1")

    assert text == "Playing album"
    mock_spotify_client.start_playback.assert_called_once_with(
        device_id="dev-1", context_uri="spotify:album:album-789"
    )


@pytest.mark.asyncio
async def test_play_uri_overrides_type_and_id(playback, mock_spotify_client):
    text = await run(
        playback, operation="play", uri="spotify:playlist:pl-1", type="playlist", id="ignored"
    )

    assert text == "Playing playlist"
    mock_spotify_client.start_playback.assert_called_once_with(
        device_id=None, context_uri="spotify:playlist:pl-1"
    )


@pytest.mark.asyncio
async def test_play_bare_track_uri(playback, mock_spotify_client):
    text = await run(playback, operation="play", uri="spotify:track:abc")

    assert text == "Playing music"
    mock_spotify_client.start_playback.assert_called_once_with(
        device_id=None, uris=["spotify:track:abc"]
    )


@pytest.mark.asyncio
async def test_play_requires_target(playback, mock_spotify_client):
    text = await run(playback, operation="play", type="track")

    assert text == "Error: Provide uri OR type+id"
    mock_spotify_client.start_playback.assert_not_called()


@pytest.mark.asyncio
async def test_play_without_active_device(playback, mock_spotify_client):
    mock_spotify_client.start_playback.side_effect = SpotifyNotFoundError(
        404, "Player command failed: No active device found"
    )

    text = await run(playback, operation="play", uri="spotify:album:x")

    assert text.startswith("Error starting playback: ")
    assert "spotify:album:x" in text


# Transport controls


@pytest.mark.asyncio
async def test_pause_resume_skip(playback, mock_spotify_client):
    assert await run(playback, operation="pause") == "Paused"
    assert await run(playback, operation="resume", device_id="dev-1") == "Resumed"
    assert await run(playback, operation="skip_next") == "Skipped to next"
    assert await run(playback, operation="skip_prev") == "Skipped to previous"

    mock_spotify_client.pause_playback.assert_called_once_with(device_id=None)
    mock_spotify_client.start_playback.assert_called_once_with(device_id="dev-1")
    mock_spotify_client.next_track.assert_called_once_with(device_id=None)
    mock_spotify_client.previous_track.assert_called_once_with(device_id=None)


@pytest.mark.asyncio
async def test_empty_device_id_is_ignored(playback, mock_spotify_client):
    await run(playback, operation="pause", device_id="")

    mock_spotify_client.pause_playback.assert_called_once_with(device_id=None)


@pytest.mark.asyncio
async def test_queue(playback, mock_spotify_client):
    text = await run(playback, operation="queue", type="track", id="abc")

    assert text == "Added to queue: spotify:track:abc"
    mock_spotify_client.add_to_queue.assert_called_once_with("spotify:track:abc", device_id=None)


@pytest.mark.asyncio
async def test_queue_requires_target(playback):
    assert await run(playback, operation="queue") == "Error: Provide uri OR type+id"


# Playlists


@pytest.mark.asyncio
async def test_create_playlist(playback, mock_spotify_client):
    mock_spotify_client.create_playlist.return_value = Playlist(
        id="new-pl", name="Road Trip", owner_name="Test User", track_count=0
    )

    text = await run(playback, operation="create_playlist", name="Road Trip", description="Driving")

    assert text == 'Created playlist "Road Trip" (ID: new-pl)'
    mock_spotify_client.create_playlist.assert_called_once_with(
        "Road Trip", public=False, description="Driving"
    )


@pytest.mark.asyncio
async def test_create_public_playlist(playback, mock_spotify_client):
    mock_spotify_client.create_playlist.return_value = Playlist(
        id="p", name="Mix", owner_name=None, track_count=0
    )

    await run(playback, operation="create_playlist", name="Mix", public=True)

    mock_spotify_client.create_playlist.assert_called_once_with("Mix", public=True, description=None)


@pytest.mark.asyncio
async def test_create_playlist_requires_name(playback, mock_spotify_client):
    assert await run(playback, operation="create_playlist") == "Error: name required"
    mock_spotify_client.create_playlist.assert_not_called()


@pytest.mark.asyncio
async def test_add_to_playlist(playback, mock_spotify_client):
    text = await run(
        playback, operation="add_to_playlist", playlist_id="pl-1", track_ids=["a", "b", "c"], position=0
    )

    assert text == "Added 3 tracks to playlist"
    mock_spotify_client.add_to_playlist.assert_called_once_with(
        "pl-1", ["spotify:track:a", "spotify:track:b", "spotify:track:c"], position=0
    )


@pytest.mark.asyncio
async def test_add_to_playlist_appends_by_default(playback, mock_spotify_client):
    await run(playback, operation="add_to_playlist", playlist_id="pl-1", track_ids=["a"])

    mock_spotify_client.add_to_playlist.assert_called_once_with(
        "pl-1", ["spotify:track:a"], position=None
    )


@pytest.mark.asyncio
async def test_add_to_playlist_requires_arguments(playback):
    text = await run(playback, operation="add_to_playlist", playlist_id="pl-1", track_ids=[])

    assert text == "Error: playlist_id and track_ids required"
