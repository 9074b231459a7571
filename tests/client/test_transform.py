"""
Tests for spotify_client/transform.py.

Tests cover:
- build_uri: URI construction
- transform_playable: tagged dispatch between Track, Episode and UnknownItem
- transform_playlist / transform_entry: field fallbacks Spotify has used
- transform_page: paging metadata and null items
- transform_queue / transform_playback / transform_audio_features
"""
import pytest

from spotify_client.models import Episode, Track, UnknownItem
from spotify_client.transform import (
    build_uri,
    transform_album,
    transform_artists,
    transform_audio_features,
    transform_entry,
    transform_page,
    transform_playable,
    transform_playback,
    transform_playlist,
    transform_queue,
    transform_track,
)


class TestBuildUri:
    """Tests for build_uri function."""

    def test_track_uri(self):
        assert build_uri("track", "abc") == "spotify:track:abc"

    def test_album_uri(self):
        assert build_uri("album", "xyz") == "spotify:album:xyz"


class TestTransformPlayable:
    """Tests for transform_playable dispatch."""

    def test_none_stays_none(self):
        """A removed track is reported as None, not as an unknown item."""
        assert transform_playable(None) is None

    def test_track(self, track_payload):
        item = transform_playable(track_payload)

        assert isinstance(item, Track)
        assert item.id == "4uLU6hMCjMI75M1A2tKUQC"
        assert item.name == "Never Gonna Give You Up"
        assert [a.name for a in item.artists] == ["Rick Astley"]
        assert item.album_name == "Whenever You Need Somebody"
        assert item.duration_ms == 213573

    def test_episode(self, episode_payload):
        item = transform_playable(episode_payload)

        assert isinstance(item, Episode)
        assert item.show_name == "Daily Tech"
        assert item.duration_ms == 1686230

    def test_unknown_type(self):
        item = transform_playable({"type": "ad", "name": "Advert"})

        assert isinstance(item, UnknownItem)
        assert item.item_type == "ad"
        assert item.name == "Advert"

    def test_track_without_artists_is_not_a_track(self):
        """Local files and broken payloads without an artist list are not tracks."""
        item = transform_playable({"type": "track", "id": "x", "name": "Broken"})

        assert isinstance(item, UnknownItem)


class TestTransformTrack:
    """Tests for transform_track."""

    def test_simplified_track_has_no_album(self, track_payload):
        del track_payload["album"]

        track = transform_track(track_payload)

        assert track.album_name is None

    def test_missing_uri_is_built(self, track_payload):
        del track_payload["uri"]

        track = transform_track(track_payload)

        assert track.uri == "spotify:track:4uLU6hMCjMI75M1A2tKUQC"

    def test_null_artists_skipped(self):
        artists = transform_artists([{"id": "a", "name": "A"}, None])

        assert len(artists) == 1


class TestTransformPlaylist:
    """Tests for transform_playlist."""

    def test_tracks_total(self):
        playlist = transform_playlist(
            {
                "id": "p1",
                "name": "Road Trip",
                "owner": {"id": "u1", "display_name": "Jo"},
                "tracks": {"total": 42},
                "description": "Long drives",
            }
        )

        assert playlist.track_count == 42
        assert playlist.owner_name == "Jo"
        assert playlist.description == "Long drives"

    def test_items_total_and_owner_id_fallback(self):
        playlist = transform_playlist(
            {"id": "p2", "name": "Focus", "owner": {"id": "u2"}, "items": {"total": 7}}
        )

        assert playlist.track_count == 7
        assert playlist.owner_name == "u2"

    def test_empty_description_is_none(self):
        playlist = transform_playlist({"id": "p3", "name": "X", "description": ""})

        assert playlist.description is None
        assert playlist.track_count == 0


class TestTransformEntry:
    """Tests for transform_entry."""

    def test_saved_track(self, track_payload):
        entry = transform_entry({"added_at": "2024-01-02T03:04:05Z", "track": track_payload})

        assert isinstance(entry.item, Track)
        assert entry.added_at == "2024-01-02T03:04:05Z"

    def test_removed_track(self):
        entry = transform_entry({"added_at": "2024-01-02T03:04:05Z", "track": None})

        assert entry.item is None

    def test_item_key(self, track_payload):
        entry = transform_entry({"item": track_payload})

        assert isinstance(entry.item, Track)

    def test_play_history(self, track_payload):
        entry = transform_entry({"played_at": "2024-05-06T07:08:09.123Z", "track": track_payload})

        assert entry.played_at == "2024-05-06T07:08:09.123Z"


class TestTransformPage:
    """Tests for transform_page."""

    def test_paging_metadata(self):
        page = transform_page(
            {"items": [{"id": "a1", "name": "A"}], "total": 120, "offset": 50, "limit": 50},
            transform_album,
        )

        assert page.total == 120
        assert page.offset == 50
        assert page.limit == 50
        assert page.items[0].name == "A"

    def test_none_payload(self):
        page = transform_page(None, transform_album)

        assert page.items == []
        assert page.total == 0


class TestTransformPlaybackAndQueue:
    """Tests for transform_playback and transform_queue."""

    def test_nothing_playing(self):
        assert transform_playback(None) is None

    def test_playing(self, track_payload):
        state = transform_playback({"item": track_payload, "progress_ms": 1000, "is_playing": True})

        assert isinstance(state.item, Track)
        assert state.progress_ms == 1000
        assert state.is_playing is True

    def test_queue(self, track_payload, episode_payload):
        queue = transform_queue(
            {"currently_playing": track_payload, "queue": [episode_payload, track_payload, None]}
        )

        assert isinstance(queue.currently_playing, Track)
        assert len(queue.queue) == 2
        assert isinstance(queue.queue[0], Episode)

    def test_empty_queue(self):
        queue = transform_queue(None)

        assert queue.currently_playing is None
        assert queue.queue == []


class TestTransformAudioFeatures:
    """Tests for transform_audio_features."""

    def test_features(self, features_payload):
        features = transform_audio_features(features_payload)

        assert features.tempo == pytest.approx(113.3)
        assert features.key == 8
        assert features.mode == 1
        assert features.time_signature == 4

    def test_no_features(self):
        assert transform_audio_features(None) is None

    def test_missing_key_means_no_key(self, features_payload):
        features_payload["key"] = None

        features = transform_audio_features(features_payload)

        assert features.key == -1
