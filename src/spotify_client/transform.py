"""Transform raw Spotify Web API payloads into typed models."""

import logging
from typing import Any, Callable, Dict, List, Optional, TypeVar

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
    Track,
    UnknownItem,
    UserProfile,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def build_uri(item_type: str, item_id: str) -> str:
    """Build a Spotify URI from an item type and ID.

    Examples:
        >>> build_uri("track", "4uLU6hMCjMI75M1A2tKUQC")
        'spotify:track:4uLU6hMCjMI75M1A2tKUQC'
        >>> build_uri("playlist", "37i9dQZF1DXcBWIGoYBM5M")
        'spotify:playlist:37i9dQZF1DXcBWIGoYBM5M'
    """
    return f"spotify:{item_type}:{item_id}"


def transform_artists(data: Optional[List[Dict[str, Any]]]) -> List[Artist]:
    """Transform a list of artist objects, skipping null entries.

    Examples:
        >>> transform_artists([{"id": "a1", "name": "Daft Punk"}])
        [Artist(id='a1', name='Daft Punk')]
        >>> transform_artists(None)
        []
    """
    if not data:
        return []
    return [
        Artist(id=artist.get("id") or "", name=artist.get("name") or "Unknown")
        for artist in data
        if artist
    ]


def transform_track(data: Dict[str, Any]) -> Track:
    """Transform a full or simplified track object.

    Simplified tracks (album listings) carry no album, so ``album_name`` is None.
    """
    album = data.get("album") or {}
    track_id = data.get("id") or ""
    return Track(
        id=track_id,
        name=data.get("name") or "Unknown",
        artists=transform_artists(data.get("artists")),
        album_name=album.get("name"),
        duration_ms=data.get("duration_ms") or 0,
        uri=data.get("uri") or build_uri("track", track_id),
    )


def transform_playable(data: Optional[Dict[str, Any]]) -> Optional[PlayableItem]:
    """Transform a playable payload, dispatching on its ``type`` tag.

    Args:
        data: Track, episode or other playable object (may be None)

    Returns:
        Track, Episode or UnknownItem; None when the payload is None

    Examples:
        >>> transform_playable(None) is None
        True
        >>> transform_playable({"type": "ad"})
        UnknownItem(item_type='ad', name=None)
    """
    if data is None:
        return None

    item_type = data.get("type")
    if item_type == "track" and isinstance(data.get("artists"), list):
        return transform_track(data)
    if item_type == "episode":
        show = data.get("show") or {}
        episode_id = data.get("id") or ""
        return Episode(
            id=episode_id,
            name=data.get("name") or "Unknown",
            show_name=show.get("name"),
            duration_ms=data.get("duration_ms") or 0,
            uri=data.get("uri") or build_uri("episode", episode_id),
        )

    logger.debug(f"Unmodelled playable item type: {item_type}")
    return UnknownItem(item_type=item_type or "unknown", name=data.get("name"))


def transform_album(data: Dict[str, Any]) -> Album:
    """Transform a full or simplified album object."""
    return Album(
        id=data.get("id") or "",
        name=data.get("name") or "Unknown",
        artists=transform_artists(data.get("artists")),
        total_tracks=data.get("total_tracks") or 0,
        release_date=data.get("release_date"),
    )


def transform_artist(data: Dict[str, Any]) -> Artist:
    """Transform a full artist object."""
    return Artist(id=data.get("id") or "", name=data.get("name") or "Unknown")


def transform_playlist(data: Dict[str, Any]) -> Playlist:
    """Transform a simplified playlist object.

    Spotify has returned the item count under both ``tracks`` and ``items``;
    either is accepted.
    """
    owner = data.get("owner") or {}
    tracks = data.get("tracks") or data.get("items") or {}
    total = tracks.get("total") if isinstance(tracks, dict) else None
    return Playlist(
        id=data.get("id") or "",
        name=data.get("name") or "Unknown Playlist",
        owner_name=owner.get("display_name") or owner.get("id"),
        track_count=total or 0,
        description=data.get("description") or None,
    )


def transform_entry(data: Dict[str, Any]) -> LibraryEntry:
    """Transform a playlist item, saved track or play history object.

    Playlist items have carried the playable object under both ``track``
    and ``item``.
    """
    payload = data.get("track")
    if payload is None:
        payload = data.get("item")
    return LibraryEntry(
        item=transform_playable(payload),
        added_at=data.get("added_at"),
        played_at=data.get("played_at"),
    )


def transform_page(
    data: Optional[Dict[str, Any]], transform: Callable[[Dict[str, Any]], T]
) -> Page[T]:
    """Transform a paging object, applying ``transform`` to every non-null item.

    Examples:
        >>> page = transform_page({"items": [{"id": "a", "name": "A"}], "total": 7, "offset": 5, "limit": 1}, transform_artist)
        >>> (len(page.items), page.total, page.offset)
        (1, 7, 5)
    """
    if not data:
        return Page(items=[], total=0)
    items = [transform(item) for item in data.get("items") or [] if item is not None]
    return Page(
        items=items,
        total=data.get("total") or 0,
        offset=data.get("offset") or 0,
        limit=data.get("limit") or 0,
    )


def transform_playback(data: Optional[Dict[str, Any]]) -> Optional[PlaybackState]:
    """Transform a currently-playing payload (None when nothing is active)."""
    if not data:
        return None
    return PlaybackState(
        item=transform_playable(data.get("item")),
        progress_ms=data.get("progress_ms") or 0,
        is_playing=bool(data.get("is_playing")),
    )


def transform_queue(data: Optional[Dict[str, Any]]) -> QueueState:
    """Transform the user queue payload."""
    if not data:
        return QueueState()
    upcoming = [transform_playable(item) for item in data.get("queue") or [] if item]
    return QueueState(
        currently_playing=transform_playable(data.get("currently_playing")),
        queue=[item for item in upcoming if item is not None],
    )


def transform_audio_features(data: Optional[Dict[str, Any]]) -> Optional[AudioFeatures]:
    """Transform an audio features object (None when Spotify has none)."""
    if not data:
        return None
    key = data.get("key")
    return AudioFeatures(
        track_id=data.get("id") or "",
        tempo=float(data.get("tempo") or 0.0),
        key=-1 if key is None else int(key),
        mode=int(data.get("mode") or 0),
        energy=float(data.get("energy") or 0.0),
        danceability=float(data.get("danceability") or 0.0),
        valence=float(data.get("valence") or 0.0),
        acousticness=float(data.get("acousticness") or 0.0),
        instrumentalness=float(data.get("instrumentalness") or 0.0),
        liveness=float(data.get("liveness") or 0.0),
        speechiness=float(data.get("speechiness") or 0.0),
        loudness=float(data.get("loudness") or 0.0),
        time_signature=int(data.get("time_signature") or 4),
    )


def transform_user(data: Dict[str, Any]) -> UserProfile:
    """Transform the current user's profile."""
    return UserProfile(id=data["id"], display_name=data.get("display_name"))
