"""spotify_info tool: playback state, queue and audio features."""

import logging
from typing import Any, Dict, List, Optional

from getsongbpm import GetSongBPMClient, SongTempo
from spotify_client import SpotifyClient
from spotify_client.exceptions import SpotifyClientError
from spotify_client.models import AudioFeatures, Episode, PlaybackState, PlayableItem, Track

from ..formatting import (
    describe_audio_features,
    describe_feature_summary,
    describe_now_playing,
    format_artists,
    format_duration,
)
from ..utils import clamp_limit
from .base import Operation, SpotifyTool, require

logger = logging.getLogger(__name__)

QUEUE_DEFAULT_LIMIT = 10
NOTHING_PLAYING = "Nothing is currently playing on Spotify"
NOT_A_TRACK = "Currently playing item is not a track (might be a podcast episode)"


def playback_header(state: PlaybackState) -> str:
    return f"# Currently {'Playing' if state.is_playing else 'Paused'}"


def describe_tempo(tempo: SongTempo) -> List[str]:
    """Tempo lookup block appended to a now-playing summary."""
    lines = []
    if tempo.tempo:
        lines.append(f"- BPM: {tempo.tempo}")
    if tempo.key:
        lines.append(f"- Key: {tempo.key}")
    if tempo.time_signature:
        lines.append(f"- Time Signature: {tempo.time_signature}")
    if not lines:
        return []
    return ["", "**Audio Features:**", *lines]


class InfoTool(SpotifyTool):
    """Read-only playback information."""

    name = "spotify_info"
    description = "Get current playback info, queue, and audio features"
    operations = {
        "now_playing": Operation("_now_playing", "getting current track"),
        "enriched_now_playing": Operation("_enriched_now_playing", "getting enriched track info"),
        "queue": Operation("_queue", "fetching queue"),
        "audio_features": Operation("_audio_features", "getting audio features"),
    }

    def __init__(self, client: SpotifyClient, tempo_client: Optional[GetSongBPMClient] = None):
        """Initialize the tool.

        Args:
            client: Spotify client
            tempo_client: Optional GetSongBPM client used when Spotify has no features
        """
        super().__init__(client)
        self.tempo_client = tempo_client

    def properties(self) -> Dict[str, Any]:
        return {
            "track_id": {"type": "string", "description": "Track ID (for audio_features)"},
            "limit": {
                "type": "integer",
                "minimum": 1,
                "maximum": 50,
                "description": "Queue limit",
            },
        }

    async def _current_track(self) -> tuple[Optional[PlaybackState], Optional[str]]:
        """Current playback state, or the message to return instead."""
        state = await self.client.get_currently_playing()
        if state is None or state.item is None:
            return None, NOTHING_PLAYING
        if not isinstance(state.item, Track):
            return None, NOT_A_TRACK
        return state, None

    async def _now_playing(self, arguments: Dict[str, Any]) -> str:
        state, message = await self._current_track()
        if state is None:
            return message

        lines = describe_now_playing(state.item, state.progress_ms)
        return f"{playback_header(state)}\n\n" + "\n".join(lines)

    async def _enriched_now_playing(self, arguments: Dict[str, Any]) -> str:
        state, message = await self._current_track()
        if state is None:
            return message
        track: Track = state.item

        lines = describe_now_playing(track, state.progress_ms)
        # Keep the ID last, after the feature summary
        id_line = lines.pop()

        features = await self._features_or_none(track.id)
        if features is not None:
            lines.extend(describe_feature_summary(features))
        lines.append(id_line)

        if features is None and self.tempo_client is not None:
            artist = track.artists[0].name if track.artists else ""
            tempo = await self.tempo_client.lookup(track.name, artist)
            if tempo is not None:
                lines.extend(describe_tempo(tempo))

        return f"{playback_header(state)}\n\n" + "\n".join(lines)

    async def _features_or_none(self, track_id: str) -> Optional[AudioFeatures]:
        """Audio features, or None when Spotify cannot provide them."""
        try:
            return await self.client.get_audio_features(track_id)
        except SpotifyClientError as e:
            logger.warning(f"Audio features unavailable for {track_id}: {e}")
            return None

    async def _queue(self, arguments: Dict[str, Any]) -> str:
        limit = clamp_limit(arguments.get("limit"), QUEUE_DEFAULT_LIMIT)

        queue = await self.client.get_queue()

        current_text = "Nothing is currently playing"
        if queue.currently_playing is not None:
            current_text = f"Currently Playing: {self._queue_item(queue.currently_playing)}"

        text = f"# Spotify Queue\n\n{current_text}"
        if not queue.queue:
            return f"{text}\n\nNo upcoming items in the queue"

        to_show = queue.queue[:limit]
        formatted = "\n".join(
            f"{i + 1}. {self._queue_item(item)} - ID: {getattr(item, 'id', 'Unknown')}"
            for i, item in enumerate(to_show)
        )
        return f"{text}\n\nNext {len(to_show)} in queue:\n\n{formatted}"

    @staticmethod
    def _queue_item(item: PlayableItem) -> str:
        if isinstance(item, Track):
            return f'"{item.name}" by {format_artists(item.artists)} ({format_duration(item.duration_ms)})'
        if isinstance(item, Episode):
            return f'"{item.name}" from {item.show_name or "Unknown"} ({format_duration(item.duration_ms)})'
        return f'"{item.name or "Unknown"}" ({item.item_type})'

    async def _audio_features(self, arguments: Dict[str, Any]) -> str:
        track_id = arguments.get("track_id")
        require(track_id, "track_id required")

        features = await self.client.get_audio_features(track_id)

        if features is None:
            return f"No audio features found for track ID: {track_id}"
        return "# Audio Features\n\n" + "\n".join(describe_audio_features(features))
