"""Now-playing summary enriched with GetSongBPM tempo data."""

from typing import Any, Dict

from getsongbpm import GetSongBPMClient
from spotify_client import SpotifyClient
from spotify_client.models import Track

from ..formatting import describe_now_playing
from .base import Operation, SpotifyTool
from .info import NOT_A_TRACK, NOTHING_PLAYING, describe_tempo, playback_header


class TempoTool(SpotifyTool):
    """Looks up BPM, key and time signature for the current track on GetSongBPM."""

    name = "get_enriched_now_playing"
    description = "Get currently playing track with enriched metadata (BPM, key, time signature)"
    operations = {
        "lookup": Operation("_lookup", "getting enriched track info"),
    }

    def __init__(self, client: SpotifyClient, tempo_client: GetSongBPMClient):
        super().__init__(client)
        self.tempo_client = tempo_client

    def properties(self) -> Dict[str, Any]:
        return {}

    async def _lookup(self, arguments: Dict[str, Any]) -> str:
        state = await self.client.get_currently_playing()
        if state is None or state.item is None:
            return NOTHING_PLAYING
        if not isinstance(state.item, Track):
            return NOT_A_TRACK
        track = state.item

        lines = describe_now_playing(track, state.progress_ms)

        artist = track.artists[0].name if track.artists else ""
        tempo = await self.tempo_client.lookup(track.name, artist)
        if tempo is not None:
            lines.extend(describe_tempo(tempo))

        return f"{playback_header(state)}\n\n" + "\n".join(lines)
