"""spotify_playback tool: playback control and playlist editing."""

from typing import Any, Dict, Optional

from spotify_client import build_uri

from .base import ITEM_TYPES, Operation, SpotifyTool, require, string_list


class PlaybackTool(SpotifyTool):
    """Mutating player and playlist operations."""

    name = "spotify_playback"
    description = "Control Spotify playback and manage playlists"
    operations = {
        "play": Operation("_play", "starting playback"),
        "pause": Operation("_pause", "pausing playback"),
        "resume": Operation("_resume", "resuming playback"),
        "skip_next": Operation("_skip_next", "skipping to next track"),
        "skip_prev": Operation("_skip_prev", "skipping to previous track"),
        "queue": Operation("_queue", "adding to queue"),
        "create_playlist": Operation("_create_playlist", "creating playlist"),
        "add_to_playlist": Operation("_add_to_playlist", "adding tracks to playlist"),
    }

    def properties(self) -> Dict[str, Any]:
        return {
            "uri": {"type": "string", "description": "Spotify URI (overrides type+id)"},
            "type": {"type": "string", "enum": ITEM_TYPES, "description": "Item type"},
            "id": {"type": "string", "description": "Spotify ID"},
            "device_id": {"type": "string", "description": "Target device ID"},
            "name": {"type": "string", "description": "Playlist name (for create_playlist)"},
            "description": {"type": "string", "description": "Playlist description"},
            "public": {"type": "boolean", "description": "Make playlist public"},
            "playlist_id": {"type": "string", "description": "Target playlist ID"},
            "track_ids": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Track IDs to add",
            },
            "position": {"type": "integer", "minimum": 0, "description": "Insert position"},
        }

    @staticmethod
    def _target_uri(arguments: Dict[str, Any]) -> str:
        """Explicit URI, or one built from type and id."""
        uri = arguments.get("uri")
        item_type = arguments.get("type")
        item_id = arguments.get("id")
        require(uri or (item_type and item_id), "Provide uri OR type+id")
        return uri or build_uri(item_type, item_id)

    @staticmethod
    def _device(arguments: Dict[str, Any]) -> Optional[str]:
        return arguments.get("device_id") or None

    async def _play(self, arguments: Dict[str, Any]) -> str:
        uri = self._target_uri(arguments)
        item_type = arguments.get("type")

        # Tracks play as a one-item list; albums, artists and playlists as a context
        if item_type == "track" or (not item_type and uri.startswith("spotify:track:")):
            await self.client.start_playback(device_id=self._device(arguments), uris=[uri])
        else:
            await self.client.start_playback(device_id=self._device(arguments), context_uri=uri)
        return f"Playing {item_type or 'music'}"

    async def _pause(self, arguments: Dict[str, Any]) -> str:
        await self.client.pause_playback(device_id=self._device(arguments))
        return "Paused"

    async def _resume(self, arguments: Dict[str, Any]) -> str:
        await self.client.start_playback(device_id=self._device(arguments))
        return "Resumed"

    async def _skip_next(self, arguments: Dict[str, Any]) -> str:
        await self.client.next_track(device_id=self._device(arguments))
        return "Skipped to next"

    async def _skip_prev(self, arguments: Dict[str, Any]) -> str:
        await self.client.previous_track(device_id=self._device(arguments))
        return "Skipped to previous"

    async def _queue(self, arguments: Dict[str, Any]) -> str:
        uri = self._target_uri(arguments)
        await self.client.add_to_queue(uri, device_id=self._device(arguments))
        return f"Added to queue: {uri}"

    async def _create_playlist(self, arguments: Dict[str, Any]) -> str:
        name = arguments.get("name")
        require(name, "name required")

        playlist = await self.client.create_playlist(
            name,
            public=bool(arguments.get("public", False)),
            description=arguments.get("description"),
        )
        return f'Created playlist "{name}" (ID: {playlist.id})'

    async def _add_to_playlist(self, arguments: Dict[str, Any]) -> str:
        playlist_id = arguments.get("playlist_id")
        track_ids = string_list(arguments.get("track_ids"))
        require(playlist_id and track_ids, "playlist_id and track_ids required")

        position = arguments.get("position")
        uris = [build_uri("track", track_id) for track_id in track_ids]
        await self.client.add_to_playlist(
            playlist_id, uris, position=int(position) if position is not None else None
        )
        return f"Added {len(track_ids)} tracks to playlist"
