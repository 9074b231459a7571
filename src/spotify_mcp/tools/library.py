"""spotify_library tool: search, playlists, saved tracks, history and albums."""

from typing import Any, Dict, List

from spotify_client import MAX_ALBUM_IDS
from spotify_client.models import Album, Artist, Playlist, Track

from ..formatting import (
    format_album,
    format_entry_line,
    format_playlist,
    format_range_header,
    format_track,
    numbered,
)
from ..utils import clamp_limit, clamp_offset
from .base import ITEM_TYPES, Operation, SpotifyTool, require, string_list

SEARCH_DEFAULT_LIMIT = 10
LIST_DEFAULT_LIMIT = 50


class LibraryTool(SpotifyTool):
    """Search the catalog and browse the user's library."""

    name = "spotify_library"
    description = "Search and browse Spotify library, playlists, albums, and saved tracks"
    operations = {
        "search": Operation("_search", "searching for {type}s"),
        "playlists": Operation("_playlists", "getting playlists"),
        "playlist_tracks": Operation("_playlist_tracks", "getting playlist tracks"),
        "saved_tracks": Operation("_saved_tracks", "getting saved tracks"),
        "recently_played": Operation("_recently_played", "getting recently played tracks"),
        "albums": Operation("_albums", "getting albums"),
        "album_tracks": Operation("_album_tracks", "getting album tracks"),
        "save_album": Operation("_save_album", "saving albums"),
        "remove_album": Operation("_remove_album", "removing albums"),
        "check_saved": Operation("_check_saved", "checking saved albums"),
    }

    def properties(self) -> Dict[str, Any]:
        return {
            "query": {"type": "string", "description": "Search query"},
            "type": {"type": "string", "enum": ITEM_TYPES, "description": "Search type"},
            "playlist_id": {"type": "string", "description": "Playlist ID"},
            "album_ids": {
                "type": "array",
                "items": {"type": "string"},
                "description": f"Album IDs (max {MAX_ALBUM_IDS})",
            },
            "limit": {
                "type": "integer",
                "minimum": 1,
                "maximum": 50,
                "description": "Result limit (1-50)",
            },
            "offset": {"type": "integer", "minimum": 0, "description": "Pagination offset"},
        }

    async def _search(self, arguments: Dict[str, Any]) -> str:
        query = arguments.get("query")
        search_type = arguments.get("type")
        require(query and search_type, "query and type required")
        require(search_type in ITEM_TYPES, f"type must be one of {', '.join(ITEM_TYPES)}")
        limit = clamp_limit(arguments.get("limit"), SEARCH_DEFAULT_LIMIT)

        results = await self.client.search(query, search_type, limit)

        lines = [self._format_search_result(item) for item in results]
        if not lines:
            return f'No {search_type} results found for "{query}"'
        return f'# Search results for "{query}" (type: {search_type})\n\n{numbered(lines)}'

    @staticmethod
    def _format_search_result(item: Any) -> str:
        if isinstance(item, Track):
            return format_track(item)
        elif isinstance(item, Album):
            return format_album(item)
        elif isinstance(item, Playlist):
            return format_playlist(item)
        elif isinstance(item, Artist):
            return f"{item.name} - ID: {item.id}"
        raise TypeError(f"Unexpected search result: {item!r}")

    async def _playlists(self, arguments: Dict[str, Any]) -> str:
        limit = clamp_limit(arguments.get("limit"), LIST_DEFAULT_LIMIT)
        offset = clamp_offset(arguments.get("offset"))

        page = await self.client.get_playlists(limit=limit, offset=offset)

        if not page.items:
            return "You don't have any playlists on Spotify"
        lines = [format_playlist(playlist, with_owner=False) for playlist in page.items]
        header = format_range_header("Your Spotify Playlists", offset, len(page.items), page.total)
        return f"{header}\n\n{numbered(lines, start=offset + 1)}"

    async def _playlist_tracks(self, arguments: Dict[str, Any]) -> str:
        playlist_id = arguments.get("playlist_id")
        require(playlist_id, "playlist_id required")
        limit = clamp_limit(arguments.get("limit"), LIST_DEFAULT_LIMIT)
        offset = clamp_offset(arguments.get("offset"))

        page = await self.client.get_playlist_items(playlist_id, limit=limit, offset=offset)

        if not page.items:
            return "This playlist doesn't have any tracks"
        lines = [
            format_entry_line(offset + i + 1, entry) for i, entry in enumerate(page.items)
        ]
        header = format_range_header("Tracks in Playlist", offset, len(page.items), page.total)
        return f"{header}\n\n" + "\n".join(lines)

    async def _saved_tracks(self, arguments: Dict[str, Any]) -> str:
        limit = clamp_limit(arguments.get("limit"), LIST_DEFAULT_LIMIT)
        offset = clamp_offset(arguments.get("offset"))

        page = await self.client.get_saved_tracks(limit=limit, offset=offset)

        if not page.items:
            return "You don't have any saved tracks in your Liked Songs"
        lines = [
            format_entry_line(offset + i + 1, entry, with_added=True)
            for i, entry in enumerate(page.items)
        ]
        header = format_range_header("Your Liked Songs", offset, len(page.items), page.total)
        return f"{header}\n\n" + "\n".join(lines)

    async def _recently_played(self, arguments: Dict[str, Any]) -> str:
        limit = clamp_limit(arguments.get("limit"), LIST_DEFAULT_LIMIT)

        page = await self.client.get_recently_played(limit=limit)

        if not page.items:
            return "You don't have any recently played tracks on Spotify"
        lines = [format_entry_line(i + 1, entry) for i, entry in enumerate(page.items)]
        return "# Recently Played Tracks\n\n" + "\n".join(lines)

    async def _albums(self, arguments: Dict[str, Any]) -> str:
        album_ids = self._album_ids(arguments)

        albums = await self.client.get_albums(album_ids)

        if not albums:
            return "No albums found"
        lines = [format_album(album, with_track_count=True) for album in albums]
        return numbered(lines)

    async def _album_tracks(self, arguments: Dict[str, Any]) -> str:
        album_ids = string_list(arguments.get("album_ids"))
        require(album_ids, "album_ids[0] required")
        limit = clamp_limit(arguments.get("limit"), LIST_DEFAULT_LIMIT)
        offset = clamp_offset(arguments.get("offset"))

        page = await self.client.get_album_tracks(album_ids[0], limit=limit, offset=offset)

        if not page.items:
            return "This album doesn't have any tracks"
        lines = [format_track(track) for track in page.items]
        header = format_range_header("Album Tracks", offset, len(page.items), page.total)
        return f"{header}\n\n{numbered(lines, start=offset + 1)}"

    async def _save_album(self, arguments: Dict[str, Any]) -> str:
        album_ids = self._album_ids(arguments)
        await self.client.save_albums(album_ids)
        return f"Saved {len(album_ids)} album(s)"

    async def _remove_album(self, arguments: Dict[str, Any]) -> str:
        album_ids = self._album_ids(arguments)
        await self.client.remove_saved_albums(album_ids)
        return f"Removed {len(album_ids)} album(s)"

    async def _check_saved(self, arguments: Dict[str, Any]) -> str:
        album_ids = self._album_ids(arguments)

        saved = await self.client.check_saved_albums(album_ids)

        return "\n".join(
            f"{album_id}: {'saved' if i < len(saved) and saved[i] else 'not saved'}"
            for i, album_id in enumerate(album_ids)
        )

    @staticmethod
    def _album_ids(arguments: Dict[str, Any]) -> List[str]:
        """Validated album IDs, truncated to the first 20."""
        album_ids = string_list(arguments.get("album_ids"))
        require(album_ids, "album_ids required")
        return album_ids[:MAX_ALBUM_IDS]
