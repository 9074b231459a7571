"""Data models for the GetSongBPM API."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


def _artist_name(data: Dict[str, Any]) -> str:
    artist = data.get("artist")
    if isinstance(artist, dict):
        return artist.get("name") or ""
    return ""


@dataclass
class SongTempo:
    """Tempo metadata for one song as reported by GetSongBPM.

    Values are kept as the strings the service returns ("120", "4/4", "C#m").

    Attributes:
        song_id: GetSongBPM song identifier
        title: Song title
        artist: Artist name
        tempo: Tempo in BPM (optional)
        key: Musical key (optional)
        time_signature: Time signature (optional)
    """

    song_id: str
    title: str
    artist: str
    tempo: Optional[str] = None
    key: Optional[str] = None
    time_signature: Optional[str] = None

    @classmethod
    def from_search_result(cls, data: Dict[str, Any]) -> "SongTempo":
        """Build from an entry of the ``/search/`` response."""
        return cls(
            song_id=str(data.get("song_id") or data.get("id") or ""),
            title=data.get("song_title") or data.get("title") or "",
            artist=_artist_name(data),
            tempo=data.get("tempo") or None,
            key=data.get("song_key") or data.get("key_of") or None,
            time_signature=data.get("time_sig") or None,
        )

    @classmethod
    def from_song(cls, data: Dict[str, Any]) -> "SongTempo":
        """Build from the ``song`` object of the ``/song/`` response."""
        return cls(
            song_id=str(data.get("id") or ""),
            title=data.get("title") or "",
            artist=_artist_name(data),
            tempo=data.get("tempo") or None,
            key=data.get("key_of") or None,
            time_signature=data.get("time_sig") or None,
        )

    def merged_with(self, fallback: "SongTempo") -> "SongTempo":
        """Return a copy where missing fields are taken from ``fallback``."""
        return SongTempo(
            song_id=self.song_id or fallback.song_id,
            title=self.title or fallback.title,
            artist=self.artist or fallback.artist,
            tempo=self.tempo or fallback.tempo,
            key=self.key or fallback.key,
            time_signature=self.time_signature or fallback.time_signature,
        )
