"""Text formatting helpers for tool responses.

Pure functions that turn Spotify models into the Markdown-style lines the
tools return.
"""

from datetime import datetime
from typing import List, Optional, Sequence

from spotify_client.models import (
    Album,
    Artist,
    AudioFeatures,
    Episode,
    LibraryEntry,
    PlayableItem,
    Playlist,
    Track,
)

KEY_NAMES = (
    "C",
    "C♯/D♭",
    "D",
    "D♯/E♭",
    "E",
    "F",
    "F♯/G♭",
    "G",
    "G♯/A♭",
    "A",
    "A♯/B♭",
    "B",
)

REMOVED_TRACK = "[Removed track]"
UNKNOWN_ITEM = "[Unknown]"


def format_duration(ms: Optional[int]) -> str:
    """Format milliseconds as ``m:ss``.

    Examples:
        >>> format_duration(65000)
        '1:05'
        >>> format_duration(0)
        '0:00'
        >>> format_duration(3725000)
        '62:05'
    """
    total_seconds = max(int(ms or 0), 0) // 1000
    minutes, seconds = divmod(total_seconds, 60)
    return f"{minutes}:{seconds:02d}"


def format_artists(artists: Sequence[Artist]) -> str:
    """Join artist names with commas (``Unknown`` when there are none)."""
    names = [artist.name for artist in artists if artist.name]
    return ", ".join(names) if names else "Unknown"


def format_percent(value: float) -> str:
    """Format a 0-1 confidence value as a whole percentage.

    Examples:
        >>> format_percent(0.734)
        '73%'
        >>> format_percent(1.0)
        '100%'
    """
    return f"{value * 100:.0f}%"


def key_name(pitch_class: Optional[int]) -> str:
    """Map a pitch class (0-11) to its name; -1 means no key was detected.

    Examples:
        >>> key_name(0)
        'C'
        >>> key_name(11)
        'B'
        >>> key_name(-1)
        'Unknown'
    """
    if pitch_class is None or not 0 <= pitch_class < len(KEY_NAMES):
        return "Unknown"
    return KEY_NAMES[pitch_class]


def mode_name(mode: Optional[int]) -> str:
    """Map Spotify's mode flag to Major/Minor."""
    return "Major" if mode == 1 else "Minor"


def format_range_header(title: str, offset: int, count: int, total: int) -> str:
    """Build a pagination header with a 1-based inclusive range.

    Examples:
        >>> format_range_header("Your Liked Songs", 20, 10, 312)
        '# Your Liked Songs (21-30 of 312)'
    """
    return f"# {title} ({offset + 1}-{offset + count} of {total})"


def format_date(timestamp: Optional[str], with_time: bool = False) -> Optional[str]:
    """Format an ISO 8601 timestamp from Spotify as a date (and time).

    Examples:
        >>> format_date("2024-03-01T18:22:05Z")
        '2024-03-01'
        >>> format_date("2024-03-01T18:22:05.123Z", with_time=True)
        '2024-03-01 18:22'
        >>> format_date(None) is None
        True
    """
    if not timestamp:
        return None
    try:
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp
    return parsed.strftime("%Y-%m-%d %H:%M" if with_time else "%Y-%m-%d")


def format_track(track: Track, with_duration: bool = True) -> str:
    """Render ``"Name" by Artists (m:ss) - ID: id``."""
    text = f'"{track.name}" by {format_artists(track.artists)}'
    if with_duration:
        text += f" ({format_duration(track.duration_ms)})"
    return f"{text} - ID: {track.id}"


def format_playable(item: Optional[PlayableItem]) -> str:
    """Render a playable item, with placeholders for removed or non-track items."""
    if item is None:
        return REMOVED_TRACK
    if isinstance(item, Track):
        return format_track(item)
    return UNKNOWN_ITEM


def format_entry_line(number: int, entry: LibraryEntry, with_added: bool = False) -> str:
    """Render a numbered line for a playlist item, saved track or history entry.

    History entries get their play time. ``with_added`` appends the date the
    track was saved (used for Liked Songs).
    """
    line = f"{number}. {format_playable(entry.item)}"
    if isinstance(entry.item, Track):
        played = format_date(entry.played_at, with_time=True)
        added = format_date(entry.added_at) if with_added else None
        if played:
            line += f" - Played at: {played}"
        elif added:
            line += f" - Added: {added}"
    return line


def format_album(album: Album, with_track_count: bool = False) -> str:
    """Render ``"Name" by Artists [(N tracks)] - ID: id``."""
    text = f'"{album.name}" by {format_artists(album.artists)}'
    if with_track_count:
        text += f" ({album.total_tracks} tracks)"
    return f"{text} - ID: {album.id}"


def format_playlist(playlist: Playlist, with_owner: bool = True) -> str:
    """Render a playlist as ``"Name" by Owner - ID`` or ``"Name" (N tracks) - ID``."""
    if with_owner:
        return f'"{playlist.name}" by {playlist.owner_name or "Unknown"} - ID: {playlist.id}'
    return f'"{playlist.name}" ({playlist.track_count} tracks) - ID: {playlist.id}'


def numbered(lines: Sequence[str], start: int = 1) -> str:
    """Join lines, prefixing each with its number counting from ``start``."""
    return "\n".join(f"{start + i}. {line}" for i, line in enumerate(lines))


def describe_now_playing(item: PlayableItem, progress_ms: int) -> List[str]:
    """Lines describing the currently playing track (without the header)."""
    if isinstance(item, Track):
        return [
            f'**Track**: "{item.name}"',
            f"**Artist**: {format_artists(item.artists)}",
            f"**Album**: {item.album_name or 'Unknown'}",
            f"**Progress**: {format_duration(progress_ms)} / {format_duration(item.duration_ms)}",
            f"**ID**: {item.id}",
        ]
    if isinstance(item, Episode):
        return [
            f'**Episode**: "{item.name}"',
            f"**Show**: {item.show_name or 'Unknown'}",
            f"**Progress**: {format_duration(progress_ms)} / {format_duration(item.duration_ms)}",
            f"**ID**: {item.id}",
        ]
    return [f"**Item**: {item.name or item.item_type}"]


def describe_audio_features(features: AudioFeatures) -> List[str]:
    """Full audio feature listing."""
    return [
        f"**BPM (Tempo)**: {round(features.tempo)}",
        f"**Key**: {key_name(features.key)} {mode_name(features.mode)}",
        f"**Energy**: {format_percent(features.energy)}",
        f"**Danceability**: {format_percent(features.danceability)}",
        f"**Valence (Happiness)**: {format_percent(features.valence)}",
        f"**Acousticness**: {format_percent(features.acousticness)}",
        f"**Instrumentalness**: {format_percent(features.instrumentalness)}",
        f"**Liveness**: {format_percent(features.liveness)}",
        f"**Speechiness**: {format_percent(features.speechiness)}",
        f"**Loudness**: {features.loudness:.1f} dB",
        f"**Time Signature**: {features.time_signature}/4",
    ]


def describe_feature_summary(features: AudioFeatures) -> List[str]:
    """Short feature summary merged into the enriched now-playing view."""
    lines = []
    if features.tempo:
        lines.append(f"**BPM**: {round(features.tempo)}")
    if 0 <= features.key < len(KEY_NAMES):
        lines.append(f"**Key**: {key_name(features.key)} {mode_name(features.mode)}")
    lines.append(f"**Energy**: {format_percent(features.energy)}")
    lines.append(f"**Danceability**: {format_percent(features.danceability)}")
    return lines
