"""HTTP client for the GetSongBPM tempo and key lookup API."""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .models import SongTempo

logger = logging.getLogger(__name__)

GETSONGBPM_BASE_URL = "https://api.getsongbpm.com"


class GetSongBPMClient:
    """Async client for GetSongBPM.

    Plain GET requests, no retries or backoff. Lookup failures are logged and
    reported as "no match" so callers can degrade gracefully.

    Example:
        >>> client = GetSongBPMClient(api_key="secret")
        >>> tempo = await client.lookup("Around the World", "Daft Punk")
        >>> await client.close()
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = GETSONGBPM_BASE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            api_key: GetSongBPM API key
            base_url: API base URL
            timeout: Request timeout in seconds
            transport: Optional transport (used in tests)

        Raises:
            ValueError: If api_key is empty
        """
        if not api_key:
            raise ValueError("GetSongBPM api_key is required")

        self.api_key = api_key
        self.client = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=httpx.Timeout(timeout),
            transport=transport,
            follow_redirects=True,
        )

    async def _get(self, path: str, **params: str) -> Dict[str, Any]:
        """Issue a GET request with the API key and return the JSON body.

        Raises:
            httpx.HTTPError: For transport failures and error statuses
            ValueError: If the body is not a JSON object
        """
        response = await self.client.get(path, params={"api_key": self.api_key, **params})
        response.raise_for_status()
        data = response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected GetSongBPM response body: {type(data).__name__}")
        return data

    async def search(self, track_name: str, artist_name: str) -> Optional[SongTempo]:
        """Search for a song and pick the best match.

        The first result whose artist contains ``artist_name`` (case-insensitive)
        wins; otherwise the first result is used.

        Args:
            track_name: Song title
            artist_name: Artist name

        Returns:
            Best match, or None when nothing matched or the request failed
        """
        lookup = f"{track_name} {artist_name}".strip()
        try:
            data = await self._get("/search/", type="song", lookup=lookup)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"GetSongBPM search error: {e}")
            return None

        results = data.get("search") or []
        # The API answers {"search": {"error": "no result"}} when nothing matches
        if not isinstance(results, list):
            return None
        candidates: List[SongTempo] = [
            SongTempo.from_search_result(result) for result in results if isinstance(result, dict)
        ]
        if not candidates:
            return None

        wanted = artist_name.lower()
        for candidate in candidates:
            if wanted and wanted in candidate.artist.lower():
                return candidate
        return candidates[0]

    async def get_song(self, song_id: str) -> Optional[SongTempo]:
        """Fetch song details by ID.

        Returns:
            Song details, or None when the request failed
        """
        try:
            data = await self._get("/song/", id=song_id)
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"GetSongBPM details error: {e}")
            return None

        song = data.get("song")
        if not isinstance(song, dict):
            return None
        return SongTempo.from_song(song)

    async def lookup(self, track_name: str, artist_name: str) -> Optional[SongTempo]:
        """Search for a song and enrich the match with its details.

        Detail fields take precedence; search fields fill the gaps.
        """
        match = await self.search(track_name, artist_name)
        if match is None:
            return None

        details = await self.get_song(match.song_id) if match.song_id else None
        if details is None:
            return match
        return details.merged_with(match)

    async def close(self):
        """Close the underlying HTTP client."""
        await self.client.aclose()
