"""
Tests for GetSongBPMClient.

Requests are served by httpx.MockTransport so no network access is needed.
"""

import httpx
import pytest

from getsongbpm import GetSongBPMClient, SongTempo

SEARCH_RESULTS = {
    "search": [
        {
            "song_id": "o2r0L",
            "song_title": "Around the World",
            "tempo": "121",
            "time_sig": "4/4",
            "song_key": "F#m",
            "artist": {"id": "x1", "name": "Tribute Band"},
        },
        {
            "song_id": "k9Yq3",
            "song_title": "Around the World",
            "tempo": "120",
            "time_sig": "4/4",
            "song_key": "F#m",
            "artist": {"id": "x2", "name": "Daft Punk"},
        },
    ]
}


def make_client(handler):
    """Build a client whose requests are answered by ``handler``."""
    return GetSongBPMClient(api_key="test-key", transport=httpx.MockTransport(handler))


class TestSearch:
    """Tests for search()."""

    @pytest.mark.asyncio
    async def test_prefers_artist_match(self):
        seen = {}

        def handler(request):
            seen["params"] = dict(request.url.params)
            return httpx.Response(200, json=SEARCH_RESULTS)

        client = make_client(handler)
        result = await client.search("Around the World", "daft punk")
        await client.close()

        assert result.song_id == "k9Yq3"
        assert result.artist == "Daft Punk"
        assert result.tempo == "120"
        assert seen["params"] == {
            "api_key": "test-key",
            "type": "song",
            "lookup": "Around the World daft punk",
        }

    @pytest.mark.asyncio
    async def test_falls_back_to_first_result(self):
        client = make_client(lambda request: httpx.Response(200, json=SEARCH_RESULTS))

        result = await client.search("Around the World", "Someone Else")
        await client.close()

        assert result.song_id == "o2r0L"

    @pytest.mark.asyncio
    async def test_no_result(self):
        client = make_client(
            lambda request: httpx.Response(200, json={"search": {"error": "no result"}})
        )

        assert await client.search("Nothing", "Nobody") is None
        await client.close()

    @pytest.mark.asyncio
    async def test_http_error_is_no_match(self):
        client = make_client(lambda request: httpx.Response(500, text="oops"))

        assert await client.search("Song", "Artist") is None
        await client.close()

    @pytest.mark.asyncio
    async def test_invalid_json_is_no_match(self):
        client = make_client(lambda request: httpx.Response(200, text="<html>"))

        assert await client.search("Song", "Artist") is None
        await client.close()

    @pytest.mark.asyncio
    async def test_non_object_body_is_no_match(self):
        """A JSON array body is treated as no match instead of raising."""
        client = make_client(lambda request: httpx.Response(200, json=[]))

        assert await client.search("Song", "Artist") is None
        await client.close()

    @pytest.mark.asyncio
    async def test_skips_malformed_entries(self):
        body = {"search": ["oops", None, {"song_id": "z1", "song_title": "Song", "artist": "flat string"}]}
        client = make_client(lambda request: httpx.Response(200, json=body))

        result = await client.search("Song", "Artist")
        await client.close()

        assert result.song_id == "z1"
        assert result.artist == ""


class TestLookup:
    """Tests for lookup()."""

    @pytest.mark.asyncio
    async def test_details_override_search(self):
        def handler(request):
            if request.url.path == "/search/":
                return httpx.Response(200, json=SEARCH_RESULTS)
            assert request.url.params["id"] == "k9Yq3"
            return httpx.Response(
                200,
                json={
                    "song": {
                        "id": "k9Yq3",
                        "title": "Around the World",
                        "tempo": "121",
                        "key_of": "F♯m",
                        "artist": {"name": "Daft Punk"},
                    }
                },
            )

        client = make_client(handler)
        result = await client.lookup("Around the World", "Daft Punk")
        await client.close()

        assert result == SongTempo(
            song_id="k9Yq3",
            title="Around the World",
            artist="Daft Punk",
            tempo="121",
            key="F♯m",
            time_signature="4/4",
        )

    @pytest.mark.asyncio
    async def test_details_failure_keeps_search_match(self):
        def handler(request):
            if request.url.path == "/search/":
                return httpx.Response(200, json=SEARCH_RESULTS)
            return httpx.Response(404)

        client = make_client(handler)
        result = await client.lookup("Around the World", "Daft Punk")
        await client.close()

        assert result.tempo == "120"
        assert result.key == "F#m"

    @pytest.mark.asyncio
    async def test_no_match(self):
        client = make_client(lambda request: httpx.Response(200, json={"search": []}))

        assert await client.lookup("Song", "Artist") is None
        await client.close()

    @pytest.mark.asyncio
    async def test_non_object_body(self):
        client = make_client(lambda request: httpx.Response(200, json=[]))

        assert await client.lookup("Song", "Artist") is None
        await client.close()

    @pytest.mark.asyncio
    async def test_non_object_details_keep_search_match(self):
        def handler(request):
            if request.url.path == "/search/":
                return httpx.Response(200, json=SEARCH_RESULTS)
            return httpx.Response(200, json=["unexpected"])

        client = make_client(handler)
        result = await client.lookup("Around the World", "Daft Punk")
        await client.close()

        assert result.song_id == "k9Yq3"
        assert result.tempo == "120"


class TestInit:
    """Tests for client construction."""

    def test_api_key_required(self):
        with pytest.raises(ValueError):
            GetSongBPMClient(api_key="")
