"""Tests for the Unsplash image provider adapter."""

import asyncio

import httpx
import pytest

from pixsearch.core.exceptions import ProviderError
from pixsearch.providers.base import ImageDescriptor
from pixsearch.providers.unsplash import UnsplashImageProvider


def _photo(photo_id: str, alt=None):
    return {
        "id": photo_id,
        "alt_description": alt,
        "urls": {
            "small": f"https://images.unsplash.com/{photo_id}?w=400",
            "full": f"https://images.unsplash.com/{photo_id}",
        },
    }


def _provider(handler, **kwargs) -> UnsplashImageProvider:
    kwargs.setdefault("access_key", "test-key")
    return UnsplashImageProvider(transport=httpx.MockTransport(handler), **kwargs)


class TestImageDescriptor:
    """Tests for the normalized image structure."""

    def test_default_alt_text(self):
        image = ImageDescriptor(id="a", thumbnail_url="https://example.com/a.jpg")
        assert image.alt_text == "image"

    def test_requires_id(self):
        with pytest.raises(ValueError, match="id is required"):
            ImageDescriptor(id="", thumbnail_url="https://example.com/a.jpg")

    def test_requires_thumbnail(self):
        with pytest.raises(ValueError, match="thumbnail_url is required"):
            ImageDescriptor(id="a", thumbnail_url="")


class TestUnsplashImageProvider:
    """Tests for UnsplashImageProvider."""

    async def test_sends_term_page_size_and_credentials(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["params"] = dict(request.url.params)
            seen["auth"] = request.headers.get("Authorization")
            return httpx.Response(200, json={"results": []})

        await _provider(handler).search("red panda")

        assert seen["params"] == {"query": "red panda", "per_page": "24"}
        assert seen["auth"] == "Client-ID test-key"

    async def test_maps_results(self):
        def handler(request):
            return httpx.Response(200, json={
                "total": 2,
                "results": [_photo("abc", alt="a mountain lake"), _photo("def")],
            })

        images = await _provider(handler).search("mountains")

        assert images == [
            ImageDescriptor(
                id="abc",
                thumbnail_url="https://images.unsplash.com/abc?w=400",
                alt_text="a mountain lake",
            ),
            ImageDescriptor(
                id="def",
                thumbnail_url="https://images.unsplash.com/def?w=400",
                alt_text="image",
            ),
        ]

    @pytest.mark.parametrize("alt", [{"en": "a lake"}, ["lake"], 7, ""])
    async def test_unusable_alt_text_falls_back(self, alt):
        def handler(request):
            return httpx.Response(200, json={"results": [_photo("abc", alt=alt)]})

        images = await _provider(handler).search("lake")

        assert images[0].alt_text == "image"

    async def test_results_are_bounded_by_page_size(self):
        def handler(request):
            return httpx.Response(200, json={"results": [_photo(f"p{i}") for i in range(30)]})

        images = await _provider(handler).search("cats")

        assert len(images) == 24

    @pytest.mark.parametrize("status", [401, 403])
    async def test_rejected_credentials(self, status):
        def handler(request):
            return httpx.Response(status, json={"errors": ["OAuth error: The access token is invalid"]})

        with pytest.raises(ProviderError, match="credentials rejected"):
            await _provider(handler).search("cats")

    @pytest.mark.parametrize("status", [404, 429, 500, 503])
    async def test_non_success_status(self, status):
        def handler(request):
            return httpx.Response(status, text="nope")

        with pytest.raises(ProviderError, match=str(status)):
            await _provider(handler).search("cats")

    async def test_timeout(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(ProviderError, match="timed out"):
            await _provider(handler).search("cats")

    async def test_slow_response_hits_overall_deadline(self):
        async def handler(request):
            await asyncio.sleep(1)
            return httpx.Response(200, json={"results": []})

        with pytest.raises(ProviderError, match="timed out"):
            await _provider(handler, timeout=0.05).search("cats")

    async def test_network_failure(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(ProviderError, match="network failure"):
            await _provider(handler).search("cats")

    @pytest.mark.parametrize("body", [
        b"<html>not json</html>",
        b'{"total": 0}',
        b'{"results": "nope"}',
        b'[1, 2, 3]',
        b'{"results": [{"id": "x", "urls": {}}]}',
        b'{"results": [{"urls": {"small": "https://example.com/x"}}]}',
        b'{"results": ["x"]}',
        b'{"results": [{"id": "a", "urls": {"small": 123}}]}',
        b'{"results": [{"id": 123, "urls": {"small": "https://example.com/x"}}]}',
        b'{"results": [{"id": "a", "urls": "https://example.com/x"}]}',
    ])
    async def test_malformed_body(self, body):
        def handler(request):
            return httpx.Response(200, content=body)

        with pytest.raises(ProviderError, match="malformed"):
            await _provider(handler).search("cats")

    async def test_missing_access_key_fails_without_calling(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={"results": []})

        with pytest.raises(ProviderError, match="not configured"):
            await _provider(handler, access_key="").search("cats")

        assert calls == []
