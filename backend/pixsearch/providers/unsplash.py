"""Unsplash photo search adapter.

Documentation: https://unsplash.com/documentation#search-photos
"""

import asyncio
from typing import Any, Dict, List, Optional

import httpx
import structlog

from pixsearch.config import settings
from pixsearch.core.exceptions import ProviderError
from pixsearch.providers.base import DEFAULT_ALT_TEXT, BaseImageProvider, ImageDescriptor


logger = structlog.get_logger(__name__)


class UnsplashImageProvider(BaseImageProvider):
    """Searches Unsplash photos for a term.

    Every call is a live round trip: no caching, no retries. Requires
    UNSPLASH_ACCESS_KEY in environment variables.
    """

    provider_name = "unsplash"

    def __init__(
        self,
        access_key: Optional[str] = None,
        api_url: Optional[str] = None,
        page_size: Optional[int] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the Unsplash adapter.

        Args:
            access_key: Unsplash access key (defaults to settings)
            api_url: Search endpoint URL (defaults to settings)
            page_size: Results per call (defaults to settings, max 30 on Unsplash)
            timeout: Seconds before the call is abandoned (defaults to settings)
            transport: Optional httpx transport, used to stub the network in tests
        """
        super().__init__()
        self.access_key = settings.UNSPLASH_ACCESS_KEY if access_key is None else access_key
        self.api_url = api_url or settings.UNSPLASH_API_URL
        self.page_size = page_size or settings.PROVIDER_PAGE_SIZE
        self._timeout = timeout or settings.PROVIDER_TIMEOUT_SECONDS
        self._transport = transport

        if not self.access_key:
            logger.warning(
                "unsplash_credentials_missing",
                message="UNSPLASH_ACCESS_KEY not set",
            )

    async def search(self, term: str) -> List[ImageDescriptor]:
        # httpx timeouts are per phase; this bounds the whole round trip
        try:
            data = await asyncio.wait_for(self._call_api(term), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            logger.error("unsplash_api_deadline_exceeded", term=term, timeout=self._timeout)
            raise ProviderError(self.provider_name, "request timed out") from e

        images = self._parse_results(data)

        logger.info(
            "unsplash_search_complete",
            term=term,
            returned=len(images),
        )
        return images

    async def _call_api(self, term: str) -> Dict[str, Any]:
        """Issue the search request and return the decoded JSON body.

        Raises:
            ProviderError: For any transport, status or decoding failure
        """
        if not self.access_key:
            raise ProviderError(self.provider_name, "access key is not configured")

        headers = {
            "Authorization": f"Client-ID {self.access_key}",
            "Accept-Version": "v1",
        }
        params = {
            "query": term,
            "per_page": self.page_size,
        }

        logger.debug("unsplash_api_call", term=term, per_page=self.page_size)

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(self.api_url, headers=headers, params=params)

                if response.status_code in (401, 403):
                    logger.error(
                        "unsplash_auth_rejected",
                        status_code=response.status_code,
                    )
                    raise ProviderError(self.provider_name, "credentials rejected")

                response.raise_for_status()
                return response.json()

        except httpx.TimeoutException as e:
            logger.error("unsplash_api_timeout", term=term, timeout=self._timeout)
            raise ProviderError(self.provider_name, "request timed out") from e

        except httpx.HTTPStatusError as e:
            logger.error(
                "unsplash_api_http_error",
                status_code=e.response.status_code,
                term=term,
            )
            raise ProviderError(
                self.provider_name, f"unexpected status {e.response.status_code}"
            ) from e

        except httpx.RequestError as e:
            logger.error("unsplash_api_network_error", term=term, error=str(e))
            raise ProviderError(self.provider_name, "network failure") from e

        except ValueError as e:
            # response.json() on a non-JSON body
            logger.error("unsplash_api_bad_body", term=term, error=str(e))
            raise ProviderError(self.provider_name, "malformed response body") from e

    def _parse_results(self, data: Any) -> List[ImageDescriptor]:
        """Map the raw ``results`` array to ImageDescriptor objects.

        Raises:
            ProviderError: If the body does not have the documented shape
        """
        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            logger.error("unsplash_results_missing")
            raise ProviderError(self.provider_name, "malformed response body")

        images: List[ImageDescriptor] = []
        for item in results[: self.page_size]:
            urls = item.get("urls") if isinstance(item, dict) else None
            photo_id = item.get("id") if isinstance(item, dict) else None
            thumbnail = urls.get("small") if isinstance(urls, dict) else None
            if not isinstance(photo_id, str) or not isinstance(thumbnail, str):
                logger.error("unsplash_item_malformed", item_type=type(item).__name__)
                raise ProviderError(self.provider_name, "malformed response body")

            alt = item.get("alt_description")
            try:
                images.append(
                    ImageDescriptor(
                        id=photo_id,
                        thumbnail_url=thumbnail,
                        alt_text=alt if isinstance(alt, str) and alt else DEFAULT_ALT_TEXT,
                    )
                )
            except ValueError as e:
                logger.error("unsplash_item_malformed", error=str(e))
                raise ProviderError(self.provider_name, "malformed response body") from e

        return images
