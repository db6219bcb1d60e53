"""Google Custom Search client for university campus photos"""

import logging
import httpx
from abroad_budget.domain.models import ImageResult
from abroad_budget.domain.exceptions import ImageSearchError
from abroad_budget.config import settings
from abroad_budget.infrastructure.observability.metrics import image_search_fallback_counter

SEARCH_URL = "https://www.googleapis.com/customsearch/v1"

logger = logging.getLogger(__name__)


class UniversityImageClient:
    """Finds a campus image for a university; falls back to a placeholder on any failure"""

    def __init__(
        self,
        api_key: str | None = None,
        search_engine_id: str | None = None,
        placeholder_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key or settings.google_api_key
        self.search_engine_id = search_engine_id or settings.google_search_engine_id
        self.placeholder_url = placeholder_url or settings.placeholder_image_url
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def find_image(self, university: str, city_name: str, country_name: str) -> ImageResult:
        """
        Look up a campus image URL.

        Flow:
        1. Search images for "<university> <city> <country> university campus building"
        2. Take the first hit
        3. Confirm the image URL answers a HEAD request

        Never raises; failures return the placeholder URL with an error message.
        """
        if not self.api_key or not self.search_engine_id:
            image_search_fallback_counter.labels(reason="config").inc()
            return ImageResult(url=self.placeholder_url, error="API configuration is missing")

        try:
            url = await self._search(f"{university} {city_name} {country_name} university campus building")
            return ImageResult(url=url)
        except ImageSearchError as e:
            logger.warning(f"University image lookup failed: {e}", extra={"university": university})
            return ImageResult(url=self.placeholder_url, error=str(e))

    async def _search(self, query: str) -> str:
        params = {
            "key": self.api_key,
            "cx": self.search_engine_id,
            "q": query,
            "searchType": "image",
            "num": "1",
            "imgSize": "large",
            "imgType": "photo",
            "safe": "active",
        }
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(SEARCH_URL, params=params)
                if response.is_error:
                    image_search_fallback_counter.labels(reason="http").inc()
                    raise ImageSearchError(f"HTTP error! status: {response.status_code}")

                items = response.json().get("items") or []
                if not items or not items[0].get("link"):
                    image_search_fallback_counter.labels(reason="empty").inc()
                    raise ImageSearchError("No images found")
                image_url = items[0]["link"]

                head = await client.head(image_url, follow_redirects=True)
                if head.is_error:
                    image_search_fallback_counter.labels(reason="inaccessible").inc()
                    raise ImageSearchError("Image URL is not accessible")

                return image_url

            except httpx.RequestError as e:
                image_search_fallback_counter.labels(reason="network").inc()
                raise ImageSearchError(f"Image search request failed: {e}") from e
            except (ValueError, AttributeError) as e:
                image_search_fallback_counter.labels(reason="http").inc()
                raise ImageSearchError(f"Invalid image search response: {e}") from e
