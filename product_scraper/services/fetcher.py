# fetcher.py

from dataclasses import dataclass, field
from typing import Mapping, Optional

import httpx
from loguru import logger

from product_scraper.core.config import BROWSER_HEADERS


class TransportError(Exception):
    """Upstream answered with a non-success status, or never answered at all."""

    def __init__(
        self,
        url: str,
        message: str,
        *,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(f"Fetching {url} failed: {message}")
        self.url = url
        self.status_code = status_code
        self.body = body
        self.diagnostic_path: Optional[str] = None


@dataclass
class PageFetcher:
    """
    Single GET with browser-like headers.
    The header mapping is read-only and shared by every request.
    """
    headers: Mapping[str, str] = field(default_factory=lambda: BROWSER_HEADERS)
    transport: Optional[httpx.AsyncBaseTransport] = None

    async def fetch(self, url: str) -> str:
        logger.info(f"Fetching URL with httpx: {url}")

        try:
            async with httpx.AsyncClient(
                headers=dict(self.headers),
                follow_redirects=True,
                transport=self.transport,
            ) as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.error(f"HTTPX fetch failed for {url}: {repr(e)}")
            raise TransportError(url, repr(e)) from e

        if not response.is_success:
            logger.error(f"Upstream returned status {response.status_code} for {url}")
            raise TransportError(
                url,
                f"status {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )

        logger.debug(f"Received {len(response.text)} characters from {url}")
        return response.text


page_fetcher = PageFetcher()
