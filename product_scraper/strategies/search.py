"""Keyword in, product records out: validate, build the search URL, fetch, parse."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional
from urllib.parse import quote

from product_scraper.core.config import (
    DIAGNOSTIC_PATH,
    SEARCH_BASE_URL,
    SEARCH_QUERY_PARAM,
    SITE_BASE_URL,
)
from product_scraper.core.logger import get_logger
from product_scraper.models.products import PageClassification, ProductRecord
from product_scraper.services.fetcher import PageFetcher, TransportError, page_fetcher
from product_scraper.services.parser import parse_page
from product_scraper.services.storage import save_error_response

logger = get_logger(__name__)


class InputError(ValueError):
    """Raised before any request goes out when the keyword is missing or blank."""


def normalize_keyword(keyword: Optional[str]) -> str:
    cleaned = (keyword or "").strip()
    if not cleaned:
        raise InputError("Keyword is required.")
    return cleaned


def build_search_url(keyword: str, base_url: str = SEARCH_BASE_URL) -> str:
    # quote(safe="") escapes spaces as %20, same as encodeURIComponent
    return f"{base_url}?{SEARCH_QUERY_PARAM}={quote(keyword, safe='')}"


@dataclass
class SearchContext:
    keyword: str
    url: str
    classification: Optional[PageClassification] = None
    products: List[ProductRecord] = field(default_factory=list)

    @property
    def blocked(self) -> bool:
        return self.classification == PageClassification.blocked


class SearchStrategy:
    """Runs one search request end to end. Holds no per-request state."""

    def __init__(
        self,
        fetcher: PageFetcher | None = None,
        search_base_url: str = SEARCH_BASE_URL,
        site_base_url: str = SITE_BASE_URL,
        diagnostic_path: str | Path = DIAGNOSTIC_PATH,
    ) -> None:
        self.fetcher = fetcher or page_fetcher
        self.search_base_url = search_base_url
        self.site_base_url = site_base_url
        self.diagnostic_path = diagnostic_path

    async def run(self, keyword: Optional[str]) -> SearchContext:
        cleaned = normalize_keyword(keyword)
        ctx = SearchContext(keyword=cleaned, url=build_search_url(cleaned, self.search_base_url))

        logger.info("🔎 Scraping data from: %s", ctx.url)

        try:
            html = await self.fetcher.fetch(ctx.url)
        except TransportError as exc:
            if exc.status_code is not None:
                logger.error("Status: %s", exc.status_code)
            if exc.body is not None:
                exc.diagnostic_path = save_error_response(exc.body, self.diagnostic_path)
            raise

        result = parse_page(html, self.site_base_url)
        ctx.classification = result.classification
        ctx.products = result.products

        if result.blocked:
            logger.warning("CAPTCHA or error page returned for '%s'; no products extracted", cleaned)
        else:
            logger.info("✅ Found and parsed %d products.", len(ctx.products))
        return ctx


async def run_search_flow(keyword: Optional[str]) -> SearchContext:
    strategy = SearchStrategy()
    return await strategy.run(keyword)
