# parser.py

import re
from typing import List, Optional, Sequence
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

from product_scraper.core.config import (
    IMAGE_SELECTOR,
    PLACEHOLDER_IMAGE_MARKERS,
    RATING_SELECTOR,
    RESULT_ITEM_SELECTOR,
    REVIEWS_SELECTOR,
    SITE_BASE_URL,
    TITLE_SELECTORS,
    UNKNOWN_RATING,
)
from product_scraper.core.logger import get_logger
from product_scraper.models.products import (
    ExtractionResult,
    PageClassification,
    ProductRecord,
)
from product_scraper.services.page_classifier import page_classifier

logger = get_logger(__name__)

DIGITS_RE = re.compile(r"[0-9]+")
GROUPING_RE = re.compile(r"[,.\s]")


def first_text(element: Tag, selectors: Sequence[str]) -> Optional[str]:
    """Try each selector in order; the first one with non-empty text wins."""
    for selector in selectors:
        match = element.select_one(selector)
        if match is None:
            continue
        text = match.get_text().strip()
        if text:
            return text
    return None


def extract_title(item: Tag) -> Optional[str]:
    return first_text(item, TITLE_SELECTORS)


def extract_rating(item: Tag) -> str:
    # "4.5 out of 5 stars" -> "4.5"
    rating_el = item.select_one(RATING_SELECTOR)
    if rating_el is None:
        return UNKNOWN_RATING
    tokens = rating_el.get_text().split()
    return tokens[0] if tokens else UNKNOWN_RATING


def parse_review_count(text: Optional[str]) -> int:
    if not text:
        return 0
    # "1,234 ratings" -> 1234
    match = DIGITS_RE.match(GROUPING_RE.sub("", text))
    if match is None:
        return 0
    return int(match.group())


def extract_review_count(item: Tag) -> int:
    reviews_el = item.select_one(REVIEWS_SELECTOR)
    if reviews_el is None:
        return 0
    return parse_review_count(reviews_el.get_text())


def extract_image_url(item: Tag, base_url: str = SITE_BASE_URL) -> Optional[str]:
    image_el = item.select_one(IMAGE_SELECTOR)
    if image_el is None:
        return None
    src = (image_el.get("src") or "").strip()
    if not src:
        return None
    try:
        return urljoin(base_url.rstrip("/") + "/", src)
    except ValueError:
        logger.debug("Unparsable image src %r", src)
        return None


def is_placeholder_image(url: str) -> bool:
    return any(marker in url for marker in PLACEHOLDER_IMAGE_MARKERS)


def parse_item(item: Tag, base_url: str = SITE_BASE_URL) -> Optional[ProductRecord]:
    """
    Build a record from one result item, or None when it can't be shown
    (no title, no image, or a lazy-load placeholder image).
    """
    title = extract_title(item)
    image_url = extract_image_url(item, base_url)

    if not title or not image_url or is_placeholder_image(image_url):
        return None

    return ProductRecord(
        title=title,
        rating=extract_rating(item),
        review_count=extract_review_count(item),
        image_url=image_url,
    )


def _select_items(soup: BeautifulSoup) -> List[Tag]:
    return soup.select(RESULT_ITEM_SELECTOR)


def parse_page(html: str, base_url: str = SITE_BASE_URL) -> ExtractionResult:
    soup = BeautifulSoup(html or "", "lxml")

    if page_classifier.classify(soup) == PageClassification.blocked:
        return ExtractionResult.blocked_page()

    items = _select_items(soup)
    products: List[ProductRecord] = []
    for item in items:
        record = parse_item(item, base_url)
        if record is None:
            continue
        products.append(record)

    dropped = len(items) - len(products)
    if dropped:
        logger.debug("Discarded %d of %d result items without title or image", dropped, len(items))
    logger.info("Parsed %d products from %d result items", len(products), len(items))

    return ExtractionResult(
        classification=PageClassification.valid_results,
        products=products,
    )


def parse_products(html: str, base_url: str = SITE_BASE_URL) -> List[ProductRecord]:
    return parse_page(html, base_url).products
