from dataclasses import dataclass, field
from typing import Optional, Sequence

from bs4 import BeautifulSoup

from product_scraper.core.config import BLOCKED_TITLE_PHRASES
from product_scraper.core.logger import get_logger
from product_scraper.models.products import PageClassification

logger = get_logger(__name__)


def page_title(soup: BeautifulSoup) -> str:
    if soup.title is None:
        return ""
    return soup.title.get_text().strip()


@dataclass
class PageClassifier:
    """Tells interstitial / captcha / error pages apart from real result pages by their <title>."""
    phrases: Sequence[str] = field(default_factory=lambda: BLOCKED_TITLE_PHRASES)

    def detect(self, title: str) -> Optional[str]:
        for phrase in self.phrases:
            if phrase in title:
                return phrase
        return None

    def classify(self, soup: BeautifulSoup) -> PageClassification:
        title = page_title(soup)
        signature = self.detect(title)
        if signature:
            logger.warning("Blocked page detected via '%s' (title: %r)", signature, title)
            return PageClassification.blocked
        return PageClassification.valid_results


page_classifier = PageClassifier()
