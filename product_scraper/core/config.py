# config.py

from dotenv import load_dotenv
import os
from types import MappingProxyType
# Load .env file
load_dotenv()

# Target site
SITE_BASE_URL = os.getenv("SITE_BASE_URL", "https://www.amazon.com").rstrip("/")
SEARCH_BASE_URL = os.getenv("SEARCH_BASE_URL", f"{SITE_BASE_URL}/s")
SEARCH_QUERY_PARAM = "k"

# API server
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "3000"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

OUTPUT_DIR = os.getenv("OUTPUT_DIR", "outputs")

# Overwritten on every upstream failure that carries a body
DIAGNOSTIC_PATH = os.getenv("DIAGNOSTIC_PATH", "amazon_error_response.html")


USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/127.0.0.0 Safari/537.36"
)

BROWSER_HEADERS = MappingProxyType({
    "User-Agent": USER_AGENT,
    "Accept": (
        "text/html,application/xhtml+xml,application/xml;q=0.9,image/avif,"
        "image/webp,image/apng,*/*;q=0.8,application/signed-exchange;v=b3;q=0.7"
    ),
    "Accept-Language": "en-US,en;q=0.9,pt-BR;q=0.8,pt;q=0.7",
    "Accept-Encoding": "gzip, deflate, br, zstd",
    "Upgrade-Insecure-Requests": "1",
    "Sec-Fetch-Site": "same-origin",
    "Sec-Fetch-Mode": "navigate",
    "Sec-Fetch-User": "?1",
    "Sec-Fetch-Dest": "document",
    "Sec-Ch-Ua": '"Not/A)Brand";v="8", "Chromium";v="127", "Google Chrome";v="127"',
    "Sec-Ch-Ua-Mobile": "?0",
    "Sec-Ch-Ua-Platform": '"Windows"',
})

# The site answers 200 for these, only the <title> gives them away.
# Case-sensitive: result page titles echo the lowercase search keyword.
BLOCKED_TITLE_PHRASES = (
    "Something went wrong",
    "CAPTCHA",
    "Robot Check",
    "Verification Required",
    "Attention Required",
)


# ---- Search result selectors ----

RESULT_ITEM_SELECTOR = '[data-component-type="s-search-result"]'

TITLE_SELECTORS = (
    "h2.a-text-normal span",
    "span.a-text-normal",
)

RATING_SELECTOR = "span.a-icon-alt"

REVIEWS_SELECTOR = "a.s-underline-link-text span.a-size-base"

IMAGE_SELECTOR = "img.s-image"

PLACEHOLDER_IMAGE_MARKERS = (
    "data:image/gif",
)

UNKNOWN_RATING = "N/A"
