"""
HTTP API for the product scraper.

Endpoints:
- `GET /api/scrape?keyword=...`: run one search and return the product list.
- `GET /health`: liveness probe.

Responses for `/api/scrape`:
- Missing or blank `keyword` -> HTTP 400, no outbound request.
- Upstream/transport failure -> HTTP 500; the upstream error page (if any)
  is saved to the diagnostic file.
- Otherwise HTTP 200 with a JSON list of `{title, rating, reviews, imageUrl}`.
  A blocked page yields `[]`; the `X-Page-Classification` header says
  whether the list came from a real results page or a blocked one.
"""

from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse

from product_scraper.core.logger import get_logger
from product_scraper.services.fetcher import TransportError
from product_scraper.strategies.search import InputError, SearchStrategy

logger = get_logger(__name__)

app = FastAPI(title="product-scraper")

CLASSIFICATION_HEADER = "X-Page-Classification"


def get_search_strategy() -> SearchStrategy:
    return SearchStrategy()


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/api/scrape")
async def scrape(
    keyword: Optional[str] = None,
    strategy: SearchStrategy = Depends(get_search_strategy),
):
    try:
        ctx = await strategy.run(keyword)
    except InputError as exc:
        return JSONResponse(status_code=400, content={"error": str(exc)})
    except TransportError as exc:
        logger.error("ERROR DETAILS: %s", exc)
        return JSONResponse(status_code=500, content={"error": "Failed to scrape Amazon data."})

    return JSONResponse(
        content=[product.to_payload() for product in ctx.products],
        headers={CLASSIFICATION_HEADER: ctx.classification.value},
    )
