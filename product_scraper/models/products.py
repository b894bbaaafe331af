# models/products.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from product_scraper.core.config import UNKNOWN_RATING


class ProductRecord(BaseModel):
    """
    One search-result entry as shown to the user.
    Serialized with the aliases (`reviews`, `imageUrl`) the frontend reads.
    """
    title: str = Field(..., min_length=1)
    rating: str = UNKNOWN_RATING
    review_count: int = Field(default=0, ge=0, alias="reviews")
    image_url: str = Field(..., min_length=1, alias="imageUrl")

    class Config:
        populate_by_name = True  # let review_count / image_url be passed by field name

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class PageClassification(str, Enum):
    valid_results = "valid_results"
    blocked = "blocked"


@dataclass
class ExtractionResult:
    classification: PageClassification
    products: List[ProductRecord] = field(default_factory=list)

    @property
    def blocked(self) -> bool:
        return self.classification == PageClassification.blocked

    @classmethod
    def blocked_page(cls) -> "ExtractionResult":
        return cls(classification=PageClassification.blocked)
