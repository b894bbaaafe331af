# exporter.py

import csv
import json
from enum import Enum
from loguru import logger
from pathlib import Path
from typing import List, Sequence

from product_scraper.models.products import ProductRecord

CSV_FIELDS = ["title", "rating", "reviews", "imageUrl"]


class ExportFormat(str, Enum):
    json = "json"
    csv = "csv"


def export_products(
    products: List[ProductRecord],
    output_dir: str = "outputs",
    formats: Sequence[str | ExportFormat] = (ExportFormat.json, ExportFormat.csv),
) -> List[str]:
    """
    Export products to JSON and/or CSV.
    Rows use the API field names: title, rating, reviews, imageUrl.
    Raises ValueError for a format other than json or csv.
    """
    requested = {ExportFormat(fmt) for fmt in formats}
    Path(output_dir).mkdir(parents=True, exist_ok=True)
    rows = [product.to_payload() for product in products]
    written: List[str] = []

    if ExportFormat.json in requested:
        json_path = Path(output_dir) / "products.json"
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(rows, f, ensure_ascii=False, indent=2)
        logger.success(f"📄 Exported {len(rows)} products to {json_path}")
        written.append(str(json_path))

    if ExportFormat.csv in requested:
        csv_path = Path(output_dir) / "products.csv"
        with open(csv_path, "w", newline='', encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=CSV_FIELDS)
            writer.writeheader()
            writer.writerows(rows)
        logger.success(f"📄 Exported {len(rows)} products to {csv_path}")
        written.append(str(csv_path))

    return written
