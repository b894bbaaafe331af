from pathlib import Path
from typing import Optional

from loguru import logger

from product_scraper.core.config import DIAGNOSTIC_PATH


def save_error_response(body: str, path: str | Path = DIAGNOSTIC_PATH) -> Optional[str]:
    """Dump an upstream error page for offline inspection. Overwrites the previous dump."""
    file_path = Path(path)
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(body, encoding="utf-8")
    except OSError as e:
        logger.warning(f"Could not save error page to {file_path}: {repr(e)}")
        return None
    logger.info(f"Error page HTML saved to {file_path}")
    return str(file_path)
