import logging
import sys

import pytest
from loguru import logger as loguru_logger

from product_scraper.core.logger import get_logger, setup_logging


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    loguru_logger.remove()
    loguru_logger.add(sys.stderr)


def test_stdlib_and_loguru_share_the_log_file(tmp_path, restore_logging):
    log_file = setup_logging(log_level="DEBUG", log_path=tmp_path)

    get_logger("product_scraper.tests").info("from stdlib")
    loguru_logger.info("from loguru")

    assert log_file == tmp_path / "scraper.log"
    content = log_file.read_text(encoding="utf-8")
    assert "from stdlib" in content
    assert "from loguru" in content


def test_explicit_file_path_and_noisy_loggers(tmp_path, restore_logging):
    target = tmp_path / "nested" / "run.log"

    assert setup_logging(log_level="INFO", log_path=target) == target
    assert logging.getLogger("httpx").level == logging.WARNING


def test_invalid_level_is_rejected(tmp_path):
    with pytest.raises(ValueError):
        setup_logging(log_level="LOUD", log_path=tmp_path)
