# logger.py
"""
One log stream for the scraper, the API and the CLI.

Entry points (`interface/cli.py`) call `setup_logging` once. Parsing and
classification modules log through `get_logger(__name__)`; the fetcher,
exporter and CLI use loguru, whose records are forwarded to the same
stdlib handlers.
"""

from __future__ import annotations

import logging
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from loguru import logger as _loguru

_DEFAULT_LEVEL = logging.INFO
_DEFAULT_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d "
    "| %(funcName)s | %(message)s"
)
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"
_DEFAULT_LOG_DIR = Path("logs")
_DEFAULT_FILENAME = "scraper.log"

_NOISY_LOGGERS = ("httpx", "httpcore", "urllib3")


class _PropagateHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        logging.getLogger(record.name).handle(record)


def setup_logging(
    *,
    log_level: str | int = _DEFAULT_LEVEL,
    log_path: str | Path | None = None,
    max_bytes: int = 5 * 1024 * 1024,  # 5 MB
    backup_count: int = 5,
) -> Path:
    """
    Send stdlib and loguru records to stderr and to one size-rotated file.

    `log_path` may name the file itself or the directory that holds
    `scraper.log` (defaults to `logs/`). Unknown level names raise
    ValueError before any handler is touched. Returns the file in use.
    """
    level = _resolve_level(log_level)
    log_file = _resolve_log_path(log_path)

    formatter = logging.Formatter(_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(level)

    file_handler = RotatingFileHandler(
        filename=log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)

    # repeated calls replace handlers instead of stacking them
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    root.addHandler(console_handler)
    root.addHandler(file_handler)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    # loguru records go through the stdlib handlers above
    _loguru.remove()
    _loguru.add(_PropagateHandler(), level=level, format="{message}")
    return log_file


def get_logger(name: Optional[str] = None) -> Logger:
    """Namespaced stdlib logger; `None` gives the root logger."""
    return logging.getLogger(name)


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Invalid log level: {level}")
    return resolved


def _resolve_log_path(target: str | Path | None) -> Path:
    path = _DEFAULT_LOG_DIR if target is None else Path(target)
    if not path.suffix:  # a directory, not "run.log"
        path = path / _DEFAULT_FILENAME
    path.parent.mkdir(parents=True, exist_ok=True)
    return path
