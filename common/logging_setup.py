# common/logging_setup.py
from __future__ import annotations
import logging
import sys

from loguru import logger

from common.constants import LOG_LEVEL

_VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
_configured = False


class InterceptHandler(logging.Handler):
    """Forward stdlib `logging` records (requests, urllib3, streamlit) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where the logged message originated
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def resolve_level(level: str | None) -> str:
    lvl = (level or "").strip().upper()
    return lvl if lvl in _VALID_LEVELS else "INFO"


def setup_logging(level: str | None = None) -> None:
    """Configure loguru once per process. Streamlit reruns call this on every page load."""
    global _configured
    if _configured:
        return

    lvl = resolve_level(level or LOG_LEVEL)
    logger.remove()  # drop the default handler
    logger.add(
        sys.stderr,
        level=lvl,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        colorize=True,
        backtrace=True,
        diagnose=False,
    )
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    _configured = True
    logger.debug("Logging initialized with level: {}", lvl)
