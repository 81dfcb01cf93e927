"""
Logging Setup
=============
Routes structlog events through the standard library logging stack.

Usage:
    from gsm_core.logging import setup_logging

    # Setup at startup
    setup_logging(level="DEBUG", json_output=False)
"""

import logging
import sys
from typing import Optional

import structlog

from ..config import get_config


def setup_logging(
    level: Optional[str] = None,
    json_output: bool = True,
) -> logging.Logger:
    """
    Configure logging for applications embedding gsm_core.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL); None
            uses GSM_CORE_LOG_LEVEL
        json_output: Whether to output JSON (for production)

    Returns:
        Configured root logger
    """
    level = level or get_config().log_level
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)

    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.get_logger(__name__).info("logging_configured", level=logging.getLevelName(log_level))
    return root_logger
