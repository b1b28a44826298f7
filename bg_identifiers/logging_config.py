"""structlog setup for the identifier checker.

Every event is rendered as one JSON line on stdout through the standard
library root handler, so stdlib loggers in the core modules and structlog
loggers in the tool layer share one stream and one level.
Identifiers are personal data - log their length and outcome, never the value.
"""
import logging
import sys
from typing import Optional

import structlog

from bg_identifiers import config

PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.JSONRenderer(),
]


def _resolve_level(log_level: Optional[str]) -> int:
    level_name = (log_level or config.LOG_LEVEL).upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: '{level_name}'")
    return level


def setup_structured_logging(log_level: Optional[str] = None):
    """
    Route validation events to stdout as JSON at the given level.

    Safe to call again: the root handler is replaced, not stacked.

    Args:
        log_level: Level name such as "DEBUG" or "WARNING"; config.LOG_LEVEL if omitted

    Raises:
        ValueError: If the level name is not a logging level
    """
    level = _resolve_level(log_level)

    structlog.configure(
        processors=PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=True)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """structlog logger for a module; pass __name__."""
    return structlog.get_logger(name)
