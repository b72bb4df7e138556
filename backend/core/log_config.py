import logging

import structlog
from structlog.stdlib import BoundLogger

LOGGER_NAME = "watchlist"


def setup_logging(dev_mode=True, level="INFO"):
    pre_chain = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    renderer = structlog.dev.ConsoleRenderer() if dev_mode else structlog.processors.JSONRenderer()
    structlog.configure(
        processors=pre_chain + [renderer],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=logging.getLevelName(level.upper()))
    logging.getLogger(LOGGER_NAME).setLevel(level.upper())


def get_logger() -> BoundLogger:
    return structlog.get_logger(LOGGER_NAME)
