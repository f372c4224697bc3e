from __future__ import annotations

import logging
import sys

import structlog


LOGGER_NAME = "usernames"


def configure_logging(log_level: str) -> None:
    # stdout is reserved for generated names.
    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=log_level.upper())
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(log_level.upper())),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Bound to a stdlib logger: callers that never configure logging get nothing on stdout.
logger = structlog.wrap_logger(logging.getLogger(LOGGER_NAME))
