"""
structlog configuration for datetimeutils.

The library itself only emits debug events while resolving its ambient
configuration. Loggers wrap stdlib loggers, so those events stay silent until
an application raises the "datetimeutils" level; configure_logging() does that
and routes every record through a structlog formatter:

- Human (default): console renderer to stderr
- JSON (log_json=True): structured JSON lines to stderr
"""

import logging
import sys

import structlog

LOGGER_NAME = "datetimeutils"

SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def configure_logging(verbose: bool = False, log_json: bool = False) -> None:
    """
    Configure structlog processors and output routing.

    Args:
        verbose: Enable DEBUG-level output for datetimeutils. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    package_level = logging.DEBUG if verbose else logging.WARNING

    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(package_level)


def get_logger(name: str = LOGGER_NAME):
    """
    Return a structlog logger bound to the stdlib logger called `name`.

    Level filtering is left to stdlib, so nothing is emitted below the
    effective level of that logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
