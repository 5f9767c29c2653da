"""Structured Logging for strvalidate

structlog bound to standard library loggers under the ``strvalidate``
namespace. Nothing is emitted until the application enables the namespace,
either through its own ``logging`` setup or with ``configure_logging``.
The global structlog configuration is left alone.

- Colored, human-readable dev output
- JSON structured production output
"""
import logging
import sys

import structlog
from structlog.types import EventDict, Processor

LOGGER_NAMESPACE = "strvalidate"


def _add_library_info(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that tags events with the library name."""
    event_dict.setdefault("library", LOGGER_NAMESPACE)
    return event_dict


def get_shared_processors() -> list[Processor]:
    """Processors used by library loggers and the stdlib formatter."""
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_library_info,
    ]


def configure_logging(level: str | None = None, json_logs: bool | None = None) -> None:
    """Attach a handler to the library namespace.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Defaults to settings.
        json_logs: If True, output JSON format. If False, colored console output.
            Defaults to settings.
    """
    from .config import get_settings

    settings = get_settings()
    level = level or settings.LOG_LEVEL
    json_logs = settings.LOG_JSON if json_logs is None else json_logs
    log_level = getattr(logging, level.upper(), logging.INFO)

    if json_logs:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=True,
            exception_formatter=structlog.dev.plain_traceback,
        )

    # Formatter also renders plain stdlib records logged under the namespace
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    lib_logger = logging.getLogger(LOGGER_NAMESPACE)
    lib_logger.handlers = [handler]
    lib_logger.setLevel(log_level)
    lib_logger.propagate = False


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger under the library namespace.

    Args:
        name: Component name, e.g. ``"combinators"``

    Returns:
        structlog logger wrapping the stdlib logger ``strvalidate.<name>``
    """
    return structlog.wrap_logger(
        logging.getLogger(f"{LOGGER_NAMESPACE}.{name}"),
        processors=[
            structlog.stdlib.filter_by_level,
            *get_shared_processors(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
