"""
Structured logging configuration for the language assistant.

All application code logs through ``logger`` (or a tagged ``ServiceLogger``);
stdlib loggers from libraries are routed through the same JSON formatter.
"""

import logging
import os
import sys

import structlog
from structlog.typing import EventDict, WrappedLogger


def flatten_extra(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Flatten a stdlib-style ``extra`` dict into the root of the event.
    e.g. logger.info("msg", extra={"word": "x"}) -> {"event": "msg", "word": "x", ...}
    """
    extra = event_dict.pop("extra", None)
    if extra and isinstance(extra, dict):
        event_dict.update(extra)
    return event_dict


shared_processors = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.dev.set_exc_info,
    structlog.processors.format_exc_info,
    flatten_extra,
]


def configure_logging(log_level: str = "INFO"):
    """Configure structlog and route stdlib logging through it."""
    env_log_level = os.getenv("LOG_LEVEL", log_level).upper()

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ],
    )

    # Clear existing handlers to avoid duplicated output
    root_logger = logging.getLogger()
    for h in root_logger.handlers[:]:
        root_logger.removeHandler(h)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, env_log_level, logging.INFO))

    logging.getLogger("app_logger").setLevel(getattr(logging, env_log_level, logging.INFO))

    # uvicorn installs its own handlers; send everything to the root instead
    for logger_name in ["uvicorn", "uvicorn.error", "uvicorn.access"]:
        uv_logger = logging.getLogger(logger_name)
        uv_logger.handlers = []
        uv_logger.propagate = True

    access_log_level = os.getenv("ACCESS_LOG_LEVEL", "WARNING").upper()
    logging.getLogger("uvicorn.access").setLevel(getattr(logging, access_log_level, logging.WARNING))


configure_logging()

logger = structlog.get_logger("app_logger")


class ServiceLogger:
    """
    Logger that prefixes every event with a service/operation tag.

    Usage:
        log = ServiceLogger("WordMeaning")
        log.info("lookup", "Fetching definition", word="benevolent")
        # {"event": "[WordMeaning.lookup] Fetching definition", "word": "benevolent", ...}
    """

    def __init__(self, service_name: str):
        self.service_name = service_name
        self._logger = structlog.get_logger("app_logger")

    def _format_event(self, operation: str, message: str) -> str:
        return f"[{self.service_name}.{operation}] {message}"

    def debug(self, operation: str, message: str, **kwargs):
        self._logger.debug(self._format_event(operation, message), **kwargs)

    def info(self, operation: str, message: str, **kwargs):
        self._logger.info(self._format_event(operation, message), **kwargs)

    def warning(self, operation: str, message: str, **kwargs):
        self._logger.warning(self._format_event(operation, message), **kwargs)

    def error(self, operation: str, message: str, **kwargs):
        self._logger.error(self._format_event(operation, message), **kwargs)

    def exception(self, operation: str, message: str, **kwargs):
        self._logger.exception(self._format_event(operation, message), **kwargs)


def get_service_logger(service_name: str) -> ServiceLogger:
    return ServiceLogger(service_name)
