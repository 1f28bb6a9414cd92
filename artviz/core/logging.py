"""
Logging configuration for the Art Visualizer API.

Records from the standard library loggers and from structlog loggers go
through the same structlog processor chain, so ``LOG_FORMAT=json`` yields
one JSON object per line and ``LOG_FORMAT=console`` a coloured dev format.

Usage:
    # Request-aware logger, prefixes every line with the current request ID:
    from artviz.middleware.logging_middleware import get_logger
    logger = get_logger(__name__)

    # Or plain standard logging:
    import logging
    logger = logging.getLogger(__name__)
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import structlog

from artviz.core.config import Settings, settings as default_settings
from artviz.middleware.logging_middleware import get_request_id

# Keys passed through ``extra=`` that end up as JSON fields
LOG_EXTRA_FIELDS = ("request_id", "method", "path", "status_code", "duration_ms", "error", "phase")


def add_request_id(logger, method_name, event_dict):
    """Attach the current request ID, when there is one."""
    request_id = get_request_id()
    if request_id:
        event_dict.setdefault("request_id", request_id)
    return event_dict


def build_formatter(log_format: str) -> structlog.stdlib.ProcessorFormatter:
    """Formatter rendering stdlib records with the structlog renderer for ``log_format``."""
    pre_chain = [
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.ExtraAdder(allow=LOG_EXTRA_FIELDS),
        add_request_id,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        render = [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ]
    else:
        render = [
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        ]

    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *render],
    )


def setup_logging(settings: Optional[Settings] = None):
    """Configure structlog and the root logger for the application."""
    settings = settings or default_settings

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            add_request_id,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = build_formatter(settings.log_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if settings.environment == "production":
        log_dir = Path("logs")
        log_dir.mkdir(exist_ok=True)

        file_handler = RotatingFileHandler(
            log_dir / "artviz.log",
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

        error_handler = RotatingFileHandler(
            log_dir / "artviz_errors.log",
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        root_logger.addHandler(error_handler)

    # Base64 payloads make these very chatty
    for noisy in ("uvicorn.access", "uvicorn.error", "httpx", "httpcore", "google_genai"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        f"Logging configured: level={settings.log_level}, format={settings.log_format}, env={settings.environment}"
    )
