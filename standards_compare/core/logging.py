"""
Structured logging configuration built on structlog.
Logs double as documentation: every event carries meaningful context.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger, Processor


def configure_logging(
    level: str = "INFO",
    json_logs: bool = True,
    log_file: Optional[str] = None
) -> None:
    """
    Configure the structured logging pipeline.

    Args:
        level: log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: render JSON instead of colored console output
        log_file: optional log file path
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.format_exc_info,
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        # files are always JSON
        file_handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processor=structlog.processors.JSONRenderer(),
            )
        )
        logging.getLogger().addHandler(file_handler)


def get_logger(
    name: str,
    **initial_context: Any
) -> FilteringBoundLogger:
    """
    Get a structured logger.

    Args:
        name: logger name, usually the module name
        **initial_context: context bound to every event

    Returns:
        configured logger
    """
    logger = structlog.get_logger(name)
    if initial_context:
        logger = logger.bind(**initial_context)
    return logger


class LogEvent:
    """Standardized log event names"""

    # Application lifecycle
    APP_STARTED = "app_started"
    APP_STOPPED = "app_stopped"
    TAXONOMY_LOADED = "taxonomy_loaded"

    # API requests
    REQUEST_COMPLETED = "request_completed"
    REQUEST_FAILED = "request_failed"

    # Documents
    DOCUMENT_OPENED = "document_opened"
    DOCUMENT_CLOSED = "document_closed"
    DOCUMENT_PARSE_FAILED = "document_parse_failed"

    # Comparison engine
    COMPARISON_STARTED = "comparison_started"
    COMPARISON_COMPLETED = "comparison_completed"
    COMPARISON_SUPERSEDED = "comparison_superseded"
    COMPARISON_DISMISSED = "comparison_dismissed"
    EXTRACTION_FAILED = "extraction_failed"
    HIGHLIGHT_APPLIED = "highlight_applied"
    HIGHLIGHT_MISSED = "highlight_missed"

    # Guidance
    GUIDANCE_GENERATED = "guidance_generated"


def create_request_logger(request_id: str) -> FilteringBoundLogger:
    """Logger bound to a request id"""
    return get_logger("request", request_id=request_id)
