# File: src/commitgen/infrastructure/logging/setup.py
# Purpose: Structured logging setup with optional JSON file rotation
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, TextIO

import structlog
from pythonjsonlogger import jsonlogger

from commitgen.infrastructure.logging.formatters import add_source, redact_sensitive

_HANDLER_MARK = "_commitgen_handler"


def setup_logging(
    log_level: str = "INFO",
    log_dir: Optional[str] = None,
    app_name: str = "commitgen",
    json_output: bool = True,
    stream: Optional[TextIO] = None,
) -> structlog.stdlib.BoundLogger:
    """
    Setup structured logging with:
    - JSON formatting for machine parsing (or a plain console renderer)
    - Console output on stderr, so stdout stays reserved for the message
    - Optional file rotation (daily for app logs, size-based for errors)
    - Secret redaction for command strings and sensitive keys

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory to store log files; no file logging when empty
        app_name: Application name for logger identification
        json_output: Emit JSON lines instead of key=value console lines
        stream: Console stream, defaults to sys.stderr

    Returns:
        Configured structlog logger instance
    """
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        redact_sensitive,
        add_source,
    ]
    if json_output:
        # Hand fields to python-json-logger as LogRecord extras
        processors.append(structlog.stdlib.render_to_log_kwargs)
        formatter: logging.Formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            rename_fields={
                "asctime": "ts",
                "levelname": "severity",
                "name": "logger_name",
            },
        )
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
        formatter = logging.Formatter("%(message)s")

    structlog.configure(
        processors=processors,
        context_class=dict,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Tests reconfigure structlog (capture_logs), so never pin loggers
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level.upper())

    # Drop handlers from a previous setup_logging call only
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setFormatter(formatter)
    _install(root_logger, console_handler)

    handler_names = ["console"]
    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        # Application log (rotated daily, keep 14 days)
        app_handler = logging.handlers.TimedRotatingFileHandler(
            filename=log_path / f"{app_name}.log",
            when="midnight",
            interval=1,
            backupCount=14,
            encoding="utf-8",
        )
        app_handler.setFormatter(formatter)
        app_handler.setLevel(logging.DEBUG)
        app_handler.suffix = "%Y-%m-%d"
        _install(root_logger, app_handler)

        # Error log (rotated by size, keep 5 files)
        error_handler = logging.handlers.RotatingFileHandler(
            filename=log_path / f"{app_name}_error.log",
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        error_handler.setFormatter(formatter)
        error_handler.setLevel(logging.ERROR)
        _install(root_logger, error_handler)
        handler_names += ["app_file", "error_file"]

    logger = structlog.get_logger(app_name)
    logger.debug(
        "logging_initialized",
        log_level=log_level,
        log_dir=log_dir or None,
        handlers=handler_names,
    )
    return logger


def _install(root_logger: logging.Logger, handler: logging.Handler) -> None:
    setattr(handler, _HANDLER_MARK, True)
    root_logger.addHandler(handler)


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Optional logger name

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
