"""
Logging Configuration for the League Cap Engine

The engine modules only ever call logging.getLogger(__name__); this module
is for the application embedding them (report jobs, API servers, tests) to
decide where those records go:
- Colored console output
- Rotating file handlers (main INFO+ log and an ERROR+ log)
- Per-package level overrides (e.g. DEBUG for salary_cap only)

Usage Example:
    from logging_config import setup_logging, get_logger

    setup_logging(level="INFO", log_dir="logs")
    logger = get_logger(__name__)
    logger.info("Cap report started")

Log Files Created:
- logs/league_cap_engine.log: Main log (INFO+)
- logs/league_cap_engine_error.log: Error log (ERROR+)

Each file rotates at 10MB with 5 backups.
"""

import logging
import logging.handlers
import os
from pathlib import Path
from typing import Optional


DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"
)

SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

CONSOLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_PREFIX = "league_cap_engine"

# Engine packages that can be tuned independently
ENGINE_LOGGERS = (
    "salary_cap",
    "salary_cap.cap_calculator",
    "salary_cap.dead_money",
    "salary_cap.team_cap",
    "salary_cap.league_envelope",
    "config.cap_settings",
)


class ColoredFormatter(logging.Formatter):
    """Console formatter that colors the level name with ANSI codes."""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def format(self, record):
        color = self.COLORS.get(record.levelname)
        if color is None:
            return super().format(record)

        # Color a copy so file handlers sharing the record stay plain
        colored = logging.makeLogRecord(record.__dict__)
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


def _rotating_handler(
    log_dir: str,
    suffix: str,
    level: int,
    log_format: str,
    max_bytes: int,
    backup_count: int
) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=os.path.join(log_dir, f"{LOG_FILE_PREFIX}{suffix}.log"),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(log_format, datefmt=DATE_FORMAT))
    return handler


def setup_logging(
    level: str = "INFO",
    log_dir: str = "logs",
    enable_console: bool = True,
    enable_file: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    format_style: str = "detailed"
) -> None:
    """
    Configure root logging for an application using the cap engine.

    Call once at startup. Existing root handlers are replaced.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files
        enable_console: Whether to log to console
        enable_file: Whether to log to rotating files
        max_bytes: Maximum size per log file before rotation
        backup_count: Rotated files to keep
        format_style: "detailed" or "simple" file format
    """
    numeric_level = getattr(logging, level.upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    if enable_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt=DATE_FORMAT))
        root_logger.addHandler(console_handler)

    if enable_file:
        Path(log_dir).mkdir(parents=True, exist_ok=True)
        log_format = DETAILED_FORMAT if format_style == "detailed" else SIMPLE_FORMAT

        root_logger.addHandler(
            _rotating_handler(log_dir, "", logging.INFO, log_format, max_bytes, backup_count)
        )
        root_logger.addHandler(
            _rotating_handler(log_dir, "_error", logging.ERROR, DETAILED_FORMAT, max_bytes, backup_count)
        )

    root_logger.info(
        f"Logging initialized - Level: {level}, "
        f"Console: {enable_console}, File: {enable_file}"
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module (typically __name__)."""
    return logging.getLogger(name)


def log_exception(
    logger: logging.Logger,
    exception: Exception,
    context: Optional[dict] = None,
    level: str = "ERROR"
) -> None:
    """
    Log an exception with traceback and context.

    Args:
        logger: Logger instance
        exception: Exception to log
        context: Additional context (franchise_id, season, etc.)
        level: Log level (default: ERROR)

    Example:
        >>> try:
        ...     settings = load_cap_settings("league.json")
        ... except ValueError as e:
        ...     log_exception(logger, e, context={"league_id": "12345"})
    """
    context_str = ""
    if context:
        context_str = " [" + ", ".join(f"{k}={v}" for k, v in context.items()) + "]"

    logger.log(
        getattr(logging, level.upper()),
        f"Exception occurred{context_str}: {type(exception).__name__}: {exception}",
        exc_info=True
    )


def configure_module_logger(
    module_name: str,
    level: Optional[str] = None,
    propagate: bool = True
) -> logging.Logger:
    """
    Set the level of one module's logger.

    Args:
        module_name: Logger name (e.g., "salary_cap.dead_money")
        level: Log level (None = inherit from parent)
        propagate: Whether records propagate to parent handlers

    Returns:
        Configured logger
    """
    logger = logging.getLogger(module_name)
    if level:
        logger.setLevel(getattr(logging, level.upper()))
    logger.propagate = propagate
    return logger


def setup_cap_engine_logging(level: str = "INFO") -> None:
    """
    Set the level for all cap engine loggers.

    DEBUG shows skipped records such as dead money dropped outside the
    salary-year window.
    """
    for module_name in ENGINE_LOGGERS:
        configure_module_logger(module_name, level=level)


class LogContext:
    """
    Context manager for a temporary log level.

    Example:
        >>> logger = get_logger("salary_cap.dead_money")
        >>> with LogContext(logger, "DEBUG"):
        ...     amortizer.aggregate_dead_money(adjustments)
    """

    def __init__(self, logger: logging.Logger, level: str):
        self.logger = logger
        self.new_level = getattr(logging, level.upper())
        self.original_level = logger.level

    def __enter__(self):
        self.logger.setLevel(self.new_level)
        return self.logger

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.logger.setLevel(self.original_level)


# Quick setup presets

def setup_production_logging(log_dir: str = "logs") -> None:
    """INFO to rotating files only, simple format."""
    setup_logging(
        level="INFO",
        log_dir=log_dir,
        enable_console=False,
        enable_file=True,
        format_style="simple"
    )


def setup_development_logging(log_dir: str = "logs") -> None:
    """DEBUG to colored console and detailed rotating files."""
    setup_logging(
        level="DEBUG",
        log_dir=log_dir,
        enable_console=True,
        enable_file=True,
        format_style="detailed"
    )


def setup_testing_logging() -> None:
    """WARNING to console only, keeping test output quiet."""
    setup_logging(
        level="WARNING",
        enable_console=True,
        enable_file=False,
        format_style="simple"
    )
