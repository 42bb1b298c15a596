"""Logging setup for CheatHub.

structlog renders every event; stdlib ``logging`` routes the rendered line to
the console and/or rotating files. Credentials and token values are masked by
a processor before any renderer sees them.
"""

import logging
import logging.handlers
import os
import sys
from collections.abc import MutableMapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import structlog

# Event keys whose values must never reach a log sink.
SENSITIVE_KEYS = frozenset({"password", "token", "api_token", "x-api-token"})
REDACTED = "***"

# Libraries that log each request themselves at INFO.
NOISY_LOGGERS = ("httpx", "httpcore")


@dataclass(frozen=True)
class LogFile:
    """A rotating log file written into the log directory."""
    filename: str
    max_bytes: int
    backup_count: int
    min_level: int | None = None  # None: follow the configured level


LOG_FILES: tuple[LogFile, ...] = (
    LogFile("app.log", max_bytes=10 * 1024 * 1024, backup_count=5),
    LogFile("error.log", max_bytes=5 * 1024 * 1024, backup_count=3, min_level=logging.ERROR),
)


def redact_secrets(
    logger: Any,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor masking credential and token values."""
    for key in list(event_dict):
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = REDACTED
    return event_dict


class LoggingService:
    """Configures structlog and the stdlib handlers it writes through."""

    def __init__(
        self,
        log_level: str = "INFO",
        log_dir: Path | None = None,
        tui_mode: bool = False,
    ) -> None:
        """Initialize the logging service.

        Args:
            log_level: The minimum log level to capture
            log_dir: Directory for log files (None for console only)
            tui_mode: If True, nothing is written to stdout so the terminal UI is not overwritten
        """
        self.log_level = log_level.upper()
        self.log_dir = log_dir
        self.tui_mode = tui_mode
        self.is_development = os.getenv("ENVIRONMENT", "development") == "development"

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.log_level, logging.INFO)

    @property
    def uses_console_renderer(self) -> bool:
        """Readable output only for a development console with no files to keep parseable."""
        return self.is_development and not self.log_dir

    def configure(self) -> None:
        """Install handlers on the root logger, then configure structlog."""
        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.setLevel(self.numeric_level)

        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(max(self.numeric_level, logging.WARNING))

        for handler in self._build_handlers():
            root_logger.addHandler(handler)

        structlog.configure(
            processors=self._get_processors(),
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

    def _build_handlers(self) -> list[logging.Handler]:
        handlers: list[logging.Handler] = []
        if not self.tui_mode:
            handlers.append(self._console_handler())
        if self.log_dir:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            handlers.extend(self._file_handler(log_file) for log_file in LOG_FILES)
        return handlers

    def _console_handler(self) -> logging.Handler:
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(self.numeric_level)
        if self.is_development:
            handler.setFormatter(logging.Formatter(
                fmt="%(asctime)s [%(levelname)8s] %(name)s: %(message)s",
                datefmt="%H:%M:%S"
            ))
        else:
            handler.setFormatter(logging.Formatter("%(message)s"))
        return handler

    def _file_handler(self, log_file: LogFile) -> logging.Handler:
        assert self.log_dir is not None
        handler = logging.handlers.RotatingFileHandler(
            filename=self.log_dir / log_file.filename,
            maxBytes=log_file.max_bytes,
            backupCount=log_file.backup_count,
            encoding="utf-8"
        )
        handler.setLevel(log_file.min_level if log_file.min_level is not None else self.numeric_level)
        # Lines are already rendered as JSON by structlog
        handler.setFormatter(logging.Formatter("%(message)s"))
        return handler

    def _get_processors(self) -> list[Any]:
        processors: list[Any] = [
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            redact_secrets,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
        ]
        if self.uses_console_renderer:
            processors.append(structlog.dev.ConsoleRenderer(colors=True))
        else:
            processors.append(structlog.processors.JSONRenderer())
        return processors

    def get_logger(self, name: str | None = None) -> structlog.stdlib.BoundLogger:
        """Get a configured logger instance."""
        return structlog.stdlib.get_logger(name)


def setup_logging(
    log_level: str = "INFO",
    log_dir: Path | None = None,
    environment: str | None = None,
    tui_mode: bool = False,
) -> LoggingService:
    """Set up application logging.

    Args:
        log_level: Minimum log level to capture
        log_dir: Directory for log files (None for console only)
        environment: Environment name (development/production)
        tui_mode: If True, disable console logging

    Returns:
        Configured LoggingService instance
    """
    if environment:
        os.environ["ENVIRONMENT"] = environment

    service = LoggingService(log_level=log_level, log_dir=log_dir, tui_mode=tui_mode)
    service.configure()
    return service
