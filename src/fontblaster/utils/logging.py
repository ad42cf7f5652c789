"""Logging utilities for FontBlaster."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

import structlog

_configured_handlers: list[logging.Handler] = []


class DiagnosticsSink(Protocol):
    """Receives human-readable diagnostic messages."""

    def emit(self, message: str, *, failure: bool = False, **fields: Any) -> None:
        ...


class StructlogSink:
    """Diagnostics sink writing tagged messages through structlog.

    The enabled flag is read before every emission, so it may be a plain
    bool or a zero-argument callable such as a lookup of a global switch.

    Example:
        sink = StructlogSink(enabled=True)
        sink.emit("No fonts were found", path="/app/Resources")
        # event: "[FontBlaster]: No fonts were found"
    """

    def __init__(
        self,
        enabled: bool | Callable[[], bool] = False,
        tag: str = "FontBlaster",
        logger_name: str = "fontblaster",
    ) -> None:
        self._enabled = enabled
        self._tag = tag
        self._logger_name = logger_name

    @property
    def enabled(self) -> bool:
        if callable(self._enabled):
            return bool(self._enabled())
        return self._enabled

    def emit(self, message: str, *, failure: bool = False, **fields: Any) -> None:
        if not self.enabled:
            return
        logger = structlog.get_logger(self._logger_name)
        event = f"[{self._tag}]: {message}"
        if failure:
            logger.warning(event, **fields)
        else:
            logger.info(event, **fields)


@dataclass
class DiagnosticRecord:
    """A message captured by MemorySink."""

    message: str
    failure: bool
    fields: dict[str, Any] = field(default_factory=dict)


class MemorySink:
    """Diagnostics sink keeping messages in memory."""

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self.records: list[DiagnosticRecord] = []

    def emit(self, message: str, *, failure: bool = False, **fields: Any) -> None:
        if not self.enabled:
            return
        self.records.append(DiagnosticRecord(message, failure, dict(fields)))

    @property
    def messages(self) -> list[str]:
        return [r.message for r in self.records]

    @property
    def failures(self) -> list[DiagnosticRecord]:
        return [r for r in self.records if r.failure]


def configure_logging(
    log_file: Path | None = None,
    level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging for diagnostic output.

    Args:
        log_file: Optional path to a log file
        level: Logging level for the configured handlers
        quiet: If True, do not attach a console handler

    Returns:
        Configured structlog logger
    """
    log_level = getattr(logging, level.upper())
    package_logger = logging.getLogger("fontblaster")
    package_logger.setLevel(log_level)

    # Replace handlers from an earlier call
    while _configured_handlers:
        handler = _configured_handlers.pop()
        package_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        package_logger.addHandler(file_handler)
        _configured_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(console_handler)
        _configured_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logger = structlog.get_logger("fontblaster")
    logger.debug("Logging initialized", log_file=str(log_file), level=level)

    return logger
