"""Logging utilities for Shapekit."""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on reconfiguration
_installed_handlers: list[logging.Handler] = []


@dataclass
class CommandStats:
    """Statistics from a CLI command run."""

    command: str
    input_count: int = 0
    output_count: int = 0
    errors: list[str] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_ms(self) -> float:
        """Calculate command duration in milliseconds."""
        if self.start_time is not None and self.end_time is not None:
            return (self.end_time - self.start_time) * 1000.0
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output. With no log file either,
            records are discarded.

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        _installed_handlers.append(console_handler)

    if not _installed_handlers:
        # Root always has a handler of ours, so logging.lastResort never fires
        _installed_handlers.append(logging.NullHandler())

    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.addHandler(handler)

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
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("shapekit")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class CommandLogger:
    """Logger for tracking a CLI command and its statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger, command: str) -> None:
        self._logger = logger
        self._stats = CommandStats(command=command)

    def log_start(self, input_count: int) -> None:
        """Log start of a command."""
        self._stats.start_time = time.perf_counter()
        self._stats.input_count = input_count
        self._logger.debug("Command started", command=self._stats.command, inputs=input_count)

    def log_complete(self, output_count: int) -> None:
        """Log successful completion of a command."""
        self._stats.end_time = time.perf_counter()
        self._stats.output_count = output_count
        self._logger.info(
            "Command complete",
            command=self._stats.command,
            inputs=self._stats.input_count,
            outputs=output_count,
            duration_ms=round(self._stats.duration_ms, 3),
        )

    def log_error(self, error: Exception) -> None:
        """Log a command failure."""
        self._logger.error(
            "Command failed",
            command=self._stats.command,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.errors.append(str(error))

    @property
    def stats(self) -> CommandStats:
        """Get current command statistics."""
        return self._stats
