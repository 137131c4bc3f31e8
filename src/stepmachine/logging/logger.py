"""Structured logging configuration for the step machine using structlog."""

import logging
import os
import sys
from pathlib import Path
from typing import Any, cast

import structlog

from ..config import get_settings

DISABLE_CONSOLE_ENV = "STEPMACHINE_DISABLE_CONSOLE_LOGGING"

# Global state for lazy initialization
_logging_initialized = False


def setup_logging(
    level: str = "INFO",
    log_file: Path | None = None,
    structured: bool = True,
    console: bool = True,
    add_timestamp: bool = True,
    colorize: bool = True,
) -> None:
    """Configure structured logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path to log file
        structured: Use JSON structured output
        console: Enable console output (overridden by STEPMACHINE_DISABLE_CONSOLE_LOGGING)
        add_timestamp: Add timestamps to logs
        colorize: Colorize console output (only for non-structured)
    """
    global _logging_initialized

    if os.getenv(DISABLE_CONSOLE_ENV) == "1":
        console = False

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]

    if add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    processors.extend(
        [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
        ]
    )

    if structured:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=colorize and console))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = []

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(file_handler)

    if not handlers:
        handlers.append(logging.NullHandler())
        level = "CRITICAL"

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
        handlers=handlers,
        force=True,
    )
    _logging_initialized = True


def _ensure_logging_initialized() -> None:
    """Ensure logging is initialized (called lazily, not at import time)."""
    global _logging_initialized

    if _logging_initialized:
        return

    try:
        settings = get_settings()
        setup_logging(
            level=settings.effective_log_level(),
            log_file=settings.log_file,
            structured=settings.structured_logging,
            colorize=settings.debug_mode,
        )
    except (AttributeError, OSError, ValueError):
        # Settings could not be loaded or the log file is unusable
        setup_logging(level="INFO", structured=False)

    _logging_initialized = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance
    """
    _ensure_logging_initialized()
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


def get_library_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger that leaves logging configuration alone.

    Events run through whichever structlog processors are configured (the
    structlog defaults until an application calls setup_logging) and end up
    in the stdlib logger ``name``, whose handlers and level belong to the
    application.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Structured logger instance
    """
    return cast(
        structlog.stdlib.BoundLogger,
        structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger),
    )


class TransitionLogger:
    """Specialized logger for step transitions."""

    def __init__(self, base_logger: structlog.stdlib.BoundLogger | None = None) -> None:
        """Initialize transition logger.

        Args:
            base_logger: Base logger to use
        """
        self.logger = base_logger or get_library_logger(__name__)

    def log_transition(
        self, from_step: str | None, to_step: str, requested: str, **kwargs: Any
    ) -> None:
        """Log a completed transition.

        Args:
            from_step: Step that was left (None on the first transition)
            to_step: Step that was entered
            requested: Step name the caller asked for
            **kwargs: Additional context
        """
        self.logger.info(
            "step_transition",
            from_step=from_step,
            to_step=to_step,
            requested=requested,
            **kwargs,
        )

    def log_fallback(self, requested: str, fallback: str, **kwargs: Any) -> None:
        """Log a redirect to an incomplete dependency."""
        self.logger.info("step_transition_fallback", requested=requested, fallback=fallback, **kwargs)

    def log_blocked(self, requested: str, incomplete: str, current: str | None, **kwargs: Any) -> None:
        """Log a transition aborted because a dependency is incomplete."""
        self.logger.warning(
            "step_transition_blocked",
            requested=requested,
            incomplete=incomplete,
            current_step=current,
            **kwargs,
        )

    def log_noop(self, step: str, **kwargs: Any) -> None:
        """Log a request for the step the machine is already on."""
        self.logger.debug("step_transition_noop", step=step, **kwargs)


# Created on first access so importing the package never configures logging
transition_logger: TransitionLogger | None = None


def get_transition_logger() -> TransitionLogger:
    """Get the shared transition logger, creating it on first use."""
    global transition_logger
    if transition_logger is None:
        transition_logger = TransitionLogger()
    return transition_logger


def reset_logging() -> None:
    """Forget lazy logging state so the next logger re-reads settings (mainly for testing)."""
    global _logging_initialized, transition_logger
    _logging_initialized = False
    transition_logger = None
    structlog.reset_defaults()
