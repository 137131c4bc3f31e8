"""Logging module for the step machine."""

from .logger import (
    TransitionLogger,
    get_library_logger,
    get_logger,
    get_transition_logger,
    reset_logging,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "get_library_logger",
    "TransitionLogger",
    "get_transition_logger",
    "reset_logging",
]
