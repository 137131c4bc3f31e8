"""Configuration package.

Usage:
    from stepmachine.config import get_settings

    settings = get_settings()
    if settings.detect_cycles:
        ...
"""

from .settings import StepMachineSettings, StepMachineTestSettings, get_settings, reset_settings

__all__ = [
    "StepMachineSettings",
    "StepMachineTestSettings",
    "get_settings",
    "reset_settings",
]
