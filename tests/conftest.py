"""Pytest configuration and fixtures."""

import pytest

from stepmachine.config import StepMachineSettings, reset_settings
from stepmachine.logging import reset_logging


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Start every test from fresh settings and unconfigured logging."""
    monkeypatch.setenv("STEPMACHINE_DISABLE_CONSOLE_LOGGING", "1")
    reset_settings()
    reset_logging()
    yield
    reset_settings()
    reset_logging()


@pytest.fixture
def settings():
    """Settings with transition logging off and default validation."""
    return StepMachineSettings(log_transitions=False)
