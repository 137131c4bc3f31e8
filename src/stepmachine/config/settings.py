"""Configuration management for the step machine using pydantic-settings.

Settings come from environment variables (``STEPMACHINE_`` prefix) or a
``.env`` file and are validated on load.
"""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StepMachineSettings(BaseSettings):
    """Main configuration settings for step machines."""

    model_config = SettingsConfigDict(
        env_prefix="STEPMACHINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging settings
    debug_mode: bool = Field(False, description="Enable debug logging")
    log_level: str = Field("INFO", description="Log level used when logging is set up lazily")
    structured_logging: bool = Field(True, description="Render log events as JSON")
    log_file: Path | None = Field(None, description="Optional file to mirror log output into")
    log_transitions: bool = Field(
        True, description="Emit a structured event for every transition request"
    )

    # Declaration validation
    reject_duplicate_steps: bool = Field(
        True, description="Raise when two declarations share a step name"
    )
    detect_cycles: bool = Field(
        False, description="Raise when static dependency lists form a cycle"
    )
    validate_references: bool = Field(
        False, description="Raise at construction when a static dependency is undeclared"
    )

    def effective_log_level(self) -> str:
        """Log level after applying debug mode."""
        return "DEBUG" if self.debug_mode else self.log_level.upper()


class StepMachineTestSettings(StepMachineSettings):
    """Test-specific settings."""

    model_config = SettingsConfigDict(env_prefix="STEPMACHINE_", env_file=".env.test", extra="ignore")

    log_transitions: bool = False
    structured_logging: bool = False
    detect_cycles: bool = True


# Singleton instance
_settings: StepMachineSettings | None = None


def get_settings(env: str | None = None) -> StepMachineSettings:
    """Get the singleton settings instance.

    Args:
        env: Environment name ('test' or anything else for the defaults)

    Returns:
        StepMachineSettings instance
    """
    global _settings

    if _settings is None:
        env_name = env or os.getenv("STEPMACHINE_ENV", "default")
        if env_name == "test":
            _settings = StepMachineTestSettings()
        else:
            _settings = StepMachineSettings()

    return _settings


def reset_settings() -> None:
    """Reset the settings singleton (mainly for testing)."""
    global _settings
    _settings = None
