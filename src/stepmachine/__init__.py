"""stepmachine: navigation across named steps with dependencies.

A StepMachine moves between declared steps. Each step may require other
steps to be completed first, report its own completion through a predicate,
and run hooks when it is entered or left.

Usage:
    from stepmachine import StepDefinition, StepMachine

    machine = StepMachine([
        StepDefinition("terms", completed_if=lambda: state.accepted),
        StepDefinition("date", dependencies=["terms"]),
    ])
    machine.go_to("date")
"""

from .config import StepMachineSettings, get_settings, reset_settings
from .exceptions import (
    DependencyCycleException,
    DuplicateStepException,
    StepConfigurationException,
    StepException,
    StepMachineRuntimeException,
    StepNotFoundException,
)
from .logging import get_logger, setup_logging
from .model import Step, StepDefinition, TransitionOptions
from .navigation import DependencyResolver, StepMachine

__version__ = "0.1.0"

__all__ = [
    # Core
    "StepMachine",
    "Step",
    "StepDefinition",
    "TransitionOptions",
    "DependencyResolver",
    # Exceptions
    "StepMachineRuntimeException",
    "StepException",
    "StepNotFoundException",
    "StepConfigurationException",
    "DuplicateStepException",
    "DependencyCycleException",
    # Configuration and logging
    "StepMachineSettings",
    "get_settings",
    "reset_settings",
    "setup_logging",
    "get_logger",
    "__version__",
]
