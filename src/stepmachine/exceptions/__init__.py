"""Exceptions package.

Library-specific exceptions.
"""

from .configuration_exception import (
    DependencyCycleException,
    DuplicateStepException,
    StepConfigurationException,
)
from .step_exception import StepException
from .step_machine_runtime_exception import StepMachineRuntimeException
from .step_not_found_exception import StepNotFoundException

__all__ = [
    "StepMachineRuntimeException",
    "StepException",
    "StepNotFoundException",
    "StepConfigurationException",
    "DuplicateStepException",
    "DependencyCycleException",
]
