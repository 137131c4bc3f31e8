"""Navigation package: the step machine and its dependency handling."""

from .dependency_resolver import DependencyResolver
from .step_machine import StepMachine
from .validation import find_cycle, validate_steps

__all__ = [
    "StepMachine",
    "DependencyResolver",
    "validate_steps",
    "find_cycle",
]
