"""Configuration exceptions.

Exceptions raised while validating step declarations at construction time.
"""

from collections.abc import Sequence

from .step_machine_runtime_exception import StepMachineRuntimeException


class StepConfigurationException(StepMachineRuntimeException):
    """Raised when the step declarations handed to a machine are invalid."""

    def __init__(self, message: str = "Invalid step configuration"):
        super().__init__(message)


class DuplicateStepException(StepConfigurationException):
    """Raised when two declarations share the same step name."""

    def __init__(self, step_name: str):
        self.step_name = step_name
        super().__init__(f"Step '{step_name}' is declared more than once")


class DependencyCycleException(StepConfigurationException):
    """Raised when static dependency lists form a cycle.

    Attributes:
        cycle: Step names along the cycle, first name repeated at the end
    """

    def __init__(self, cycle: Sequence[str]):
        self.cycle = list(cycle)
        super().__init__(f"Dependency cycle detected: {' -> '.join(self.cycle)}")
