"""Step exception.

Exception thrown when step operations fail.
"""

from .step_machine_runtime_exception import StepMachineRuntimeException


class StepException(StepMachineRuntimeException):
    """Exception thrown when step operations fail.

    Raised during step lookups and transitions.
    """

    def __init__(self, message: str = "Step operation failed", step_name: str | None = None):
        """Initialize step exception.

        Args:
            message: Error message
            step_name: Name of the step that caused the error (if applicable)
        """
        super().__init__(message)
        self.step_name = step_name
