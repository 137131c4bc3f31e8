"""Step not found exception.

Exception for step names that were never declared.
"""

from .step_exception import StepException


class StepNotFoundException(StepException):
    """Thrown when a requested step is not among the declared steps.

    This is raised either for the target of ``go_to`` or for a dependency
    reached while resolving it. It always indicates a mistake in the step
    declarations, so it is never absorbed by the machine.
    """

    def __init__(self, step_name: str, context: str | None = None):
        """Construct a new step not found exception.

        Args:
            step_name: The name of the step that could not be found
            context: Optional additional context about where the step was expected
        """
        if context:
            message = f"No definition provided for step '{step_name}' ({context})"
        else:
            message = f"No definition provided for step '{step_name}'"
        super().__init__(message, step_name=step_name)
