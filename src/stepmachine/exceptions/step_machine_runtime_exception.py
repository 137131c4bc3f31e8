"""Step machine runtime exception.

Base exception for the library.
"""


class StepMachineRuntimeException(RuntimeError):
    """Base runtime exception for all step machine exceptions.

    Runtime exceptions let configuration errors propagate through hooks and
    reentrant transitions up to whoever called ``go_to`` without forcing every
    layer in between to handle them.
    """

    def __init__(self, message: str):
        """Construct a new runtime exception.

        Args:
            message: The detail message
        """
        super().__init__(message)
