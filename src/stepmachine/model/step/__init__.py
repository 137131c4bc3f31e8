"""Step model."""

from .providers import (
    CompletionProvider,
    Dependencies,
    DependencyProvider,
    StepHook,
    always_completed,
    no_op_hook,
)
from .step import Step
from .step_definition import StepDefinition

__all__ = [
    "Step",
    "StepDefinition",
    "DependencyProvider",
    "CompletionProvider",
    "StepHook",
    "Dependencies",
    "always_completed",
    "no_op_hook",
]
