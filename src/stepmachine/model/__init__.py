"""Model package: step declarations and transition options."""

from .step import Step, StepDefinition
from .transition import TransitionOptions

__all__ = ["Step", "StepDefinition", "TransitionOptions"]
