"""TransitionOptions - per-request switches for StepMachine.go_to."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class TransitionOptions:
    """Options controlling a single transition request.

    Attributes:
        skip_leave_current: Do not run the current step's leave hook
        skip_enter_next: Do not run the target step's enter hook
        fallback_to_incomplete_dependency: When a dependency of the target is
            incomplete, move to that dependency instead of staying put
    """

    skip_leave_current: bool = False
    skip_enter_next: bool = False
    fallback_to_incomplete_dependency: bool = True

    @classmethod
    def from_kwargs(cls, **kwargs: Any) -> TransitionOptions:
        """Build options from keyword arguments.

        Raises:
            TypeError: If an unknown option name is given
        """
        allowed = {f.name for f in fields(cls)}
        unknown = set(kwargs) - allowed
        if unknown:
            raise TypeError(f"Unknown transition options: {sorted(unknown)}")
        return cls(**{name: bool(value) for name, value in kwargs.items()})

    def merged(self, **overrides: Any) -> TransitionOptions:
        """Return a copy with the given options replaced."""
        if not overrides:
            return self
        current = {f.name: getattr(self, f.name) for f in fields(self)}
        current.update(overrides)
        return TransitionOptions.from_kwargs(**current)
