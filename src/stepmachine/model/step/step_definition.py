"""StepDefinition - declaration of one named step."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .providers import CompletionProvider, Dependencies, StepHook

# Mapping keys accepted by from_dict, camelCase and snake_case alike
_KEY_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("name", "step"),
    "dependencies": ("dependencies",),
    "completed_if": ("completed_if", "completedIf"),
    "on_enter": ("on_enter", "onEnter"),
    "on_leave": ("on_leave", "onLeave"),
}


@dataclass(frozen=True)
class StepDefinition:
    """Declaration of a step as handed to a StepMachine.

    Only ``name`` is required. ``dependencies`` is either a fixed sequence of
    step names or a zero-argument callable returning one; the callable form is
    re-evaluated on every access so dependencies can follow external state.

    Attributes:
        name: Unique step name
        dependencies: Names of steps that must be completed before entering
        completed_if: Predicate reporting whether the step is completed
        on_enter: Hook invoked after the machine moves onto this step
        on_leave: Hook invoked before the machine moves off this step
    """

    name: str
    dependencies: Dependencies = None
    completed_if: CompletionProvider | None = None
    on_enter: StepHook | None = None
    on_leave: StepHook | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Step name must be a non-empty string, got {self.name!r}")
        if isinstance(self.dependencies, str):
            raise ValueError(
                f"Dependencies of step '{self.name}' must be a sequence of names, not a string"
            )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> StepDefinition:
        """Build a definition from a plain mapping.

        Accepts ``step`` or ``name`` for the step name and both camelCase
        (``completedIf``, ``onEnter``, ``onLeave``) and snake_case keys for the
        callables.

        Args:
            data: Mapping describing the step

        Returns:
            New StepDefinition

        Raises:
            ValueError: If the mapping has no name or carries unknown keys
        """
        known = {alias for aliases in _KEY_ALIASES.values() for alias in aliases}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown step definition keys: {sorted(unknown)}")

        kwargs: dict[str, Any] = {}
        for field_name, aliases in _KEY_ALIASES.items():
            for alias in aliases:
                if alias in data:
                    kwargs[field_name] = data[alias]
                    break

        if "name" not in kwargs:
            raise ValueError("Step definition requires a 'step' or 'name' key")
        return cls(**kwargs)

    @classmethod
    def coerce(cls, definition: StepDefinition | Mapping[str, Any]) -> StepDefinition:
        """Return ``definition`` as a StepDefinition, converting mappings."""
        if isinstance(definition, StepDefinition):
            return definition
        if isinstance(definition, Mapping):
            return cls.from_dict(definition)
        raise TypeError(
            f"Expected StepDefinition or mapping, got {type(definition).__name__}"
        )
