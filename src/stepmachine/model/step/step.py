"""Step - uniform read access to a step declaration."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from .providers import always_completed, no_op_hook
from .step_definition import StepDefinition

if TYPE_CHECKING:
    from ...navigation.step_machine import StepMachine


class Step:
    """A declared step, owned by the machine constructed with it.

    Absent optional fields degrade to permissive defaults: no dependencies,
    always completed, and no-op hooks. The callable forms of ``dependencies``
    and ``completed_if`` are evaluated on each access, never cached.
    """

    __slots__ = ("_definition",)

    def __init__(self, definition: StepDefinition):
        self._definition = definition

    @property
    def definition(self) -> StepDefinition:
        return self._definition

    @property
    def name(self) -> str:
        return self._definition.name

    @property
    def dependencies(self) -> list[str]:
        """Names of the direct dependencies, freshly resolved."""
        dependencies = self._definition.dependencies
        if callable(dependencies):
            dependencies = dependencies()
        return list(dependencies or [])

    @property
    def has_dynamic_dependencies(self) -> bool:
        return callable(self._definition.dependencies)

    @property
    def completed_if(self) -> Callable[[], bool]:
        return self._definition.completed_if or always_completed

    @property
    def on_enter(self) -> Callable[[StepMachine], None]:
        return self._definition.on_enter or no_op_hook

    @property
    def on_leave(self) -> Callable[[StepMachine], None]:
        return self._definition.on_leave or no_op_hook

    def is_completed(self) -> bool:
        """Evaluate the completion predicate now."""
        return bool(self.completed_if())

    def __repr__(self) -> str:
        return f"Step(name={self.name!r})"
