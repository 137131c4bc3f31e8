"""Capability interfaces for the callables a step declaration carries.

Each provider is a plain callable closing over state that lives outside the
machine. The machine invokes them fresh on every query and never caches the
result.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from ...navigation.step_machine import StepMachine


@runtime_checkable
class DependencyProvider(Protocol):
    """Computes the names of the steps a step currently depends on."""

    def __call__(self) -> Sequence[str]: ...


@runtime_checkable
class CompletionProvider(Protocol):
    """Reports whether a step is currently completed."""

    def __call__(self) -> bool: ...


@runtime_checkable
class StepHook(Protocol):
    """Side effect run when a step is entered or left.

    Hooks receive the owning machine and may call ``machine.go_to`` reentrantly.
    """

    def __call__(self, machine: StepMachine) -> None: ...


Dependencies = Union[Sequence[str], DependencyProvider, None]


def always_completed() -> bool:
    """Completion provider for steps declared without a predicate."""
    return True


def no_op_hook(machine: StepMachine) -> None:
    """Hook used for steps declared without an enter or leave hook."""
    return None
