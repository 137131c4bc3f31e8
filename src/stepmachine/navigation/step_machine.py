"""StepMachine - navigation over a fixed set of named steps.

A transition request is resolved against the dependency graph and the
completion state at the moment of the request:

1. Requesting the current step does nothing
2. The transitive dependencies of the target are resolved
   (see DependencyResolver for the order)
3. If one of them is incomplete, the request either falls back to that
   dependency or is dropped, depending on the options
4. Otherwise the current step's leave hook runs, the machine moves, and the
   target's enter hook runs

Hooks receive the machine and may call ``go_to`` themselves. A step whose
enter hook finds it already completed can move straight on this way.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ..config import StepMachineSettings, get_settings
from ..exceptions import StepNotFoundException
from ..logging import TransitionLogger, get_transition_logger
from ..model.step import Step, StepDefinition
from ..model.transition import TransitionOptions
from .dependency_resolver import DependencyResolver
from .validation import validate_steps

logger = logging.getLogger(__name__)

StepDeclaration = StepDefinition | Mapping[str, Any]


class StepMachine:
    """Tracks the position in a flow of named steps.

    Example:
        machine = StepMachine([
            StepDefinition("terms", completed_if=lambda: state.accepted),
            StepDefinition("date", dependencies=["terms"]),
        ])
        machine.go_to("date")  # lands on "terms" until it is accepted

    Attributes:
        previous_step: Name of the step left by the last transition
        current_step: Name of the step the machine is on
        next_step: Target name, set only while a leave hook runs
        completed: Whether the current step's predicate holds (True with no step)
    """

    def __init__(
        self,
        definitions: Iterable[StepDeclaration],
        settings: StepMachineSettings | None = None,
    ):
        """Initialize the machine.

        Args:
            definitions: Step declarations in order, as StepDefinition
                instances or mappings accepted by StepDefinition.from_dict
            settings: Settings to use instead of the global ones

        Raises:
            DuplicateStepException: If names repeat and duplicates are rejected
            DependencyCycleException: If cycle detection is on and finds one
            StepNotFoundException: If reference validation is on and a static
                dependency is undeclared
        """
        self._settings = settings or get_settings()
        self._steps: tuple[Step, ...] = tuple(
            Step(StepDefinition.coerce(definition)) for definition in definitions
        )

        validate_steps(
            self._steps,
            reject_duplicates=self._settings.reject_duplicate_steps,
            detect_cycles=self._settings.detect_cycles,
            validate_references=self._settings.validate_references,
        )

        # First declaration wins when duplicates are tolerated
        self._index: dict[str, Step] = {}
        for step in self._steps:
            self._index.setdefault(step.name, step)

        self._resolver = DependencyResolver(self._step_for)
        self._transition_logger: TransitionLogger | None = (
            get_transition_logger() if self._settings.log_transitions else None
        )

        self._previous: Step | None = None
        self._current: Step | None = None
        self._next: Step | None = None
        self._entered_with_options = TransitionOptions()

        logger.debug("StepMachine created with steps: %s", self.step_names)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._steps

    @property
    def step_names(self) -> list[str]:
        return [step.name for step in self._steps]

    @property
    def previous_step(self) -> str | None:
        return self._previous.name if self._previous else None

    @property
    def current_step(self) -> str | None:
        return self._current.name if self._current else None

    @property
    def next_step(self) -> str | None:
        return self._next.name if self._next else None

    @property
    def completed(self) -> bool:
        """Whether the current step is completed, evaluated now."""
        if self._current is None:
            return True
        return self._current.is_completed()

    @property
    def entered_with_options(self) -> TransitionOptions:
        """Options of the transition that entered the current step."""
        return self._entered_with_options

    # ------------------------------------------------------------------
    # Lookup and queries
    # ------------------------------------------------------------------

    def has_step(self, step_name: str) -> bool:
        return step_name in self._index

    def get_step(self, step_name: str) -> Step:
        """Get a declared step by name.

        Raises:
            StepNotFoundException: If no step has that name
        """
        return self._step_for(step_name)

    def _step_for(self, step_name: str, context: str | None = None) -> Step:
        step = self._index.get(step_name)
        if step is None:
            raise StepNotFoundException(step_name, context=context)
        return step

    def dependency_steps_for(self, step_name: str) -> list[str]:
        """Names of the transitive dependencies of a step, in fallback order."""
        return [step.name for step in self._resolver.resolve(self._step_for(step_name))]

    def incomplete_dependency_for(self, step_name: str) -> str | None:
        """Name of the dependency a request for ``step_name`` would fall back to.

        Returns:
            The first incomplete dependency, or None if all are completed
        """
        incomplete = self._resolver.first_incomplete(self._step_for(step_name))
        return incomplete.name if incomplete else None

    def can_go_to(self, step_name: str) -> bool:
        """Whether every dependency of ``step_name`` is currently completed."""
        return self.incomplete_dependency_for(step_name) is None

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def go_to(
        self,
        step_name: str,
        options: TransitionOptions | Mapping[str, Any] | None = None,
        **option_kwargs: Any,
    ) -> str | None:
        """Request a transition to ``step_name``.

        Options may be passed as a TransitionOptions, a mapping, keyword
        arguments, or a combination where keywords override.

        Args:
            step_name: Name of the target step
            options: Transition options
            **option_kwargs: Individual TransitionOptions fields

        Returns:
            The current step once the request, including any fallback or
            reentrant hops made by hooks, has finished

        Raises:
            StepNotFoundException: If the target or a reachable dependency
                is undeclared
            TypeError: If an unknown option is given
        """
        resolved_options = self._resolve_options(options, option_kwargs)
        self._request(step_name, resolved_options, ())
        return self.current_step

    request_transition = go_to

    def _resolve_options(
        self,
        options: TransitionOptions | Mapping[str, Any] | None,
        overrides: dict[str, Any],
    ) -> TransitionOptions:
        if options is None:
            return TransitionOptions.from_kwargs(**overrides)
        if isinstance(options, Mapping):
            return TransitionOptions.from_kwargs(**{**options, **overrides})
        return options.merged(**overrides)

    def _request(
        self, step_name: str, options: TransitionOptions, fallback_chain: tuple[str, ...]
    ) -> None:
        if self._current is not None and self._current.name == step_name:
            if self._transition_logger:
                self._transition_logger.log_noop(step_name)
            return

        target = self._step_for(step_name)
        incomplete = self._resolver.first_incomplete(target)

        if incomplete is None:
            requested = fallback_chain[0] if fallback_chain else step_name
            self._transition(target, options, requested)
            return

        if not options.fallback_to_incomplete_dependency:
            if self._transition_logger:
                self._transition_logger.log_blocked(step_name, incomplete.name, self.current_step)
            return

        chain = fallback_chain + (step_name,)
        if incomplete.name in chain:
            # Incomplete steps that depend on each other; falling back cannot settle
            logger.warning(
                "Fallback from %s loops back to %s, staying on %s",
                step_name,
                incomplete.name,
                self.current_step,
            )
            if self._transition_logger:
                self._transition_logger.log_blocked(
                    step_name, incomplete.name, self.current_step, reason="fallback_cycle"
                )
            return

        if self._transition_logger:
            self._transition_logger.log_fallback(step_name, incomplete.name)
        self._request(incomplete.name, options, chain)

    def _transition(self, target: Step, options: TransitionOptions, requested: str) -> None:
        self._next = target
        if self._current is not None and not options.skip_leave_current:
            try:
                self._current.on_leave(self)
            except Exception:
                self._next = None
                raise

        self._previous = self._current
        self._current = target
        self._next = None
        self._entered_with_options = options

        if self._transition_logger:
            self._transition_logger.log_transition(
                self.previous_step,
                target.name,
                requested,
                skip_leave_current=options.skip_leave_current,
                skip_enter_next=options.skip_enter_next,
            )

        if not options.skip_enter_next:
            target.on_enter(self)

    def __repr__(self) -> str:
        return (
            f"StepMachine(current_step={self.current_step!r}, "
            f"previous_step={self.previous_step!r}, steps={self.step_names!r})"
        )
