"""DependencyResolver - transitive dependency walk for a step.

The order of the resolved list decides which step a fallback lands on, so it
is fixed here: pre-order depth-first. Each direct dependency comes in its
declared position, immediately followed by its own transitive dependencies,
before the next direct dependency is visited.

    finished -> [date, time], date -> [tos], time -> [date]
    resolve(finished) == [date, tos, time]
"""

import logging
from collections.abc import Callable

from ..model.step import Step

logger = logging.getLogger(__name__)

StepLookup = Callable[..., Step]


class DependencyResolver:
    """Resolves and inspects the transitive dependency set of a step.

    A visited set keyed by step name keeps the walk finite on cyclic graphs.
    The set starts empty, so a cycle leading back to the step being resolved
    lists that step among its own dependencies.
    """

    def __init__(self, lookup: StepLookup):
        """Initialize the resolver.

        Args:
            lookup: Callable mapping a step name (and optional ``context``
                keyword) to a Step, raising StepNotFoundException for
                undeclared names
        """
        self._lookup = lookup

    def resolve(self, step: Step) -> list[Step]:
        """Get the distinct transitive dependencies of ``step`` in walk order.

        Dependency providers are invoked fresh during the walk.

        Raises:
            StepNotFoundException: If a reachable dependency is undeclared
        """
        return self._walk(step, set())

    def _walk(self, step: Step, seen: set[str]) -> list[Step]:
        resolved: list[Step] = []
        for name in step.dependencies:
            if name in seen:
                continue
            seen.add(name)

            dependency = self._lookup(name, context=f"dependency of step '{step.name}'")
            resolved.append(dependency)
            resolved.extend(self._walk(dependency, seen))
        return resolved

    def first_incomplete(self, step: Step) -> Step | None:
        """Get the first dependency in walk order whose predicate is false.

        The full dependency set is resolved before any predicate runs, and
        predicates are evaluated in order only until one returns false.

        Returns:
            The first incomplete dependency, or None when all are completed
        """
        dependencies = self.resolve(step)
        logger.debug(
            "Resolved dependencies of %s: %s", step.name, [d.name for d in dependencies]
        )
        for dependency in dependencies:
            if not dependency.is_completed():
                return dependency
        return None
