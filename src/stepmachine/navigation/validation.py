"""Construction-time checks for step declarations.

Only static dependency lists are inspected. Dependency providers may depend
on external state that is not ready yet, so they are never called here.
"""

import logging
from collections.abc import Sequence

from ..exceptions import (
    DependencyCycleException,
    DuplicateStepException,
    StepNotFoundException,
)
from ..model.step import Step

logger = logging.getLogger(__name__)


def find_duplicate_names(steps: Sequence[Step]) -> list[str]:
    """Names declared more than once, in first-repeat order."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for step in steps:
        if step.name in seen and step.name not in duplicates:
            duplicates.append(step.name)
        seen.add(step.name)
    return duplicates


def static_dependency_graph(steps: Sequence[Step]) -> dict[str, list[str]]:
    """Map each step name to its static dependencies; first declaration wins."""
    graph: dict[str, list[str]] = {}
    for step in steps:
        if step.name in graph:
            continue
        graph[step.name] = [] if step.has_dynamic_dependencies else step.dependencies
    return graph


def find_cycle(graph: dict[str, list[str]]) -> list[str] | None:
    """Find one cycle in a dependency graph.

    Returns:
        The step names along the cycle with the first name repeated at the
        end, or None if the graph is acyclic
    """
    visiting: list[str] = []
    done: set[str] = set()

    def visit(name: str) -> list[str] | None:
        if name in visiting:
            return visiting[visiting.index(name):] + [name]
        if name in done or name not in graph:
            return None

        visiting.append(name)
        for dependency in graph[name]:
            cycle = visit(dependency)
            if cycle:
                return cycle
        visiting.pop()
        done.add(name)
        return None

    for name in graph:
        cycle = visit(name)
        if cycle:
            return cycle
    return None


def validate_steps(
    steps: Sequence[Step],
    reject_duplicates: bool = True,
    detect_cycles: bool = False,
    validate_references: bool = False,
) -> None:
    """Validate declarations according to the enabled checks.

    Args:
        steps: Wrapped declarations in declaration order
        reject_duplicates: Raise on repeated step names
        detect_cycles: Raise when static dependencies form a cycle
        validate_references: Raise when a static dependency is undeclared

    Raises:
        DuplicateStepException: On a repeated name
        DependencyCycleException: On a cycle
        StepNotFoundException: On a dangling static reference
    """
    duplicates = find_duplicate_names(steps)
    if duplicates:
        if reject_duplicates:
            raise DuplicateStepException(duplicates[0])
        logger.warning("Duplicate step names %s, first declaration wins", duplicates)

    graph = static_dependency_graph(steps)

    if validate_references:
        for name, dependencies in graph.items():
            for dependency in dependencies:
                if dependency not in graph:
                    raise StepNotFoundException(dependency, context=f"dependency of step '{name}'")

    if detect_cycles:
        cycle = find_cycle(graph)
        if cycle:
            raise DependencyCycleException(cycle)
