"""
Dependency graph between components.

A component depends on every component named in the whitelist of one of
its bloks fields. The graph decides the conversion order: dependencies
are converted first so they can be referenced by name.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from ..errors import ComponentValidationError, CyclicDependencyError
from ..schema_ast.nodes import ComponentDescriptor
from ..schema_ast.parser import ComponentParser

logger = logging.getLogger(__name__)

# Traversal states
_UNVISITED = 0
_IN_PROGRESS = 1
_DONE = 2


@dataclass
class DependencyGraph:
    """Result of dependency analysis."""

    # Component name -> referenced component names (whitelist order, may repeat)
    dependencies: dict[str, list[str]] = field(default_factory=dict)

    # Parsed components, for the names present in dependencies
    components: dict[str, ComponentDescriptor] = field(default_factory=dict)

    # Components whose documents could not be parsed
    skipped: list[str] = field(default_factory=list)

    def unresolved(self) -> dict[str, list[str]]:
        """Dependencies naming components that are not in the graph."""
        missing = {}
        for name, deps in self.dependencies.items():
            unknown = [d for d in deps if d not in self.dependencies]
            if unknown:
                missing[name] = unknown
        return missing


class DependencyGraphBuilder:
    """Builds the dependency graph from component documents."""

    def __init__(self, parser: ComponentParser | None = None):
        self.parser = parser or ComponentParser()

    def build(self, documents: Mapping[str, Any]) -> DependencyGraph:
        """
        Parse the documents and collect their bloks references.

        Documents that cannot be parsed are logged and left out of the graph.

        Args:
            documents: Component name -> parsed JSON document

        Returns:
            DependencyGraph with dependencies in document order
        """
        graph = DependencyGraph()

        for name, document in documents.items():
            try:
                component = self.parser.parse(name, document)
            except ComponentValidationError as e:
                logger.warning("%s. Skipping.", e)
                graph.skipped.append(name)
                continue

            dependencies: list[str] = []
            for bloks in component.bloks_fields:
                dependencies.extend(d for d in bloks.whitelist or [] if isinstance(d, str))

            graph.dependencies[name] = dependencies
            graph.components[name] = component
            logger.debug("Component '%s' has dependencies: [%s]", name, ", ".join(dependencies))

        return graph


def topological_sort(dependencies: Mapping[str, Sequence[str]]) -> list[str]:
    """
    Order components so that every dependency precedes its dependents.

    Depth-first traversal in input order. Dependencies that are not keys
    of the mapping are ignored.

    Args:
        dependencies: Component name -> names it depends on

    Returns:
        All keys of the mapping, dependencies first

    Raises:
        CyclicDependencyError: If the graph contains a cycle
    """
    state: dict[str, int] = {}
    order: list[str] = []

    for root in dependencies:
        if state.get(root, _UNVISITED) != _UNVISITED:
            continue

        state[root] = _IN_PROGRESS
        stack = [(root, iter(dependencies[root]))]
        while stack:
            node, pending = stack[-1]
            for dep in pending:
                if dep not in dependencies:
                    continue
                dep_state = state.get(dep, _UNVISITED)
                if dep_state == _IN_PROGRESS:
                    raise CyclicDependencyError(dep, [n for n, _ in stack])
                if dep_state == _UNVISITED:
                    state[dep] = _IN_PROGRESS
                    stack.append((dep, iter(dependencies[dep])))
                    break
            else:
                stack.pop()
                state[node] = _DONE
                order.append(node)

    return order
