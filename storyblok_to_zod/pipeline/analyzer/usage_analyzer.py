"""
Native schema usage analysis.

Finds the native schemas the generated components actually need: those a
component declaration refers to, and everything those refer to in turn.
"""

from __future__ import annotations

import logging

from ..ast_backends.zod_nodes import collect_references
from ..errors import CyclicDependencyError
from ..registry import ConvertedSchemaRegistry, NativeSchema, NativeSchemaRegistry
from .dependency_graph import topological_sort

logger = logging.getLogger(__name__)


class UsageAnalyzer:
    """Marks the native schemas reachable from component schemas as used."""

    def __init__(self, natives: NativeSchemaRegistry):
        self.natives = natives

    def references_of(self, schema: NativeSchema) -> list[str]:
        """Interface names of the other native schemas a native schema refers to."""
        found = []
        for symbol in sorted(collect_references(schema.declaration)):
            target = self.natives.get_by_schema_name(symbol)
            if target is not None and target.interface_name != schema.interface_name:
                found.append(target.interface_name)
        return found

    def analyze(self, converted: ConvertedSchemaRegistry) -> list[NativeSchema]:
        """
        Mark every native schema reachable from the converted components.

        Args:
            converted: The converted component schemas

        Returns:
            The used native schemas, ordered so referenced schemas come first
        """
        pending = []
        for declaration in converted.declarations():
            for symbol in sorted(collect_references(declaration)):
                target = self.natives.get_by_schema_name(symbol)
                if target is not None:
                    pending.append(target.interface_name)

        while pending:
            name = pending.pop()
            if self.natives.is_used(name):
                continue
            self.natives.mark_as_used(name)
            logger.debug("Native schema '%s' is used", name)
            pending.extend(self.references_of(self.natives.get(name)))

        total, used, unused = self.natives.usage_stats()
        logger.info(
            "Dependency analysis complete: %d/%d native schemas are used (%d unused schemas excluded)",
            used,
            total,
            unused,
        )
        return self.order(self.natives.used())

    def order(self, schemas: list[NativeSchema]) -> list[NativeSchema]:
        """Order native schemas so each follows the schemas it refers to."""
        by_name = {s.interface_name: s for s in schemas}
        dependencies = {s.interface_name: self.references_of(s) for s in schemas}
        try:
            return [by_name[name] for name in topological_sort(dependencies)]
        except CyclicDependencyError as e:
            # Mutually recursive schemas are only valid behind lazy(); keep registry order
            logger.warning("Native schemas reference each other (%s); keeping definition order", e)
            return schemas
