"""
Per-run registries of generated schemas.

Both registries are created once per generation run and handed to the
stages that need them. Entries keep insertion order, which is the order
they are emitted in.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from .ast_backends.zod_nodes import Declaration, ImportStatement, RawDeclaration

logger = logging.getLogger(__name__)


@dataclass
class ConvertedComponent:
    """Schema declarations generated for one component."""

    name: str = ""
    declaration: Declaration | None = None

    # Story wrapper variant, present when the story data schema is available
    story_declaration: Declaration | None = None

    @property
    def declarations(self) -> list[Declaration]:
        return [d for d in (self.declaration, self.story_declaration) if d is not None]


class ConvertedSchemaRegistry:
    """Component name -> generated schema, in conversion order."""

    def __init__(self):
        self._components: dict[str, ConvertedComponent] = {}

    def add(self, component: ConvertedComponent) -> None:
        if component.name in self._components:
            raise ValueError(f"Component '{component.name}' has already been converted")
        self._components[component.name] = component

    def has(self, name: str) -> bool:
        return name in self._components

    def get(self, name: str) -> ConvertedComponent | None:
        return self._components.get(name)

    def names(self) -> list[str]:
        return list(self._components)

    def declarations(self) -> list[Declaration]:
        """All declarations, each component followed by its story variant."""
        return [d for component in self._components.values() for d in component.declarations]

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __iter__(self) -> Iterator[ConvertedComponent]:
        return iter(self._components.values())

    def __len__(self) -> int:
        return len(self._components)


@dataclass
class NativeSchema:
    """A schema generated from an interface definition rather than a component."""

    interface_name: str = ""
    schema_name: str = ""
    declaration: Declaration | RawDeclaration | None = None
    imports: list[ImportStatement] = field(default_factory=list)


class NativeSchemaRegistry:
    """Interface name -> native schema, plus the subset marked as used."""

    def __init__(self):
        self._schemas: dict[str, NativeSchema] = {}
        self._used: set[str] = set()

    def set(self, schema: NativeSchema) -> None:
        if schema.interface_name in self._schemas:
            logger.debug("Replacing native schema '%s'", schema.interface_name)
        self._schemas[schema.interface_name] = schema

    def has(self, interface_name: str) -> bool:
        return interface_name in self._schemas

    def get(self, interface_name: str) -> NativeSchema | None:
        return self._schemas.get(interface_name)

    def get_by_schema_name(self, schema_name: str) -> NativeSchema | None:
        for schema in self._schemas.values():
            if schema.schema_name == schema_name:
                return schema
        return None

    def all(self) -> list[NativeSchema]:
        return list(self._schemas.values())

    def mark_as_used(self, interface_name: str) -> None:
        if interface_name in self._schemas:
            self._used.add(interface_name)

    def is_used(self, interface_name: str) -> bool:
        return interface_name in self._used

    def used(self) -> list[NativeSchema]:
        """Used schemas in registration order."""
        return [s for name, s in self._schemas.items() if name in self._used]

    def usage_stats(self) -> tuple[int, int, int]:
        """Return (total, used, unused) counts."""
        total = len(self._schemas)
        used = len(self._used)
        return total, used, total - used

    def __contains__(self, interface_name: str) -> bool:
        return self.has(interface_name)

    def __len__(self) -> int:
        return len(self._schemas)
