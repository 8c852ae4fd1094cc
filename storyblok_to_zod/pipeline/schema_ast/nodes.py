"""
AST node definitions for Storyblok component schemas.

Each field of a component is parsed into one FieldDescriptor variant,
selected by the field's "type" tag. The raw JSON value is kept for
diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class FieldDescriptor:
    """Base class for all field variants."""

    name: str = ""
    required: bool = False

    # Raw field definition as found in the component JSON
    raw: Any = None


@dataclass
class StringField(FieldDescriptor):
    """text, textarea and markdown fields."""

    pass


@dataclass
class NumberField(FieldDescriptor):
    pass


@dataclass
class BooleanField(FieldDescriptor):
    pass


@dataclass
class DatetimeField(FieldDescriptor):
    pass


@dataclass
class OptionField(FieldDescriptor):
    """Single choice from a datasource or inline options."""

    pass


@dataclass
class OptionsField(FieldDescriptor):
    """Multiple choice from a datasource or inline options."""

    pass


@dataclass
class AssetField(FieldDescriptor):
    pass


@dataclass
class MultilinkField(FieldDescriptor):
    pass


@dataclass
class RichtextField(FieldDescriptor):
    pass


@dataclass
class BloksField(FieldDescriptor):
    """Nested components, optionally restricted to a whitelist.

    A whitelist of None means the field accepts any component.
    """

    whitelist: list[Any] | None = None


@dataclass
class LayoutField(FieldDescriptor):
    """Editor-only grouping (tab, section); carries no data."""

    pass


@dataclass
class MissingTypeField(FieldDescriptor):
    """Field definition without a usable "type" tag."""

    pass


@dataclass
class UnknownField(FieldDescriptor):
    """Field with a type tag this generator does not know."""

    unknown_type: str = ""


@dataclass
class InvalidField(FieldDescriptor):
    """Field definition that is not a JSON object."""

    pass


@dataclass
class ComponentDescriptor:
    """A Storyblok component: a name and its fields in definition order."""

    name: str = ""
    fields: dict[str, FieldDescriptor] = field(default_factory=dict)

    @property
    def bloks_fields(self) -> list[BloksField]:
        return [f for f in self.fields.values() if isinstance(f, BloksField)]
