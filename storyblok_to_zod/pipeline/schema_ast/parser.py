"""
Storyblok component parser that builds descriptor ASTs.

Phase 1 of the pipeline: turn loosely-typed component JSON into
ComponentDescriptor objects without resolving anything.
"""

from __future__ import annotations

import logging
from typing import Any

from ..errors import ComponentValidationError
from .nodes import (
    AssetField,
    BloksField,
    BooleanField,
    ComponentDescriptor,
    DatetimeField,
    FieldDescriptor,
    InvalidField,
    LayoutField,
    MissingTypeField,
    MultilinkField,
    NumberField,
    OptionField,
    OptionsField,
    RichtextField,
    StringField,
    UnknownField,
)

logger = logging.getLogger(__name__)


class ComponentParser:
    """Parses Storyblok component documents into descriptors."""

    # Type tag -> descriptor variant
    FIELD_TYPES: dict[str, type[FieldDescriptor]] = {
        "text": StringField,
        "textarea": StringField,
        "markdown": StringField,
        "number": NumberField,
        "boolean": BooleanField,
        "datetime": DatetimeField,
        "option": OptionField,
        "options": OptionsField,
        "asset": AssetField,
        "multilink": MultilinkField,
        "richtext": RichtextField,
        "bloks": BloksField,
        "tab": LayoutField,
        "section": LayoutField,
    }

    def parse(self, name: str, document: Any) -> ComponentDescriptor:
        """
        Parse one component document.

        Args:
            name: Component name (the JSON file stem)
            document: Parsed JSON content of the component file

        Returns:
            ComponentDescriptor with one descriptor per field

        Raises:
            ComponentValidationError: If the document is not an object or has no schema object
        """
        if not isinstance(document, dict):
            raise ComponentValidationError(
                f"Invalid JSON data for component '{name}': expected object",
                {"component": name, "data_type": type(document).__name__},
            )

        schema = document.get("schema")
        if not isinstance(schema, dict):
            raise ComponentValidationError(
                f"Missing or invalid schema in component '{name}'",
                {"component": name, "has_schema": "schema" in document},
            )

        descriptor = ComponentDescriptor(name=name)
        for field_name, raw_field in schema.items():
            descriptor.fields[field_name] = self.parse_field(field_name, raw_field)
        return descriptor

    def parse_field(self, name: str, raw: Any) -> FieldDescriptor:
        """Parse one field definition into its descriptor variant."""
        if not isinstance(raw, dict):
            return InvalidField(name=name, raw=raw)

        required = raw.get("required") is True
        type_name = raw.get("type")

        if not isinstance(type_name, str) or not type_name:
            return MissingTypeField(name=name, required=required, raw=raw)

        field_class = self.FIELD_TYPES.get(type_name)
        if field_class is None:
            return UnknownField(name=name, required=required, raw=raw, unknown_type=type_name)

        if field_class is BloksField:
            whitelist = raw.get("component_whitelist")
            if whitelist is not None and not isinstance(whitelist, list):
                logger.warning("Bloks field '%s' has an invalid component_whitelist %r; accepting any component", name, whitelist)
                whitelist = None
            return BloksField(name=name, required=required, raw=raw, whitelist=whitelist)

        return field_class(name=name, required=required, raw=raw)
