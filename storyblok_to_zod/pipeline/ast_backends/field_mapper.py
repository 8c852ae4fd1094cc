"""
Field type mapping.

Maps one Storyblok field descriptor to the Zod expression validating its
value. Mapping never fails: anything the mapper cannot express becomes
``any()``.
"""

from __future__ import annotations

import logging

from ...utils import component_schema_name
from ..constants import ASSET_SCHEMA, MULTILINK_SCHEMA, RICHTEXT_SCHEMA
from ..registry import ConvertedSchemaRegistry
from ..schema_ast.nodes import (
    AssetField,
    BloksField,
    BooleanField,
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
from .zod_nodes import Commented, MethodCall, Reference, ZodNode, any_, array, union, zod_call

logger = logging.getLogger(__name__)


class FieldTypeMapper:
    """Maps field descriptors to Zod expressions."""

    def __init__(self, converted: ConvertedSchemaRegistry):
        """
        Args:
            converted: Components converted so far, used to resolve bloks whitelists
        """
        self.converted = converted

    def map(self, field: FieldDescriptor, component_name: str) -> ZodNode | None:
        """
        Map a field to its validator expression.

        Args:
            field: The field descriptor
            component_name: Enclosing component, for diagnostics

        Returns:
            The expression, or None for fields that are left out of the object (tab, section)
        """
        logger.debug("Mapping field '%s' of '%s' (%s)", field.name, component_name, type(field).__name__)

        if isinstance(field, LayoutField):
            return None
        if isinstance(field, StringField):
            return zod_call("string")
        if isinstance(field, NumberField):
            return zod_call("number")
        if isinstance(field, BooleanField):
            return zod_call("boolean")
        if isinstance(field, DatetimeField):
            return MethodCall(target=zod_call("string"), method="datetime")
        if isinstance(field, OptionField):
            return union(zod_call("number"), zod_call("string"))
        if isinstance(field, OptionsField):
            return array(union(zod_call("number"), zod_call("string")))
        if isinstance(field, AssetField):
            return Reference(symbol=ASSET_SCHEMA)
        if isinstance(field, MultilinkField):
            return Reference(symbol=MULTILINK_SCHEMA)
        if isinstance(field, RichtextField):
            return Reference(symbol=RICHTEXT_SCHEMA)
        if isinstance(field, BloksField):
            return self.map_bloks(field, component_name)
        if isinstance(field, MissingTypeField):
            logger.warning(
                "Field '%s' in component '%s' is missing a 'type' property. Defaulting to 'any()'. Full field definition: %r",
                field.name,
                component_name,
                field.raw,
            )
            return any_()
        if isinstance(field, InvalidField):
            logger.warning("Field '%s' in component '%s' has invalid structure. Defaulting to 'any()'.", field.name, component_name)
            return any_()
        if isinstance(field, UnknownField):
            logger.warning("Unknown Storyblok field type '%s' in component '%s'. Using fallback.", field.unknown_type, component_name)
            return Commented(expression=any_(), comment=f"Unknown type: {field.unknown_type}")

        logger.warning("Unhandled field descriptor %s in component '%s'", type(field).__name__, component_name)
        return any_()

    def map_bloks(self, field: BloksField, component_name: str) -> ZodNode:
        """
        Resolve a bloks field against the components converted so far.

        A single whitelisted component that has not been converted turns the
        whole field into ``any()``.
        """
        if not field.whitelist:
            return any_()

        resolved: list[str] = []
        for name in field.whitelist:
            if not isinstance(name, str) or not name:
                logger.warning("Invalid component name in whitelist for '%s': %r", component_name, name)
                continue
            if not self.converted.has(name):
                logger.warning("Nested component '%s' used in '%s' has not been converted yet.", name, component_name)
                return any_()
            resolved.append(name)

        if not resolved:
            return any_()
        if len(resolved) == 1:
            return Reference(symbol=component_schema_name(resolved[0]))
        return union(*(Reference(symbol=component_schema_name(name)) for name in resolved))
