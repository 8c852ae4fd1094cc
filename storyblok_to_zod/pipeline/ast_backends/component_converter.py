"""
Component converter.

Turns component descriptors into schema declarations, in dependency order,
and records them in the converted-schema registry so later components can
refer to them.
"""

from __future__ import annotations

import logging

from ...utils import component_schema_name, component_story_schema_name, is_kebab_case
from ..config import CodeGeneratorConfig
from ..constants import STORY_DATA_INTERFACE
from ..errors import ComponentValidationError
from ..registry import ConvertedComponent, ConvertedSchemaRegistry, NativeSchemaRegistry
from ..schema_ast.nodes import ComponentDescriptor, InvalidField
from .field_mapper import FieldTypeMapper
from .templates import TemplateRenderer
from .zod_nodes import Declaration, ImportStatement, ObjectLiteral, ObjectMember, RawExpression

logger = logging.getLogger(__name__)


class ComponentConverter:
    """Converts components to Zod schema declarations."""

    def __init__(
        self,
        config: CodeGeneratorConfig,
        converted: ConvertedSchemaRegistry,
        natives: NativeSchemaRegistry,
        renderer: TemplateRenderer | None = None,
    ):
        self.config = config
        self.converted = converted
        self.natives = natives
        self.renderer = renderer or TemplateRenderer(config.validator_namespace)
        self.mapper = FieldTypeMapper(converted)

    def convert_all(self, order: list[str], components: dict[str, ComponentDescriptor]) -> list[str]:
        """
        Convert components in the given order.

        A component that fails is logged and skipped; the others still convert.

        Args:
            order: Component names, dependencies first
            components: Parsed descriptors by name

        Returns:
            Names of the components that were skipped
        """
        skipped = []
        for name in order:
            component = components.get(name)
            if component is None:
                logger.warning("No definition for component '%s'. Skipping.", name)
                skipped.append(name)
                continue
            try:
                self.convert(component)
                logger.info("Converted component: %s", name)
            except ComponentValidationError as e:
                logger.error("Failed to convert component '%s': %s", name, e)
                skipped.append(name)

        logger.info("Successfully converted %d components", len(self.converted))
        return skipped

    def convert(self, component: ComponentDescriptor) -> ConvertedComponent:
        """
        Convert one component and register the result.

        Raises:
            ComponentValidationError: If the component name is not valid kebab-case
                or its schema names are already declared
        """
        if not is_kebab_case(component.name):
            raise ComponentValidationError(
                f"Component name '{component.name}' is not in valid kebab-case format",
                {"component": component.name},
            )

        schema_name = component_schema_name(component.name)
        story_name = component_story_schema_name(component.name) if self.natives.has(STORY_DATA_INTERFACE) else None
        self.check_name_collisions(component.name, [n for n in (schema_name, story_name) if n])

        declaration = Declaration(name=schema_name, value=self.build_object(component))

        story_declaration = None
        if story_name:
            story_declaration = self.build_story_declaration(component.name, schema_name)

        converted = ConvertedComponent(name=component.name, declaration=declaration, story_declaration=story_declaration)
        self.converted.add(converted)
        logger.debug(
            "Successfully converted component '%s'%s",
            component.name,
            " with story variant" if story_declaration else "",
        )
        return converted

    def check_name_collisions(self, component_name: str, names: list[str]) -> None:
        """
        Reject a component whose schema names are already declared.

        Raises:
            ComponentValidationError: If a name belongs to a native schema or
                to a previously converted component
        """
        taken = {schema.schema_name: f"native schema '{schema.interface_name}'" for schema in self.natives.all()}
        for converted in self.converted:
            for existing in converted.declarations:
                taken[existing.name] = f"component '{converted.name}'"

        for name in names:
            if name in taken:
                raise ComponentValidationError(
                    f"Schema name '{name}' is already declared by {taken[name]}",
                    {"component": component_name, "schema": name},
                )

    def build_object(self, component: ComponentDescriptor) -> ObjectLiteral:
        """Map every field of a component into an object literal."""
        if not component.fields:
            logger.warning("Component '%s' has an empty schema", component.name)

        members = []
        for field in component.fields.values():
            value = self.mapper.map(field, component.name)
            if value is None:
                continue
            # Invalid definitions carry no "required" flag to go by
            optional = not field.required and not isinstance(field, InvalidField)
            members.append(ObjectMember(name=field.name, value=value, optional=optional))
        return ObjectLiteral(members=members)

    def build_story_declaration(self, component_name: str, schema_name: str) -> Declaration:
        """Wrap a component schema in the story envelope."""
        z = self.renderer.z
        story_type = f"{STORY_DATA_INTERFACE} & {{ content: {z}infer<typeof {schema_name}> }}"
        story_import = ImportStatement(
            module=self.config.import_path_for_type(STORY_DATA_INTERFACE),
            names=[f"type {STORY_DATA_INTERFACE}"],
        )
        return Declaration(
            name=component_story_schema_name(component_name),
            value=RawExpression(text=self.renderer.render_story_wrapper(schema_name)),
            type_annotation=f"{z}ZodSchema<{story_type}>",
            imports=[story_import],
        )

