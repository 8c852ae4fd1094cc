"""
Standard schemas.

Hand-written schemas for the Storyblok field values and story envelope,
rendered from templates/zod/standard. They are registered only for the
interfaces the types file did not provide.
"""

from __future__ import annotations

import logging

from ...utils import interface_schema_name
from ..ast_backends.templates import TemplateRenderer
from ..ast_backends.zod_nodes import Declaration, ImportStatement, RawExpression
from ..config import CodeGeneratorConfig
from ..constants import STORY_DATA_INTERFACE
from ..registry import NativeSchema, NativeSchemaRegistry

logger = logging.getLogger(__name__)

# Interface name -> (template name, annotate with the interface type)
FIELD_VALUE_SCHEMAS = {
    "StoryblokAsset": ("storyblokAsset", False),
    "StoryblokMultilink": ("storyblokMultilink", False),
    "StoryblokRichtext": ("storyblokRichtext", True),
}

# Schemas the story envelope refers to
STORY_DATA_SCHEMAS = {
    "ISbAlternateObject": ("iSbAlternateObject", False),
    "ISbLinkURLObject": ("iSbLinkURLObject", False),
    "LocalizedPath": ("localizedPath", False),
    "PreviewToken": ("previewToken", False),
    "ISbMultipleStoriesData": ("iSbMultipleStoriesData", False),
}


def register_standard_schemas(
    natives: NativeSchemaRegistry, config: CodeGeneratorConfig, renderer: TemplateRenderer
) -> list[str]:
    """
    Add the standard schemas missing from the registry.

    Returns:
        Interface names that were added
    """
    added = []
    if config.include_standard_schemas:
        for interface_name, (template_name, annotated) in FIELD_VALUE_SCHEMAS.items():
            if not natives.has(interface_name):
                natives.set(standard_schema(interface_name, template_name, annotated, config, renderer))
                added.append(interface_name)

    if config.include_story_data and not natives.has(STORY_DATA_INTERFACE):
        natives.set(story_data_schema(config, renderer))
        added.append(STORY_DATA_INTERFACE)

    # Story wrappers refer to these whichever way ISbStoryData was provided
    if natives.has(STORY_DATA_INTERFACE):
        for interface_name, (template_name, annotated) in STORY_DATA_SCHEMAS.items():
            if not natives.has(interface_name):
                natives.set(standard_schema(interface_name, template_name, annotated, config, renderer))
                added.append(interface_name)

    if added:
        logger.info("Added standard schemas: %s", ", ".join(added))
    return added


def standard_schema(
    interface_name: str,
    template_name: str,
    annotated: bool,
    config: CodeGeneratorConfig,
    renderer: TemplateRenderer,
) -> NativeSchema:
    """Render one standard schema declaration."""
    schema_name = interface_schema_name(interface_name)
    declaration = Declaration(name=schema_name, value=RawExpression(text=renderer.render_standard_schema(template_name)))
    if annotated:
        # Recursive schemas need an explicit type
        declaration.type_annotation = f"{renderer.z}ZodSchema<{interface_name}>"
        declaration.imports = [
            ImportStatement(module=config.import_path_for_type(interface_name), names=[f"type {interface_name}"])
        ]
    return NativeSchema(
        interface_name=interface_name,
        schema_name=schema_name,
        declaration=declaration,
        imports=list(declaration.imports),
    )


def story_data_schema(config: CodeGeneratorConfig, renderer: TemplateRenderer) -> NativeSchema:
    """The story envelope with unconstrained content."""
    schema_name = interface_schema_name(STORY_DATA_INTERFACE)
    imports = [
        ImportStatement(
            module=config.import_path_for_type(STORY_DATA_INTERFACE),
            names=[f"type {STORY_DATA_INTERFACE}"],
        )
    ]
    declaration = Declaration(
        name=schema_name,
        value=RawExpression(text=renderer.render_story_wrapper(f"{renderer.z}any()")),
        type_annotation=f"{renderer.z}ZodSchema<{STORY_DATA_INTERFACE}>",
        imports=imports,
    )
    return NativeSchema(
        interface_name=STORY_DATA_INTERFACE,
        schema_name=schema_name,
        declaration=declaration,
        imports=list(imports),
    )
