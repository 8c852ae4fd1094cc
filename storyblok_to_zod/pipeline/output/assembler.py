"""
Output assembly.

Builds the generated module from the registries: header comment, merged
imports, native schemas, then component schemas each followed by its story
variant.
"""

from __future__ import annotations

import logging

from ..ast_backends.templates import TemplateRenderer
from ..ast_backends.zod_nodes import Declaration, ImportStatement, RawDeclaration, ZodFile
from ..ast_backends.zod_serializer import ZodSerializer
from ..config import CodeGeneratorConfig
from ..registry import ConvertedSchemaRegistry, NativeSchema
from .imports import merge_imports

logger = logging.getLogger(__name__)


class OutputAssembler:
    """Assembles and renders the generated module."""

    def __init__(self, config: CodeGeneratorConfig, renderer: TemplateRenderer | None = None):
        self.config = config
        self.renderer = renderer or TemplateRenderer(config.validator_namespace)
        self.serializer = ZodSerializer(config.validator_namespace)

    def build(
        self,
        converted: ConvertedSchemaRegistry,
        natives: list[NativeSchema],
        generation_comment: str = "",
    ) -> ZodFile:
        """
        Build the module AST.

        Args:
            converted: Converted component schemas, in conversion order
            natives: Native schemas to emit, in emission order
            generation_comment: First line of the module, if any

        Returns:
            ZodFile with merged imports and declarations unique by name
        """
        declarations: list[Declaration | RawDeclaration] = []
        imports: list[ImportStatement] = []
        seen: set[str] = set()

        def add(declaration: Declaration | RawDeclaration | None, extra_imports: list[ImportStatement]) -> None:
            if declaration is None:
                return
            if declaration.name in seen:
                logger.warning("Skipping duplicate declaration '%s'", declaration.name)
                return
            seen.add(declaration.name)
            declarations.append(declaration)
            imports.extend(declaration.imports)
            imports.extend(extra_imports)

        for schema in natives:
            add(schema.declaration, schema.imports)
        for declaration in converted.declarations():
            add(declaration, [])

        if self.config.validator_namespace:
            imports.append(
                ImportStatement(module=self.config.validator_import_module, names=[self.config.validator_namespace])
            )

        return ZodFile(
            generation_comment=generation_comment,
            imports=merge_imports(imports),
            declarations=declarations,
        )

    def render(self, zod_file: ZodFile) -> str:
        """
        Render the module text.

        Returns:
            The module, ending with exactly one newline
        """
        prefix = self.renderer.render_prefix(
            generation_comment=zod_file.generation_comment,
            imports=[self.serializer.serialize_import(i) for i in zod_file.imports],
        ).strip()
        body = "\n\n".join(self.serializer.serialize_declaration(d) for d in zod_file.declarations)

        parts = [part for part in (prefix, body) if part]
        return "\n\n".join(parts) + "\n"

    def assemble(
        self,
        converted: ConvertedSchemaRegistry,
        natives: list[NativeSchema],
        generation_comment: str = "",
    ) -> str:
        zod_file = self.build(converted, natives, generation_comment)
        logger.info(
            "Assembled %d declarations (%d native) with %d imports",
            len(zod_file.declarations),
            len(natives),
            len(zod_file.imports),
        )
        return self.render(zod_file)
