"""
Interface processing.

Turns the interfaces of the types file into native schemas:

1. Interfaces that only extend an array type become ``array(<item>Schema)``
2. Every other interface goes through the external converter
3. Standard schemas are added for names the file did not provide
"""

from __future__ import annotations

import logging
import re

from ...utils import interface_schema_name, is_identifier
from ..ast_backends.templates import TemplateRenderer
from ..ast_backends.zod_nodes import Declaration, ImportStatement, RawDeclaration, Reference, ZodNode, array, zod_call
from ..config import CodeGeneratorConfig
from ..errors import InterfaceConversionError
from ..output.imports import parse_import
from ..registry import NativeSchema, NativeSchemaRegistry
from .converter import InterfaceConverter, TsToZodConverter
from .extractor import InterfaceDefinition, InterfaceExtractor
from .standard_schemas import register_standard_schemas

logger = logging.getLogger(__name__)

# TypeScript primitives usable as array items without a schema of their own
PRIMITIVE_VALIDATORS = {
    "string": "string",
    "number": "number",
    "boolean": "boolean",
    "any": "any",
    "unknown": "unknown",
    "null": "null",
    "undefined": "undefined",
    "Date": "date",
}

_EXPORTED_CONST = re.compile(r"^\s*export\s+const\s+([A-Za-z_$][\w$]*)", re.MULTILINE)

# Modules providing the validator namespace in converter output
_VALIDATOR_MODULES = {"zod", "astro/zod"}


class InterfaceProcessor:
    """Converts types-file interfaces into native schemas."""

    def __init__(
        self,
        config: CodeGeneratorConfig,
        natives: NativeSchemaRegistry,
        converter: InterfaceConverter | None = None,
        renderer: TemplateRenderer | None = None,
    ):
        self.config = config
        self.natives = natives
        self.converter = converter or TsToZodConverter(config.converter_command, config.converter_timeout)
        self.renderer = renderer or TemplateRenderer(config.validator_namespace)
        self.extractor = InterfaceExtractor()

    def process(self, types_source: str) -> list[str]:
        """
        Register a native schema for every interface in the types file.

        Args:
            types_source: Content of the types file

        Returns:
            Names of the interfaces that could not be converted
        """
        failed = []
        interfaces = self.extractor.extract(types_source)
        if not interfaces:
            logger.warning("No interfaces found in Storyblok types file")

        converter_available = None
        for interface in interfaces:
            try:
                schema = self.bypass_array_extension(interface)
                if schema is None:
                    if converter_available is None:
                        converter_available = self.converter.is_available()
                    if not converter_available:
                        failed.append(interface.name)
                        continue
                    schema = self.convert(interface)
            except InterfaceConversionError as e:
                logger.warning("Failed to process interface '%s': %s", interface.name, e)
                failed.append(interface.name)
                continue

            self.natives.set(schema)
            logger.debug("Processed interface: %s", interface.name)

        logger.info("Processed %d interfaces (%d failed)", len(interfaces) - len(failed), len(failed))
        register_standard_schemas(self.natives, self.config, self.renderer)
        return failed

    def bypass_array_extension(self, interface: InterfaceDefinition) -> NativeSchema | None:
        """
        Build ``array(<item>)`` for an interface that is nothing but an array.

        Returns:
            The schema, or None when the interface must go through the converter
        """
        if not self.config.array_extension_bypass:
            return None
        item_type = interface.array_element_type
        if item_type is None:
            return None

        item = self.item_expression(item_type)
        if item is None:
            return None

        schema_name = interface_schema_name(interface.name)
        logger.debug("Interface '%s' extends an array of '%s'", interface.name, item_type)
        return NativeSchema(
            interface_name=interface.name,
            schema_name=schema_name,
            declaration=Declaration(name=schema_name, value=array(item)),
        )

    def item_expression(self, item_type: str) -> ZodNode | None:
        if item_type in PRIMITIVE_VALIDATORS:
            return zod_call(PRIMITIVE_VALIDATORS[item_type])
        if is_identifier(item_type):
            return Reference(symbol=interface_schema_name(item_type))
        return None

    def convert(self, interface: InterfaceDefinition) -> NativeSchema:
        """
        Run the external converter on one interface.

        Raises:
            InterfaceConversionError: If the converter fails or its output has no schema for the interface
        """
        generated = self.converter.convert(f"export {interface.source}\n")
        imports, body = self.split_generated(generated)

        schema_name = interface_schema_name(interface.name)
        declared = _EXPORTED_CONST.findall(body)
        if schema_name not in declared:
            raise InterfaceConversionError(
                f"Converter output does not declare '{schema_name}' (found: {', '.join(declared) or 'nothing'})"
            )

        return NativeSchema(
            interface_name=interface.name,
            schema_name=schema_name,
            declaration=RawDeclaration(name=schema_name, text=body, imports=imports),
            imports=imports,
        )

    def split_generated(self, generated: str) -> tuple[list[ImportStatement], str]:
        """
        Separate the converter's preamble from its declarations.

        Leading comments and the validator import are dropped. Imports from
        the converter's input file are redirected to the modules configured
        for each imported type.

        Returns:
            (imports, declaration text)
        """
        lines = generated.splitlines()
        imports: list[ImportStatement] = []

        index = 0
        while index < len(lines):
            line = lines[index].strip()
            if not line or line.startswith("//"):
                index += 1
                continue
            if not line.startswith("import "):
                break

            # Imports may span several lines
            statement_lines = [lines[index]]
            while not _is_complete_import(" ".join(statement_lines)) and index + 1 < len(lines):
                index += 1
                statement_lines.append(lines[index])
            index += 1

            statement = parse_import(" ".join(s.strip() for s in statement_lines))
            if statement is None:
                raise InterfaceConversionError(f"Unrecognized import in converter output: {line}")
            imports.extend(self.remap_import(statement))

        body = "\n".join(lines[index:]).strip()
        if not body:
            raise InterfaceConversionError("Converter output contains no declarations")
        return imports, body

    def remap_import(self, statement: ImportStatement) -> list[ImportStatement]:
        if statement.module in _VALIDATOR_MODULES:
            return []
        if not statement.module.startswith("."):
            return [statement]

        remapped = []
        for name in statement.names:
            type_name = name.removeprefix("type ").strip()
            remapped.append(
                ImportStatement(module=self.config.import_path_for_type(type_name), names=[f"type {type_name}"])
            )
        return remapped


def _is_complete_import(text: str) -> bool:
    return bool(re.search(r"""from\s+['"][^'"]+['"]\s*;?\s*$|^\s*import\s+['"][^'"]+['"]\s*;?\s*$""", text))
