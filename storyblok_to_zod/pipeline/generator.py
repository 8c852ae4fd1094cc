"""
Pipeline generator.

Runs the phases in order for one space:

1. Load component documents and the types file
2. Convert types-file interfaces into native schemas
3. Build the component dependency graph and sort it
4. Convert components in dependency order
5. Find the native schemas the components use
6. Assemble, format and write the module
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .analyzer import DependencyGraphBuilder, UsageAnalyzer, topological_sort
from .ast_backends.component_converter import ComponentConverter
from .ast_backends.templates import TemplateRenderer
from .config import CodeGeneratorConfig
from .constants import FILE_HEADER
from .formatters import Formatter, PrettierFormatter
from .interfaces import InterfaceConverter, InterfaceProcessor
from .output import AtomicWriter, OutputAssembler, validate_typescript, write_plain
from .registry import ConvertedSchemaRegistry, NativeSchema, NativeSchemaRegistry
from .sources import components_dir, load_component_documents, read_text_file, types_file, validate_paths

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """Everything one run produced."""

    # The generated module, ending with a newline
    text: str = ""

    converted: ConvertedSchemaRegistry = field(default_factory=ConvertedSchemaRegistry)
    natives: NativeSchemaRegistry = field(default_factory=NativeSchemaRegistry)

    # Component names in conversion order
    order: list[str] = field(default_factory=list)

    # Components left out: unparseable documents and failed conversions
    skipped: list[str] = field(default_factory=list)

    # Interfaces the converter could not handle
    failed_interfaces: list[str] = field(default_factory=list)

    # Native schemas emitted, in emission order
    emitted_natives: list[NativeSchema] = field(default_factory=list)


class PipelineGenerator:
    """Generates the Zod schema module for one Storyblok space."""

    def __init__(
        self,
        space: str,
        folder: str | Path = ".storyblok",
        config: CodeGeneratorConfig | None = None,
        converter: InterfaceConverter | None = None,
        formatter: Formatter | None = None,
        command_line: str | None = None,
    ):
        """
        Args:
            space: Components subfolder to process
            folder: Input root holding components/ and types/
            config: Generation options
            converter: Interface converter; ts-to-zod when not given
            formatter: Formatter used when formatting is enabled; prettier when not given
            command_line: Invocation shown in the header comment
        """
        self.space = space
        self.folder = Path(folder)
        self.config = config or CodeGeneratorConfig()
        self.converter = converter
        self.formatter = formatter
        self.command_line = command_line
        self.renderer = TemplateRenderer(self.config.validator_namespace)

    @property
    def generation_comment(self) -> str:
        if not self.config.add_generation_comment:
            return ""
        if self.command_line:
            return f"{FILE_HEADER} : {self.command_line}"
        return FILE_HEADER

    def run(self) -> GenerationResult:
        """
        Read the inputs from disk and generate the module.

        Raises:
            ConfigurationError: If input paths are missing
            FileOperationError: If the types file cannot be read
            CyclicDependencyError: If components reference each other in a cycle
        """
        validate_paths(self.folder, self.space, self.config.types_file_name)
        documents = load_component_documents(
            components_dir(self.folder, self.space), self.config.ignored_component_files
        )
        types_source = read_text_file(types_file(self.folder, self.config.types_file_name))
        return self.run_from_documents(documents, types_source)

    def run_from_documents(self, documents: Mapping[str, Any], types_source: str) -> GenerationResult:
        """
        Generate the module from already loaded inputs.

        Args:
            documents: Component name -> parsed component document
            types_source: Content of the types file

        Returns:
            GenerationResult with the module text and the run's registries
        """
        result = GenerationResult()

        # Phase 2: native schemas
        processor = InterfaceProcessor(self.config, result.natives, self.converter, self.renderer)
        result.failed_interfaces = processor.process(types_source)

        # Phase 3: dependency order
        graph = DependencyGraphBuilder().build(documents)
        for name, unknown in graph.unresolved().items():
            logger.debug("Component '%s' references unknown components: %s", name, ", ".join(unknown))
        result.order = topological_sort(graph.dependencies)
        logger.info("Component processing order: %s", ", ".join(result.order))

        # Phase 4: components
        converter = ComponentConverter(self.config, result.converted, result.natives, self.renderer)
        result.skipped = graph.skipped + converter.convert_all(result.order, graph.components)

        # Phase 5: native schema usage
        analyzer = UsageAnalyzer(result.natives)
        used = analyzer.analyze(result.converted)
        if self.config.exclude_unused_native_schemas:
            result.emitted_natives = used
        else:
            result.emitted_natives = analyzer.order(result.natives.all())

        # Phase 6: assembly
        assembler = OutputAssembler(self.config, self.renderer)
        text = assembler.assemble(result.converted, result.emitted_natives, self.generation_comment)
        result.text = self.format(text)
        return result

    def format(self, text: str) -> str:
        if not self.config.formatter.enabled:
            return text
        formatter = self.formatter or PrettierFormatter(self.config.formatter.command)
        return formatter.format(text, self.config.formatter)

    def generate(self) -> str:
        """Generate the module text."""
        return self.run().text

    def write(self, text: str, output: str | Path) -> None:
        """
        Write the module to a file.

        Raises:
            OutputValidationError: If validation is enabled and the text is malformed
            FileOperationError: If the file cannot be written
        """
        text = text.rstrip() + "\n"
        if self.config.output.atomic_write:
            AtomicWriter().write(Path(output), text, validate=self.config.output.validate_before_write)
        else:
            if self.config.output.validate_before_write:
                validate_typescript(text)
            write_plain(Path(output), text)
        logger.info("Wrote %s", output)
