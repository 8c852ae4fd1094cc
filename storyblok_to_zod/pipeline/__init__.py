"""
Storyblok to Zod pipeline.

Generates Zod schemas from Storyblok component definitions in phases:

1. Phase 1 (Parser): Parse component documents into field descriptors
2. Phase 2 (Interfaces): Convert types-file interfaces into native schemas
3. Phase 3 (Analyzer): Order components by their bloks dependencies
4. Phase 4 (AST Backend): Build the Zod AST for each component
5. Phase 5 (Analyzer): Keep the native schemas the components use
6. Phase 6 (Output): Merge imports, serialize, optionally format, write
"""

from __future__ import annotations

from .config import CodeGeneratorConfig, FormatterConfig, OutputConfig
from .errors import (
    ComponentValidationError,
    ConfigurationError,
    CyclicDependencyError,
    FileOperationError,
    InterfaceConversionError,
    OutputValidationError,
    StoryblokToZodError,
)
from .generator import GenerationResult, PipelineGenerator
from .interfaces import InterfaceConverter, TsToZodConverter
from .output import AtomicWriter

__all__ = [
    "PipelineGenerator",
    "GenerationResult",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "InterfaceConverter",
    "TsToZodConverter",
    "AtomicWriter",
    "StoryblokToZodError",
    "ConfigurationError",
    "FileOperationError",
    "ComponentValidationError",
    "CyclicDependencyError",
    "InterfaceConversionError",
    "OutputValidationError",
]
