"""Storyblok to Zod

Generates Zod validation schemas for Astro projects from Storyblok
component definitions and the Storyblok TypeScript types file.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    FormatterConfig,
    GenerationResult,
    OutputConfig,
    PipelineGenerator,
    StoryblokToZodError,
    TsToZodConverter,
)

__all__ = [
    "PipelineGenerator",
    "GenerationResult",
    "CodeGeneratorConfig",
    "FormatterConfig",
    "OutputConfig",
    "TsToZodConverter",
    "AtomicWriter",
    "StoryblokToZodError",
]
