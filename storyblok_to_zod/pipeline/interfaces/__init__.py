"""
Native schemas from the Storyblok types file.
"""

from __future__ import annotations

from .converter import InterfaceConverter, TsToZodConverter
from .extractor import InterfaceDefinition, InterfaceExtractor
from .processor import InterfaceProcessor
from .standard_schemas import register_standard_schemas

__all__ = [
    "InterfaceConverter",
    "InterfaceDefinition",
    "InterfaceExtractor",
    "InterfaceProcessor",
    "TsToZodConverter",
    "register_standard_schemas",
]
