"""
Module assembly and file output.
"""

from __future__ import annotations

from .assembler import OutputAssembler
from .atomic_writer import AtomicWriter, validate_typescript, write_plain
from .imports import merge_imports, parse_import

__all__ = [
    "AtomicWriter",
    "OutputAssembler",
    "merge_imports",
    "parse_import",
    "validate_typescript",
    "write_plain",
]
