"""
Analyzer module.

Dependency ordering of components and usage analysis of native schemas.
"""

from __future__ import annotations

from .dependency_graph import DependencyGraph, DependencyGraphBuilder, topological_sort
from .usage_analyzer import UsageAnalyzer

__all__ = [
    "DependencyGraph",
    "DependencyGraphBuilder",
    "topological_sort",
    "UsageAnalyzer",
]
