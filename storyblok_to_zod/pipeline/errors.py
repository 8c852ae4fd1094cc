"""
Exceptions raised by the generator pipeline.

Errors local to one unit of work (a component, an interface) are caught at
that unit's boundary and logged. The others abort the run.
"""

from __future__ import annotations

from typing import Any


class StoryblokToZodError(Exception):
    """Base class for all generator errors."""

    pass


class ConfigurationError(StoryblokToZodError):
    """Raised when required inputs are missing or invalid.

    Attributes:
        context: Extra values describing the failing input
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class FileOperationError(StoryblokToZodError):
    """Raised when a file cannot be read, parsed or written."""

    def __init__(self, message: str, file_path: str, operation: str):
        super().__init__(f"{message}: {file_path} ({operation})")
        self.file_path = file_path
        self.operation = operation


class ComponentValidationError(StoryblokToZodError):
    """Raised when a single component document is malformed."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class CyclicDependencyError(StoryblokToZodError):
    """Raised when components reference each other in a cycle.

    Attributes:
        component: Component found twice on the current traversal path
        path: Components in progress when the cycle was detected, in visit order
    """

    def __init__(self, component: str, path: list[str]):
        cycle = " -> ".join([*path[path.index(component) :], component]) if component in path else component
        super().__init__(f"Cyclic dependency detected involving component '{component}': {cycle}")
        self.component = component
        self.path = path


class InterfaceConversionError(StoryblokToZodError):
    """Raised when one interface cannot be converted to a schema."""

    pass


class OutputValidationError(StoryblokToZodError):
    """Raised when generated output fails the structural check before writing."""

    pass
