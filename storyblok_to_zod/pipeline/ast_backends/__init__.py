"""
Zod AST backend.

Builds the Zod AST for components and serializes it to TypeScript.
"""

from __future__ import annotations

from .templates import TemplateRenderer
from .zod_nodes import (
    ArrayLiteral,
    Call,
    Commented,
    Declaration,
    ImportStatement,
    MethodCall,
    ObjectLiteral,
    ObjectMember,
    RawDeclaration,
    RawExpression,
    Reference,
    ZodFile,
    ZodNode,
)
from .zod_serializer import ZodSerializer

__all__ = [
    "ZodNode",
    "Call",
    "MethodCall",
    "ArrayLiteral",
    "Reference",
    "Commented",
    "RawExpression",
    "ObjectMember",
    "ObjectLiteral",
    "ImportStatement",
    "Declaration",
    "RawDeclaration",
    "ZodFile",
    "ZodSerializer",
    "TemplateRenderer",
]
