"""
Zod AST Serializer.

Converts Zod AST nodes to TypeScript source code:
- 2-space indentation
- One object member per line, each followed by a comma
- Single-quoted module specifiers in imports
"""

from __future__ import annotations

from ...utils import is_identifier
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
    ZodNode,
)


class ZodSerializer:
    """Serializes Zod AST nodes to source code."""

    INDENT = "  "  # 2 spaces

    def __init__(self, namespace: str = "z"):
        """
        Args:
            namespace: Identifier prefixed to validator calls; empty for bare calls
        """
        self.namespace = namespace

    @property
    def prefix(self) -> str:
        return f"{self.namespace}." if self.namespace else ""

    def serialize_expression(self, node: ZodNode, level: int = 0) -> str:
        """Serialize an expression node; nested objects are indented relative to level."""
        if isinstance(node, Call):
            args = ", ".join(self.serialize_expression(arg, level) for arg in node.args)
            return f"{self.prefix}{node.method}({args})"

        if isinstance(node, MethodCall):
            target = self.serialize_expression(node.target, level)
            args = ", ".join(self.serialize_expression(arg, level) for arg in node.args)
            return f"{target}.{node.method}({args})"

        if isinstance(node, ArrayLiteral):
            return "[" + ", ".join(self.serialize_expression(item, level) for item in node.items) + "]"

        if isinstance(node, Reference):
            return node.symbol

        if isinstance(node, Commented):
            return f"{self.serialize_expression(node.expression, level)} /* {node.comment} */"

        if isinstance(node, RawExpression):
            return node.text

        if isinstance(node, ObjectLiteral):
            return self._serialize_object(node, level)

        raise TypeError(f"Cannot serialize {type(node).__name__} as an expression")

    def _serialize_object(self, node: ObjectLiteral, level: int) -> str:
        if not node.members:
            return f"{self.prefix}object({{}})"

        inner = self.INDENT * (level + 1)
        lines = [f"{self.prefix}object({{"]
        for member in node.members:
            lines.append(f"{inner}{self._serialize_member(member, level + 1)},")
        lines.append(self.INDENT * level + "})")
        return "\n".join(lines)

    def _serialize_member(self, member: ObjectMember, level: int) -> str:
        key = member.name if is_identifier(member.name) else _quote(member.name)

        # Keep trailing comments after the optional marker
        value = member.value
        comment = None
        if isinstance(value, Commented):
            comment = value.comment
            value = value.expression

        rendered = self.serialize_expression(value, level)
        if member.optional:
            rendered += ".optional()"
        if comment:
            rendered += f" /* {comment} */"
        return f"{key}: {rendered}"

    def serialize_declaration(self, node: Declaration | RawDeclaration) -> str:
        """Serialize a declaration statement, terminated by a semicolon."""
        if isinstance(node, RawDeclaration):
            return node.text.strip()

        annotation = f": {node.type_annotation}" if node.type_annotation else ""
        value = self.serialize_expression(node.value)
        return f"export const {node.name}{annotation} = {value};"

    def serialize_import(self, node: ImportStatement) -> str:
        """Serialize an import statement."""
        clauses = []
        if node.default:
            clauses.append(node.default)
        if node.namespace:
            clauses.append(f"* as {node.namespace}")
        elif node.names:
            clauses.append("{ " + ", ".join(node.names) + " }")

        type_prefix = "type " if node.type_only else ""
        if not clauses:
            return f"import '{node.module}';"
        return f"import {type_prefix}{', '.join(clauses)} from '{node.module}';"


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
