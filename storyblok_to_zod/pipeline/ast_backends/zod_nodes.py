"""
Zod AST node definitions.

These nodes represent the structure of the generated TypeScript module:
validator expressions, object literals, declarations and imports. They
are built by the converters and serialized by ZodSerializer.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field

# Identifiers inside raw TypeScript text (comments and strings are not stripped)
_IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


@dataclass
class ZodNode:
    """Base class for all Zod AST nodes."""

    pass


@dataclass
class Call(ZodNode):
    """A validator call on the namespace, e.g. z.string() or z.union([...])."""

    method: str = ""
    args: list[ZodNode] = field(default_factory=list)


@dataclass
class MethodCall(ZodNode):
    """A chained call on an expression, e.g. <target>.datetime()."""

    target: ZodNode | None = None
    method: str = ""
    args: list[ZodNode] = field(default_factory=list)


@dataclass
class ArrayLiteral(ZodNode):
    items: list[ZodNode] = field(default_factory=list)


@dataclass
class Reference(ZodNode):
    """Reference to another schema declared in the same module."""

    symbol: str = ""


@dataclass
class Commented(ZodNode):
    """An expression followed by a block comment."""

    expression: ZodNode | None = None
    comment: str = ""


@dataclass
class RawExpression(ZodNode):
    """Pre-rendered TypeScript expression text (templates, external converter)."""

    text: str = ""


@dataclass
class ObjectMember(ZodNode):
    name: str = ""
    value: ZodNode | None = None
    optional: bool = False


@dataclass
class ObjectLiteral(ZodNode):
    """z.object({...}) with members in order."""

    members: list[ObjectMember] = field(default_factory=list)


@dataclass
class ImportStatement(ZodNode):
    """An ES module import.

    Names prefixed with "type " are type-only imports.
    """

    module: str = ""
    names: list[str] = field(default_factory=list)
    default: str | None = None
    namespace: str | None = None
    type_only: bool = False


@dataclass
class Declaration(ZodNode):
    """export const <name>[: <type_annotation>] = <value>;"""

    name: str = ""
    value: ZodNode | None = None
    type_annotation: str | None = None

    # Imports the declaration needs (type imports for annotations)
    imports: list[ImportStatement] = field(default_factory=list)


@dataclass
class RawDeclaration(ZodNode):
    """Complete declaration text produced outside the AST."""

    name: str = ""
    text: str = ""
    imports: list[ImportStatement] = field(default_factory=list)


@dataclass
class ZodFile(ZodNode):
    """The complete generated module."""

    generation_comment: str = ""
    imports: list[ImportStatement] = field(default_factory=list)
    declarations: list[Declaration | RawDeclaration] = field(default_factory=list)


# Constructors for the common shapes


def zod_call(method: str, *args: ZodNode) -> Call:
    return Call(method=method, args=list(args))


def union(*options: ZodNode) -> Call:
    return Call(method="union", args=[ArrayLiteral(items=list(options))])


def array(item: ZodNode) -> Call:
    return Call(method="array", args=[item])


def any_() -> Call:
    return Call(method="any")


def iter_identifiers(text: str) -> Iterator[str]:
    """Yield identifier tokens found in raw TypeScript text."""
    for match in _IDENTIFIER_PATTERN.finditer(text):
        yield match.group(0)


def collect_references(node: ZodNode | None) -> set[str]:
    """
    Collect the symbols a node refers to.

    Reference nodes contribute their symbol; raw text contributes every
    identifier it contains, so callers filter the result against the
    symbols they care about.
    """
    found: set[str] = set()
    _collect(node, found)
    return found


def _collect(node: ZodNode | None, found: set[str]) -> None:
    if node is None:
        return
    if isinstance(node, Reference):
        found.add(node.symbol)
    elif isinstance(node, (RawExpression, RawDeclaration)):
        found.update(iter_identifiers(node.text))
    elif isinstance(node, Call):
        for arg in node.args:
            _collect(arg, found)
    elif isinstance(node, MethodCall):
        _collect(node.target, found)
        for arg in node.args:
            _collect(arg, found)
    elif isinstance(node, ArrayLiteral):
        for item in node.items:
            _collect(item, found)
    elif isinstance(node, Commented):
        _collect(node.expression, found)
    elif isinstance(node, ObjectMember):
        _collect(node.value, found)
    elif isinstance(node, ObjectLiteral):
        for member in node.members:
            _collect(member, found)
    elif isinstance(node, Declaration):
        _collect(node.value, found)
