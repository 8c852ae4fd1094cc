"""
Import statement parsing and merging.

Every declaration carries the imports it needs. Before rendering, the
imports of all emitted declarations are merged so each module appears
once.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..ast_backends.zod_nodes import ImportStatement

_IMPORT_FROM = re.compile(
    r"""^\s*import\s+(?P<type_only>type\s+)?(?P<clause>.+?)\s+from\s+['"](?P<module>[^'"]+)['"]\s*;?\s*$""",
    re.DOTALL,
)
_SIDE_EFFECT_IMPORT = re.compile(r"""^\s*import\s+['"](?P<module>[^'"]+)['"]\s*;?\s*$""")
_NAMESPACE_CLAUSE = re.compile(r"^\*\s+as\s+(?P<name>[A-Za-z_$][\w$]*)$")


def parse_import(line: str) -> ImportStatement | None:
    """
    Parse one ES import statement.

    Returns:
        The statement, or None if the text is not an import
    """
    match = _SIDE_EFFECT_IMPORT.match(line)
    if match:
        return ImportStatement(module=match.group("module"))

    match = _IMPORT_FROM.match(line)
    if match is None:
        return None

    statement = ImportStatement(module=match.group("module"), type_only=bool(match.group("type_only")))
    clause = match.group("clause").strip()

    if "{" in clause:
        head, _, rest = clause.partition("{")
        body = rest.rpartition("}")[0]
        statement.names = [" ".join(n.split()) for n in body.split(",") if n.strip()]
        clause = head.strip().rstrip(",").strip()

    if clause:
        default, _, namespace = clause.partition(",")
        namespace_match = _NAMESPACE_CLAUSE.match(namespace.strip() or default.strip())
        if namespace_match:
            statement.namespace = namespace_match.group("name")
            if namespace.strip():
                statement.default = default.strip()
        else:
            statement.default = default.strip()
    return statement


@dataclass
class _ModuleImports:
    # Imported name -> True while every contribution is type-only
    names: dict[str, bool] = field(default_factory=dict)
    default: str | None = None
    namespaces: list[str] = field(default_factory=list)
    type_only_statements: list[ImportStatement] = field(default_factory=list)


def _split_type_prefix(name: str) -> tuple[str, bool]:
    if name.startswith("type "):
        return name[5:].strip(), True
    return name, False


def merge_imports(imports: Iterable[ImportStatement]) -> list[ImportStatement]:
    """
    Merge imports so each module path has one statement.

    A name imported both as a value and as ``type`` is imported as a value.
    Namespace imports cannot share a clause list with named imports and
    stay separate statements.

    Returns:
        Statements sorted by module path
    """
    modules: dict[str, _ModuleImports] = {}
    for statement in imports:
        entry = modules.setdefault(statement.module, _ModuleImports())

        if statement.type_only and (statement.default or statement.namespace):
            if statement not in entry.type_only_statements:
                entry.type_only_statements.append(statement)
            continue

        for raw_name in statement.names:
            name, type_only = _split_type_prefix(raw_name)
            type_only = type_only or statement.type_only
            entry.names[name] = entry.names.get(name, True) and type_only

        if statement.default and entry.default is None:
            entry.default = statement.default
        if statement.namespace and statement.namespace not in entry.namespaces:
            entry.namespaces.append(statement.namespace)

    merged = []
    for module in sorted(modules):
        entry = modules[module]
        names = [f"type {name}" if type_only else name for name, type_only in sorted(entry.names.items())]

        emitted = False
        if names or entry.default:
            merged.append(ImportStatement(module=module, names=names, default=entry.default))
            emitted = True
        for namespace in entry.namespaces:
            merged.append(ImportStatement(module=module, namespace=namespace))
            emitted = True
        merged.extend(entry.type_only_statements)
        if not emitted and not entry.type_only_statements:
            merged.append(ImportStatement(module=module))
    return merged
