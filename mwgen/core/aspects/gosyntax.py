"""Small helpers that lay out Go source the way gofmt would."""

import re
from dataclasses import replace
from typing import List, Sequence, Tuple

from ..constants import PREDECLARED_TYPES, TYPE_KEYWORDS
from ..reflector.models import ImportSpec, MethodDescriptor

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def align_pairs(
    pairs: Sequence[Tuple[str, str]],
    indent: str,
    key_suffix: str = "",
    line_suffix: str = "",
) -> List[str]:
    """Align the value column of consecutive key/value lines.

    Used for struct fields (``next        svc.Service``) and keyed composite
    literals (``"method":  "Get",``).
    """
    if not pairs:
        return []
    keys = [key + key_suffix for key, _ in pairs]
    width = max(len(key) for key in keys)
    return [
        f"{indent}{key.ljust(width)} {value}{line_suffix}"
        for key, (_, value) in zip(keys, pairs)
    ]


def is_stdlib(path: str) -> bool:
    """Standard library import paths have no dot in their first element."""
    return "." not in path.split("/")[0]


def import_block(imports: Sequence[ImportSpec]) -> str:
    """Render an import declaration, stdlib group first, each group sorted by path."""
    if not imports:
        return ""

    unique = {}
    for spec in imports:
        unique.setdefault(spec.path, spec)

    groups = [
        sorted((s for s in unique.values() if is_stdlib(s.path)), key=lambda s: s.path),
        sorted((s for s in unique.values() if not is_stdlib(s.path)), key=lambda s: s.path),
    ]

    lines = ["import ("]
    for group in groups:
        if not group:
            continue
        if len(lines) > 1:
            lines.append("")
        for spec in group:
            prefix = f"{spec.alias} " if spec.alias else ""
            lines.append(f'\t{prefix}"{spec.path}"')
    lines.append(")")
    return "\n".join(lines) + "\n"


def parameter_list(method: MethodDescriptor) -> str:
    """Re-flatten parameters into ``name type`` form."""
    return ", ".join(f"{p.name} {p.type_name}" for p in method.parameters)


def result_list(method: MethodDescriptor) -> str:
    """Result types, parenthesized when there is more than one."""
    if not method.returns:
        return ""
    if len(method.returns) == 1:
        return method.returns[0]
    return "(" + ", ".join(method.returns) + ")"


def qualify_type(type_name: str, package: str) -> str:
    """Qualify package-local type names with ``package``.

    The wrapper lives in another package, so ``*Item`` declared next to
    the interface becomes ``*item.Item``. Predeclared types, keywords,
    already qualified names and struct/interface literal bodies are kept.
    """
    if not package:
        return type_name

    parts: List[str] = []
    pos = 0
    for match in _IDENTIFIER.finditer(type_name):
        start, end = match.span()
        name = match.group()
        before = type_name[:start]
        keep = (
            name in PREDECLARED_TYPES
            or name in TYPE_KEYWORDS
            or type_name[end:end + 1] == "."
            or (before.endswith(".") and not before.endswith("..."))
            or (before[-1:].isalnum() or before.endswith("_"))
            or before.count("{") > before.count("}")
        )
        if not keep:
            parts.append(type_name[pos:start] + f"{package}.{name}")
            pos = end
    parts.append(type_name[pos:])
    return "".join(parts)


def qualify_method(method: MethodDescriptor, package: str) -> MethodDescriptor:
    """Return ``method`` with every parameter and result type qualified."""
    parameters = tuple(
        replace(p, type_name=qualify_type(p.type_name, package)) for p in method.parameters
    )
    returns = tuple(qualify_type(r, package) for r in method.returns)
    return replace(method, parameters=parameters, returns=returns)
