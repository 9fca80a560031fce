"""Go type rendering.

Flattens tree-sitter type nodes into the textual form used by method
descriptors. Rendering is syntactic only: `*T`, `pkg.T`, `[]T` and friends
are reproduced verbatim, nothing is resolved.
"""

import re
from typing import List, Optional

import tree_sitter

_WHITESPACE = re.compile(r"\s+")


def node_text(node: tree_sitter.Node, source: bytes) -> str:
    return source[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def named_children(node: tree_sitter.Node) -> List[tree_sitter.Node]:
    """Named children without interleaved comments."""
    return [child for child in node.named_children if child.type != "comment"]


def render_type(
    node: tree_sitter.Node,
    source: bytes,
    qualifiers: Optional[List[str]] = None,
) -> str:
    """Render a type node as flat text.

    Args:
        node: Any tree-sitter-go type node
        source: Raw source bytes the node was parsed from
        qualifiers: If given, package qualifiers found in the type are
            appended to it (first occurrence only)

    Returns:
        Textual type, e.g. "[]*models.Item"
    """
    kind = node.type

    if kind in ("type_identifier", "identifier", "package_identifier"):
        return node_text(node, source)

    if kind == "qualified_type":
        package = node_text(node.child_by_field_name("package"), source)
        name = node_text(node.child_by_field_name("name"), source)
        if qualifiers is not None and package not in qualifiers:
            qualifiers.append(package)
        return f"{package}.{name}"

    if kind == "pointer_type":
        return "*" + render_type(named_children(node)[-1], source, qualifiers)

    if kind == "slice_type":
        return "[]" + render_type(node.child_by_field_name("element"), source, qualifiers)

    if kind == "array_type":
        length = _collapse(node_text(node.child_by_field_name("length"), source))
        element = render_type(node.child_by_field_name("element"), source, qualifiers)
        return f"[{length}]{element}"

    if kind == "map_type":
        key = render_type(node.child_by_field_name("key"), source, qualifiers)
        value = render_type(node.child_by_field_name("value"), source, qualifiers)
        return f"map[{key}]{value}"

    if kind == "generic_type":
        base = render_type(node.child_by_field_name("type"), source, qualifiers)
        arguments = node.child_by_field_name("type_arguments")
        rendered = [render_type(arg, source, qualifiers) for arg in named_children(arguments)]
        return f"{base}[{', '.join(rendered)}]"

    if kind == "type_elem":
        return " | ".join(render_type(child, source, qualifiers) for child in named_children(node))

    if kind == "parenthesized_type":
        return render_type(named_children(node)[0], source, qualifiers)

    if kind == "function_type":
        # Parameter and result names are dropped; only the types matter
        parameters = _signature_types(node.child_by_field_name("parameters"), source, qualifiers)
        rendered = f"func({', '.join(parameters)})"
        result = node.child_by_field_name("result")
        if result is None:
            return rendered
        if result.type == "parameter_list":
            return f"{rendered} ({', '.join(_signature_types(result, source, qualifiers))})"
        return f"{rendered} {render_type(result, source, qualifiers)}"

    if kind == "channel_type":
        value = node.child_by_field_name("value")
        direction = _collapse(source[node.start_byte:value.start_byte].decode("utf-8", errors="replace"))
        return f"{direction} {render_type(value, source, qualifiers)}"

    # struct and interface literals: keep the source text
    if qualifiers is not None:
        _collect_qualifiers(node, source, qualifiers)
    return _collapse(node_text(node, source))


def _collect_qualifiers(node: tree_sitter.Node, source: bytes, qualifiers: List[str]) -> None:
    for child in node.named_children:
        if child.type == "qualified_type":
            package = node_text(child.child_by_field_name("package"), source)
            if package not in qualifiers:
                qualifiers.append(package)
        else:
            _collect_qualifiers(child, source, qualifiers)


def _signature_types(
    parameter_list: Optional[tree_sitter.Node], source: bytes, qualifiers: Optional[List[str]]
) -> List[str]:
    """One type per declared value of a function type's parameter list."""
    types: List[str] = []
    if parameter_list is None:
        return types
    for decl in named_children(parameter_list):
        if decl.type not in ("parameter_declaration", "variadic_parameter_declaration"):
            continue
        type_name = render_type(decl.child_by_field_name("type"), source, qualifiers)
        if decl.type == "variadic_parameter_declaration":
            type_name = "..." + type_name
        count = len(decl.children_by_field_name("name")) or 1
        types.extend([type_name] * count)
    return types


def _collapse(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()
