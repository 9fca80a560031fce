"""Interface extraction from Go syntax trees.

Walks top-level type declarations to find a named interface and
flattens its method elements into MethodDescriptor objects.
"""

import logging
from typing import Iterator, List, Optional, Tuple

import tree_sitter

from .models import ImportSpec, InterfaceDescriptor, MethodDescriptor, Parameter
from .parser import ParsedFile
from .types import named_children, node_text, render_type

logger = logging.getLogger(__name__)

# Node types for interface method elements across tree-sitter-go releases
_METHOD_NODES = ("method_elem", "method_spec")
_PARAMETER_NODES = ("parameter_declaration", "variadic_parameter_declaration")


class InterfaceExtractor:
    """Extracts interface declarations from one parsed Go file.

    Extracts:
    - Package clause -> InterfaceDescriptor.package
    - Import declarations -> InterfaceDescriptor.imports
    - Method elements -> MethodDescriptor (embedded interfaces are skipped)
    """

    def __init__(self, parsed: ParsedFile):
        self._parsed = parsed
        self._source = parsed.source

    def interface_names(self) -> List[str]:
        """Names of all top-level interfaces, in declaration order."""
        return [
            node_text(spec.child_by_field_name("name"), self._source)
            for spec in self._type_specs()
            if self._is_interface(spec)
        ]

    def find_interface(self, interface_name: str) -> Optional[InterfaceDescriptor]:
        """Return the descriptor of the first interface named ``interface_name``."""
        for spec in self._type_specs():
            name = node_text(spec.child_by_field_name("name"), self._source)
            if name != interface_name or not self._is_interface(spec):
                continue

            qualifiers: List[str] = []
            methods = self._extract_methods(spec.child_by_field_name("type"), qualifiers)
            return InterfaceDescriptor(
                name=name,
                package=self.package_name(),
                file_path=self._parsed.file_path,
                methods=methods,
                imports=self.imports(),
                qualifiers=qualifiers,
            )
        return None

    # =========================================================================
    # File-level declarations
    # =========================================================================

    def package_name(self) -> str:
        for child in self._parsed.root.children:
            if child.type == "package_clause":
                for sub in child.named_children:
                    if sub.type == "package_identifier":
                        return node_text(sub, self._source)
        return ""

    def imports(self) -> List[ImportSpec]:
        """Extract import specs in source order."""
        specs: List[ImportSpec] = []
        for child in self._parsed.root.children:
            if child.type != "import_declaration":
                continue
            for node in self._walk_import_specs(child):
                path = node_text(node.child_by_field_name("path"), self._source).strip('"`')
                alias_node = node.child_by_field_name("name")
                alias = node_text(alias_node, self._source) if alias_node else None
                specs.append(ImportSpec(path=path, alias=alias))
        return specs

    def _walk_import_specs(self, node: tree_sitter.Node) -> Iterator[tree_sitter.Node]:
        for child in node.named_children:
            if child.type == "import_spec":
                yield child
            elif child.type == "import_spec_list":
                yield from self._walk_import_specs(child)

    def _type_specs(self) -> Iterator[tree_sitter.Node]:
        """Yield top-level type_spec nodes, including parenthesized groups."""
        for child in self._parsed.root.children:
            if child.type != "type_declaration":
                continue
            for spec in child.named_children:
                if spec.type == "type_spec":
                    yield spec

    @staticmethod
    def _is_interface(spec: tree_sitter.Node) -> bool:
        type_node = spec.child_by_field_name("type")
        return type_node is not None and type_node.type == "interface_type"

    # =========================================================================
    # Methods
    # =========================================================================

    def _extract_methods(
        self, interface_node: tree_sitter.Node, qualifiers: List[str]
    ) -> List[MethodDescriptor]:
        methods: List[MethodDescriptor] = []
        for child in named_children(interface_node):
            if child.type not in _METHOD_NODES:
                logger.debug(
                    f"Skipping {child.type} in interface: {node_text(child, self._source).strip()}"
                )
                continue
            methods.append(self._extract_method(child, qualifiers))
        return methods

    def _extract_method(self, node: tree_sitter.Node, qualifiers: List[str]) -> MethodDescriptor:
        name = node_text(node.child_by_field_name("name"), self._source)
        parameters = self._extract_parameters(node.child_by_field_name("parameters"), qualifiers)

        result = node.child_by_field_name("result")
        if result is None:
            returns: Tuple[str, ...] = ()
        elif result.type == "parameter_list":
            # Result names are dropped; one entry per declared value
            returns = tuple(p.type_name for p in self._extract_parameters(result, qualifiers))
        else:
            returns = (render_type(result, self._source, qualifiers),)

        return MethodDescriptor(name=name, parameters=tuple(parameters), returns=returns)

    def _extract_parameters(
        self, parameter_list: Optional[tree_sitter.Node], qualifiers: List[str]
    ) -> List[Parameter]:
        """Flatten a parameter list, one Parameter per declared name.

        Unnamed and blank parameters are named by position (``argN``) so
        the wrapper can forward them to the delegate.
        """
        parameters: List[Parameter] = []
        if parameter_list is None:
            return parameters

        for decl in named_children(parameter_list):
            if decl.type not in _PARAMETER_NODES:
                continue
            variadic = decl.type == "variadic_parameter_declaration"
            type_name = render_type(decl.child_by_field_name("type"), self._source, qualifiers)
            if variadic:
                type_name = "..." + type_name

            names = [node_text(n, self._source) for n in decl.children_by_field_name("name")]
            if not names:
                names = [""]
            for param_name in names:
                if param_name in ("", "_"):
                    param_name = f"arg{len(parameters)}"
                parameters.append(Parameter(type_name=type_name, name=param_name, variadic=variadic))

        return parameters
