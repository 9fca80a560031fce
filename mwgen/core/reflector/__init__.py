"""mwgen Signature Reflector — tree-sitter based Go interface reflection.

Public API:
    reflect(module_dir, interface_name) → InterfaceDescriptor
    reflect_source(source, interface_name, file_path) → InterfaceDescriptor
    list_interfaces(module_dir) → List[str]
"""

import logging
from typing import List

from ..errors import InterfaceNotFound
from .extractor import InterfaceExtractor
from .gomod import resolve_import_path
from .models import ImportSpec, InterfaceDescriptor, MethodDescriptor, Parameter
from .utils import get_parser, list_go_files

__all__ = [
    "reflect",
    "reflect_source",
    "list_interfaces",
    "resolve_import_path",
    "ImportSpec",
    "InterfaceDescriptor",
    "MethodDescriptor",
    "Parameter",
]

logger = logging.getLogger(__name__)


def reflect(module_dir: str, interface_name: str) -> InterfaceDescriptor:
    """Reflect the method set of a named interface in a Go package directory.

    Files are parsed in lexicographic path order and every file must parse
    cleanly. The first interface declaration with a matching name wins.

    Args:
        module_dir: Directory holding the Go package
        interface_name: Name of the interface type to reflect

    Returns:
        InterfaceDescriptor with methods in declaration order

    Raises:
        ParseError: If a file cannot be read or parsed
        InterfaceNotFound: If no interface with that name is declared
    """
    parser = get_parser()
    files = list_go_files(module_dir)
    logger.debug(f"Scanning {len(files)} Go files in {module_dir}")

    # Parse everything first: a broken file fails the run even if the
    # interface lives in an earlier one
    parsed_files = [parser.parse_file(path) for path in files]

    for parsed in parsed_files:
        descriptor = InterfaceExtractor(parsed).find_interface(interface_name)
        if descriptor is not None:
            logger.info(
                f"Found interface {descriptor.package}.{interface_name} in "
                f"{parsed.file_path} ({len(descriptor.methods)} methods)"
            )
            return descriptor

    raise InterfaceNotFound(interface_name, module_dir)


def reflect_source(
    source_text: str, interface_name: str, file_path: str = "source.go"
) -> InterfaceDescriptor:
    """Reflect a named interface from a single in-memory Go file."""
    parsed = get_parser().parse_source(source_text, file_path)
    descriptor = InterfaceExtractor(parsed).find_interface(interface_name)
    if descriptor is None:
        raise InterfaceNotFound(interface_name, file_path)
    return descriptor


def list_interfaces(module_dir: str) -> List[str]:
    """Names of every top-level interface in the package, file order then declaration order."""
    parser = get_parser()
    names: List[str] = []
    for path in list_go_files(module_dir):
        for name in InterfaceExtractor(parser.parse_file(path)).interface_names():
            if name not in names:
                names.append(name)
    return names
