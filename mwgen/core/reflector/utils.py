"""Reflector utilities.

Module file discovery and the shared parser instance.
"""

import os
from typing import List, Optional

from ..constants import GO_FILE_SUFFIX
from ..errors import ParseError
from .parser import GoSourceParser

_parser: Optional[GoSourceParser] = None


def get_parser() -> GoSourceParser:
    """Get the shared Go parser, creating it on first use."""
    global _parser
    if _parser is None:
        _parser = GoSourceParser()
    return _parser


def is_go_file(file_name: str) -> bool:
    """Check if a directory entry names a Go source file."""
    return file_name.endswith(GO_FILE_SUFFIX) and not file_name.startswith(".")


def list_go_files(module_dir: str) -> List[str]:
    """List the Go files of a module directory, sorted by path.

    Only the directory itself is scanned, mirroring how a Go package maps
    to one directory. Sorting makes the first match deterministic when
    several files declare the same name.

    Args:
        module_dir: Directory holding the Go package

    Returns:
        Sorted list of file paths

    Raises:
        ParseError: If the directory cannot be listed
    """
    try:
        entries = os.listdir(module_dir)
    except OSError as e:
        raise ParseError(module_dir, f"cannot list directory: {e}") from e

    paths = [
        os.path.join(module_dir, name)
        for name in entries
        if is_go_file(name) and os.path.isfile(os.path.join(module_dir, name))
    ]
    return sorted(paths)
