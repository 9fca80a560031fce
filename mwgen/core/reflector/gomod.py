"""Import path resolution from go.mod.

The generated unit lives in its own package and has to import the
package declaring the interface. Its import path is the module path
from the nearest go.mod joined with the directory's relative location.
"""

import logging
import re
from pathlib import Path
from typing import Optional

from ..constants import GO_MOD_FILE

logger = logging.getLogger(__name__)

_MODULE_LINE = re.compile(r"^\s*module\s+(\S+)")


def find_go_mod(directory: str) -> Optional[Path]:
    """Return the nearest go.mod at or above ``directory``."""
    current = Path(directory).resolve()
    for candidate in [current, *current.parents]:
        go_mod = candidate / GO_MOD_FILE
        if go_mod.is_file():
            return go_mod
    return None


def read_module_path(go_mod: Path) -> Optional[str]:
    """Extract the module path declared in a go.mod file."""
    try:
        text = go_mod.read_text(encoding="utf-8")
    except OSError as e:
        logger.warning(f"Cannot read {go_mod}: {e}")
        return None

    for line in text.splitlines():
        match = _MODULE_LINE.match(line)
        if match:
            return match.group(1).strip('"')
    return None


def resolve_import_path(directory: str) -> Optional[str]:
    """Derive the Go import path of ``directory``.

    Args:
        directory: Package directory inside a Go module

    Returns:
        Import path (e.g., "example.com/shop/item") or None when no go.mod
        declaring a module path is found
    """
    go_mod = find_go_mod(directory)
    if go_mod is None:
        logger.debug(f"No {GO_MOD_FILE} found above {directory}")
        return None

    module_path = read_module_path(go_mod)
    if not module_path:
        return None

    relative = Path(directory).resolve().relative_to(go_mod.parent)
    if relative.parts:
        return f"{module_path}/{relative.as_posix()}"
    return module_path
