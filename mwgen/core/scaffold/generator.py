"""CRUD service scaffold generator.

Renders a model, a Repository interface and a Service implementation
for one entity. The generated Service interface is a ready-made input
for the middleware generator.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from ..errors import GeneratorError, UsageError
from .templates import SCAFFOLD_FILES

logger = logging.getLogger(__name__)

_MODEL_NAME = re.compile(r"^[A-Z][A-Za-z0-9_]*$")
_PACKAGE_NAME = re.compile(r"^[a-z][a-z0-9_]*$")

# Identifiers already used inside the generated methods
_RESERVED_VARS = {"ctx", "id", "s", "res", "err", "repo", "errors", "context"}


@dataclass(frozen=True)
class ScaffoldSpec:
    """Names used to render the scaffold."""

    model: str  # "YourModel"
    package: str  # "yourmodel"
    var: str  # "yourModel"


def build_spec(model: str, package: Optional[str] = None) -> ScaffoldSpec:
    """Validate names and derive the package and variable names.

    Raises:
        UsageError: If the model or package name is not a valid identifier
    """
    if not model or not _MODEL_NAME.match(model):
        raise UsageError(f"Model name must be an exported Go identifier, got {model!r}")

    package = package or model.lower()
    if not _PACKAGE_NAME.match(package):
        raise UsageError(f"Package name must be a lower-case Go identifier, got {package!r}")

    var = model[0].lower() + model[1:]
    if var in _RESERVED_VARS:
        var = "entity"
    return ScaffoldSpec(model=model, package=package, var=var)


def render_scaffold(spec: ScaffoldSpec) -> Dict[str, str]:
    """Render every scaffold file. Returns file name -> source text."""
    context = {"model": spec.model, "package": spec.package, "var": spec.var}
    return {name: template.render(**context) for name, template in SCAFFOLD_FILES.items()}


def write_scaffold(spec: ScaffoldSpec, base_dir: str, force: bool = False) -> List[Path]:
    """Write the scaffold into ``<base_dir>/<package>/``.

    Existing files are never partially overwritten: without ``force``
    the call fails before writing anything.

    Raises:
        GeneratorError: If a target exists (without force) or cannot be written
    """
    target_dir = Path(base_dir) / spec.package
    rendered = render_scaffold(spec)

    if not force:
        existing = [name for name in rendered if (target_dir / name).exists()]
        if existing:
            raise GeneratorError(
                f"Refusing to overwrite {', '.join(existing)} in {target_dir} (use --force)"
            )

    written: List[Path] = []
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        for name, source in rendered.items():
            path = target_dir / name
            path.write_text(source, encoding="utf-8")
            written.append(path)
    except OSError as e:
        raise GeneratorError(f"Cannot write scaffold into {target_dir}: {e}") from e

    logger.info(f"Scaffolded {spec.model} in {target_dir} ({len(written)} files)")
    return written
