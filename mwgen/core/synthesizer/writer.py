"""Unit writer — materializes a GeneratedUnit on disk."""

import logging
from pathlib import Path

from ..errors import GeneratorError
from .models import GeneratedUnit

logger = logging.getLogger(__name__)


def write_unit(unit: GeneratedUnit, output_dir: str) -> Path:
    """Write ``unit`` into ``output_dir``, creating the directory if absent.

    Args:
        unit: Generated source unit
        output_dir: Target directory (e.g., "<module>/middleware")

    Returns:
        Path of the written file

    Raises:
        GeneratorError: If the directory or file cannot be written
    """
    target_dir = Path(output_dir)
    target = target_dir / unit.file_name
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        target.write_text(unit.source, encoding="utf-8")
    except OSError as e:
        raise GeneratorError(f"Cannot write {target}: {e}") from e

    logger.info(f"Wrote {target} ({len(unit.source)} bytes)")
    return target
