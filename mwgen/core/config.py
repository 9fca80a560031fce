"""Generator configuration.

Defaults live on GeneratorConfig; an optional YAML file (``.mwgen.yaml``
in the module directory, ``MWGEN_CONFIG`` or ``--config``) overrides
them, and command-line flags override the file.
"""

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .constants import (
    CONFIG_ENV_VAR,
    CONTEXT_PARAM,
    DEFAULT_CONFIG_FILE,
    DEFAULT_LAYER,
    DEFAULT_OUTPUT_DIR,
    ERROR_TYPE,
    NARY_CAPTURE,
    NARY_POLICIES,
)
from .errors import UsageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratorConfig:
    """Settings for one generator run."""

    output_dir: str = DEFAULT_OUTPUT_DIR
    label: Optional[str] = None  # defaults to the interface name
    layer: str = DEFAULT_LAYER
    context_param: str = CONTEXT_PARAM
    error_type: str = ERROR_TYPE
    service_import: Optional[str] = None  # derived from go.mod when unset
    nary_policy: str = NARY_CAPTURE

    def with_overrides(self, **overrides: Any) -> "GeneratorConfig":
        """Return a copy with every non-None override applied."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **changes).validate()

    def validate(self) -> "GeneratorConfig":
        if self.nary_policy not in NARY_POLICIES:
            raise UsageError(
                f"Invalid nary_policy: {self.nary_policy!r}. Supported: {', '.join(NARY_POLICIES)}"
            )
        for name in ("output_dir", "layer", "context_param", "error_type"):
            if not getattr(self, name):
                raise UsageError(f"Config value {name!r} must not be empty")
        return self

    @property
    def output_package(self) -> str:
        """Go package name of the generated unit: the output directory's base name."""
        return Path(self.output_dir).name


def _config_keys() -> set:
    return {f.name for f in fields(GeneratorConfig)}


def find_config_file(module_dir: str, explicit: Optional[str] = None) -> Optional[Path]:
    """Locate the config file: explicit path, then MWGEN_CONFIG, then the module directory."""
    if explicit:
        return Path(explicit)
    from_env = os.getenv(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env)
    candidate = Path(module_dir) / DEFAULT_CONFIG_FILE
    return candidate if candidate.is_file() else None


def load_config(module_dir: str = ".", config_path: Optional[str] = None) -> GeneratorConfig:
    """Load generator settings.

    Args:
        module_dir: Module directory searched for the default config file
        config_path: Explicit config file (takes precedence)

    Returns:
        GeneratorConfig with file values applied over defaults

    Raises:
        UsageError: If an explicit file is missing or the file is invalid
    """
    path = find_config_file(module_dir, config_path)
    if path is None:
        return GeneratorConfig()

    if not path.is_file():
        raise UsageError(f"Config file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise UsageError(f"Cannot load config file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise UsageError(f"Config file {path} must contain a mapping")

    values: Dict[str, Any] = {}
    known = _config_keys()
    for key, value in raw.items():
        if key not in known:
            logger.warning(f"Ignoring unknown config key {key!r} in {path}")
            continue
        values[key] = str(value) if value is not None else None

    logger.debug(f"Loaded config from {path}: {values}")
    return GeneratorConfig().with_overrides(**values)
