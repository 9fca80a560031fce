"""Synthesizer output model."""

from dataclasses import dataclass
from typing import Tuple

from ..aspects.base import Aspect


@dataclass(frozen=True)
class GeneratedUnit:
    """One complete generated Go source file. Never patched in place."""

    aspect: Aspect
    interface_name: str
    file_name: str  # "log.go" | "trace.go"
    package: str  # Go package of the generated file
    method_names: Tuple[str, ...]
    source: str
