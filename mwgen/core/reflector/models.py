"""Reflector data models.

Defines the intermediate representation of a reflected Go interface.
Plain data containers filled in by the extractor.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class Parameter:
    """A single method parameter, flattened to text.

    Grouped declarations (``a, b int``) are split into one Parameter per name.
    """

    type_name: str  # "*Item", "pkg.T", "[]T", "...string"
    name: str  # "item"
    variadic: bool = False

    @property
    def call_argument(self) -> str:
        """How the parameter is passed when forwarding the call."""
        return f"{self.name}..." if self.variadic else self.name


@dataclass(frozen=True)
class MethodDescriptor:
    """One interface method: name, ordered parameters, ordered return types."""

    name: str
    parameters: Tuple[Parameter, ...] = ()
    returns: Tuple[str, ...] = ()

    @property
    def arity(self) -> int:
        return len(self.returns)


@dataclass(frozen=True)
class ImportSpec:
    """An import declaration from the file declaring the interface."""

    path: str  # "github.com/google/uuid"
    alias: Optional[str] = None  # explicit alias, if any

    @property
    def package_name(self) -> str:
        """Name the imported package is referenced by in source.

        Without an alias Go uses the package clause of the imported code,
        which we approximate from the path: last segment, skipping major
        version suffixes ("/v2") and dropping ".vN" gopkg.in suffixes.
        """
        if self.alias:
            return self.alias
        segments = [s for s in self.path.split("/") if s]
        name = segments[-1] if segments else self.path
        if len(segments) > 1 and name[:1] == "v" and name[1:].isdigit():
            name = segments[-2]
        if ".v" in name:
            name = name.split(".v")[0]
        return name.replace("-", "_")


@dataclass
class InterfaceDescriptor:
    """Complete reflection output for one named interface.

    ``methods`` is in declaration order; that order is visible in the
    generated unit and must be stable across runs.
    """

    name: str
    package: str
    file_path: str
    methods: List[MethodDescriptor] = field(default_factory=list)
    imports: List[ImportSpec] = field(default_factory=list)
    qualifiers: List[str] = field(default_factory=list)  # package names used by method types

    def resolve_import(self, qualifier: str) -> Optional[ImportSpec]:
        """Find the import a package qualifier refers to, if declared."""
        for spec in self.imports:
            if spec.package_name == qualifier:
                return spec
        return None
