"""Aspect strategy base class and supporting types.

An aspect strategy owns everything specific to one cross-cutting
behavior: the wrapper type it declares, the imports it needs and the
body woven around each delegated call. The synthesizer stays
orchestration -- it never branches on the aspect kind.
"""

import json
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Optional

from ..constants import (
    CONTEXT_PARAM,
    DEFAULT_LAYER,
    DEFAULT_OUTPUT_DIR,
    ERROR_TYPE,
    GENERATED_HEADER,
    NARY_CAPTURE,
)
from ..errors import UsageError
from ..reflector.models import ImportSpec, InterfaceDescriptor, MethodDescriptor
from .gosyntax import align_pairs, import_block

logger = logging.getLogger(__name__)


# ── Aspect tag ───────────────────────────────────────────────────────


class Aspect(str, Enum):
    """Cross-cutting behaviors the generator can weave in."""

    LOGGING = "logging"
    TRACING = "tracing"

    @classmethod
    def parse(cls, value: Optional[str]) -> "Aspect":
        """Convert a user-supplied selector, raising UsageError when unknown."""
        if not value:
            raise UsageError("Please provide an aspect: " + ", ".join(a.value for a in cls))
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise UsageError(
                f"Unknown aspect: {value!r}. Supported: {', '.join(a.value for a in cls)}"
            ) from None


# ── Render options ───────────────────────────────────────────────────


@dataclass(frozen=True)
class RenderOptions:
    """Knobs shared by every strategy for one synthesis run."""

    output_package: str = DEFAULT_OUTPUT_DIR
    layer: str = DEFAULT_LAYER
    context_param: str = CONTEXT_PARAM
    error_type: str = ERROR_TYPE
    service_import: Optional[str] = None
    nary_policy: str = NARY_CAPTURE
    receiver: str = "m"


# ── Abstract Base Class ──────────────────────────────────────────────


class AspectStrategy(ABC):
    """Abstract base for aspect strategies.

    Subclasses describe their wrapper (type name, constructor name, label
    field) and implement ``render_method``. The preamble layout is shared:
    header, package clause, imports, constructor, wrapper struct.
    """

    # Names the rendered body declares or references besides the result bindings
    body_identifiers: FrozenSet[str] = frozenset()

    def __init__(self, options: Optional[RenderOptions] = None):
        self.options = options or RenderOptions()

    # ── Identity ─────────────────────────────────────────────────

    @property
    @abstractmethod
    def aspect(self) -> Aspect:
        ...

    @property
    @abstractmethod
    def unit_name(self) -> str:
        """Base name of the generated file, e.g. ``"log"``."""
        ...

    @property
    @abstractmethod
    def wrapper_type(self) -> str:
        """Name of the generated struct, e.g. ``"logMiddleware"``."""
        ...

    @property
    @abstractmethod
    def constructor_name(self) -> str:
        ...

    @property
    @abstractmethod
    def label_field(self) -> str:
        """Struct field holding the aspect label, e.g. ``"serviceName"``."""
        ...

    @property
    def file_name(self) -> str:
        return f"{self.unit_name}.go"

    # ── Rendering ────────────────────────────────────────────────

    @abstractmethod
    def aspect_imports(self, interface: InterfaceDescriptor) -> List[ImportSpec]:
        """Imports the generated bodies depend on."""
        ...

    @abstractmethod
    def render_method(self, method: MethodDescriptor) -> str:
        """Render the body of one wrapper method (without signature and braces)."""
        ...

    def render_preamble(self, interface: InterfaceDescriptor, label: str) -> str:
        """Render everything that precedes the wrapper methods."""
        service_type = f"{interface.package}.{interface.name}"
        parts = [f"{GENERATED_HEADER}\n", f"package {self.options.output_package}\n"]

        imports = self.collect_imports(interface)
        if imports:
            parts.append(import_block(imports))
        if not self.options.service_import:
            parts.append(f"// TODO: import the package declaring {service_type}\n")

        label_param = self.label_field
        literal = align_pairs(
            [("next", "service"), (self.label_field, label_param)], "\t\t", ":", ","
        )
        fields = align_pairs([("next", service_type), (self.label_field, "string")], "\t")

        parts.append(
            f"func {self.constructor_name}(service {service_type}, {label_param} string) {service_type} {{\n"
            f"\tif {label_param} == \"\" {{\n"
            f"\t\t{label_param} = {_go_string(label)}\n"
            f"\t}}\n"
            f"\treturn &{self.wrapper_type}{{\n"
            + "\n".join(literal)
            + "\n\t}\n}\n"
        )
        parts.append(f"type {self.wrapper_type} struct {{\n" + "\n".join(fields) + "\n}\n")
        return "\n".join(parts)

    def collect_imports(self, interface: InterfaceDescriptor) -> List[ImportSpec]:
        """Aspect imports, packages referenced by method types and the service package."""
        imports = list(self.aspect_imports(interface))

        for qualifier in interface.qualifiers:
            spec = interface.resolve_import(qualifier)
            if spec is not None:
                imports.append(spec)
            else:
                logger.warning(
                    f"No import in {interface.file_path} declares package {qualifier!r}; "
                    f"the generated unit will not import it"
                )

        if self.options.service_import:
            service_spec = ImportSpec(path=self.options.service_import)
            if service_spec.package_name != interface.package:
                service_spec = ImportSpec(path=self.options.service_import, alias=interface.package)
            imports.append(service_spec)

        return imports

    def receiver_field(self, name: str) -> str:
        return f"{self.options.receiver}.{name}"


def _go_string(value: str) -> str:
    """Quote a Python string as a Go interpreted string literal.

    JSON string escapes (``\\"``, ``\\\\``, ``\\n``, ``\\r``, ``\\t``,
    ``\\uXXXX``) are all valid in Go; non-ASCII text stays raw UTF-8.
    """
    return json.dumps(value, ensure_ascii=False)
