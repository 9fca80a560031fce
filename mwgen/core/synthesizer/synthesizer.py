"""Wrapper synthesis.

Drives an aspect strategy over a reflected interface and concatenates
the preamble and one wrapper method per interface method into a single
GeneratedUnit. Output is a pure function of its inputs.
"""

import logging
import os
from dataclasses import replace
from typing import List, Optional

from ..aspects import Aspect, AspectRegistry, AspectStrategy, RenderOptions
from ..aspects.bindings import rename_parameters, result_bindings
from ..aspects.gosyntax import parameter_list, qualify_method, result_list
from ..config import GeneratorConfig
from ..constants import NARY_REJECT
from ..errors import UnsupportedShape
from ..reflector import InterfaceDescriptor, MethodDescriptor, reflect, resolve_import_path
from .models import GeneratedUnit

logger = logging.getLogger(__name__)

_RECEIVER_CANDIDATES = ("m", "mw", "wrapper", "middleware")


class Synthesizer:
    """Assembles generated units from interface descriptors."""

    def __init__(self, options: Optional[RenderOptions] = None):
        self._options = options or RenderOptions()

    def synthesize(self, interface: InterfaceDescriptor, aspect: Aspect, label: str) -> GeneratedUnit:
        """Render the complete wrapper unit for ``interface``.

        Args:
            interface: Reflected interface, methods in declaration order
            aspect: Which aspect strategy to weave in
            label: Aspect label baked into the constructor default

        Returns:
            GeneratedUnit holding the full source text

        Raises:
            UnsupportedShape: If a method returns more than two values and
                the 'reject' policy is configured
        """
        self._check_arity(interface)

        strategy = AspectRegistry.create(aspect, self._options)
        methods = [self._prepare_method(strategy, interface.package, m) for m in interface.methods]
        options = replace(self._options, receiver=pick_receiver(methods))
        strategy.options = options

        parts = [strategy.render_preamble(replace(interface, methods=methods), label)]
        for method in methods:
            parts.append(self._render_method(strategy, method))

        unit = GeneratedUnit(
            aspect=aspect,
            interface_name=interface.name,
            file_name=strategy.file_name,
            package=options.output_package,
            method_names=tuple(m.name for m in interface.methods),
            source="\n".join(parts),
        )
        logger.info(
            f"Synthesized {unit.file_name} for {interface.package}.{interface.name} "
            f"({len(unit.method_names)} methods, aspect={aspect.value})"
        )
        return unit

    def _prepare_method(
        self, strategy: AspectStrategy, package: str, method: MethodDescriptor
    ) -> MethodDescriptor:
        """Qualify package-local types and free the names the body declares."""
        reserved = set(strategy.body_identifiers)
        reserved.update(result_bindings(method, strategy.options.error_type))
        return rename_parameters(qualify_method(method, package), reserved)

    def _render_method(self, strategy: AspectStrategy, method: MethodDescriptor) -> str:
        receiver = strategy.options.receiver
        results = result_list(method)
        signature = f"func ({receiver} *{strategy.wrapper_type}) {method.name}({parameter_list(method)})"
        if results:
            signature += f" {results}"
        return f"{signature} {{\n{strategy.render_method(method)}}}\n"

    def _check_arity(self, interface: InterfaceDescriptor) -> None:
        for method in interface.methods:
            if method.arity <= 2:
                continue
            if self._options.nary_policy == NARY_REJECT:
                raise UnsupportedShape(interface.name, method.name, method.arity)
            logger.warning(
                f"{interface.name}.{method.name} returns {method.arity} values; "
                f"capturing all of them"
            )


def pick_receiver(methods: List[MethodDescriptor]) -> str:
    """Choose a receiver name no parameter shadows."""
    taken = {p.name for method in methods for p in method.parameters}
    for candidate in _RECEIVER_CANDIDATES:
        if candidate not in taken:
            return candidate
    index = 0
    while f"m{index}" in taken:
        index += 1
    return f"m{index}"


def synthesize(
    interface: InterfaceDescriptor,
    aspect: Aspect,
    label: str,
    options: Optional[RenderOptions] = None,
) -> GeneratedUnit:
    """Convenience wrapper around Synthesizer.synthesize."""
    return Synthesizer(options).synthesize(interface, aspect, label)


def render_options(config: GeneratorConfig, service_import: Optional[str] = None) -> RenderOptions:
    """Translate a GeneratorConfig into strategy render options."""
    return RenderOptions(
        output_package=config.output_package,
        layer=config.layer,
        context_param=config.context_param,
        error_type=config.error_type,
        service_import=service_import,
        nary_policy=config.nary_policy,
    )


def generate(
    module_dir: str,
    interface_name: str,
    aspect: Aspect,
    config: Optional[GeneratorConfig] = None,
) -> GeneratedUnit:
    """Reflect ``interface_name`` from ``module_dir`` and synthesize its wrapper.

    The service package import path comes from the config when set,
    otherwise from the nearest go.mod.
    """
    config = config or GeneratorConfig()
    interface = reflect(module_dir, interface_name)

    service_import = config.service_import or resolve_import_path(os.path.abspath(module_dir))
    if service_import:
        logger.debug(f"Service package import path: {service_import}")

    label = config.label or interface_name
    return synthesize(interface, aspect, label, render_options(config, service_import))
