"""Distributed tracing aspect.

Opens an OpenTelemetry span named after the method around every call.
When the method takes the canonical context parameter first, the span
starts from it and the traced context is what the delegate receives;
otherwise the span starts from a fresh root context and the delegate
gets the original arguments.
"""

from typing import List

from ..reflector.models import ImportSpec, InterfaceDescriptor, MethodDescriptor
from .base import Aspect, AspectStrategy
from .bindings import call_statement, result_bindings, return_statement, takes_context

OTEL = ImportSpec(path="go.opentelemetry.io/otel")
CONTEXT = ImportSpec(path="context")


class TracingAspect(AspectStrategy):
    """Records a span for every delegated call."""

    body_identifiers = frozenset({"context", "otel", "span", "tracer"})

    @property
    def aspect(self) -> Aspect:
        return Aspect.TRACING

    @property
    def unit_name(self) -> str:
        return "trace"

    @property
    def wrapper_type(self) -> str:
        return "traceMiddleware"

    @property
    def constructor_name(self) -> str:
        return "NewTraceMiddleware"

    @property
    def label_field(self) -> str:
        return "tracerName"

    def aspect_imports(self, interface: InterfaceDescriptor) -> List[ImportSpec]:
        imports = [OTEL]
        ctx = self.options.context_param
        if any(not takes_context(method, ctx) for method in interface.methods):
            imports.append(CONTEXT)
        return imports

    def render_method(self, method: MethodDescriptor) -> str:
        opts = self.options
        bindings = result_bindings(method, opts.error_type)

        if takes_context(method, opts.context_param):
            start = f"{opts.context_param}, span := tracer.Start({opts.context_param}, \"{method.name}\")"
        else:
            start = f"_, span := tracer.Start(context.Background(), \"{method.name}\")"

        lines = [
            f"\ttracer := otel.Tracer({self.receiver_field(self.label_field)})",
            "",
            f"\t{start}",
            "\tdefer span.End()",
            "",
            "\t" + call_statement(method, bindings, opts.receiver),
        ]
        if bindings:
            lines += ["", "\t" + return_statement(bindings)]
        return "\n".join(lines) + "\n"
