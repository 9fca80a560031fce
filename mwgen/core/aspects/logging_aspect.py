"""Structured logging aspect.

Wraps every call in a "service-request" / "service-response" pair of
logrus events carrying the service label, method, layer tag, the call's
non-context arguments and its results.
"""

from typing import List, Sequence, Tuple

from ..reflector.models import ImportSpec, InterfaceDescriptor, MethodDescriptor
from .base import Aspect, AspectStrategy
from .bindings import call_statement, result_bindings, return_statement, takes_context
from .gosyntax import align_pairs

LOGRUS = ImportSpec(path="github.com/sirupsen/logrus", alias="log")

REQUEST_EVENT = "service-request"
RESPONSE_EVENT = "service-response"

_BASE_KEYS = ("service", "method", "layer")


class LoggingAspect(AspectStrategy):
    """Logs the arguments and results of every delegated call."""

    body_identifiers = frozenset({"log"})

    @property
    def aspect(self) -> Aspect:
        return Aspect.LOGGING

    @property
    def unit_name(self) -> str:
        return "log"

    @property
    def wrapper_type(self) -> str:
        return "logMiddleware"

    @property
    def constructor_name(self) -> str:
        return "NewLogMiddleware"

    @property
    def label_field(self) -> str:
        return "serviceName"

    def aspect_imports(self, interface: InterfaceDescriptor) -> List[ImportSpec]:
        return [LOGRUS]

    def render_method(self, method: MethodDescriptor) -> str:
        opts = self.options
        bindings = result_bindings(method, opts.error_type)

        base = [
            ('"service"', self.receiver_field(self.label_field)),
            ('"method"', f'"{method.name}"'),
            ('"layer"', f'"{opts.layer}"'),
        ]
        request = base + [
            (_field_key(p.name), p.name)
            for p in method.parameters
            if p.name != opts.context_param
        ]
        response = base + [(f'"{name}"', name) for name in bindings]

        if takes_context(method, opts.context_param):
            entry = f"log.WithContext({opts.context_param}).WithFields"
        else:
            entry = "log.WithFields"

        lines = self._event(entry, request, REQUEST_EVENT)
        lines += ["", "\t" + call_statement(method, bindings, opts.receiver), ""]
        lines += self._event(entry, response, RESPONSE_EVENT)
        if bindings:
            lines += ["", "\t" + return_statement(bindings)]
        return "\n".join(lines) + "\n"

    @staticmethod
    def _event(entry: str, fields: Sequence[Tuple[str, str]], message: str) -> List[str]:
        return (
            [f"\t{entry}(log.Fields{{"]
            + align_pairs(fields, "\t\t", ":", ",")
            + [f'\t}}).Info("{message}")']
        )


def _field_key(param_name: str) -> str:
    """Log field key for a parameter; prefixed when it would shadow a fixed key."""
    if param_name in _BASE_KEYS:
        return f'"param.{param_name}"'
    return f'"{param_name}"'
