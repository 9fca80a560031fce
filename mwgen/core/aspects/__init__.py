"""Aspect strategies — cross-cutting behaviors woven around delegated calls.

Public API:
    Aspect            — enumerated aspect tag
    AspectStrategy    — base class (render_preamble, render_method)
    AspectRegistry    — tag → strategy lookup
    LoggingAspect     — logrus request/response events
    TracingAspect     — OpenTelemetry spans
"""

from .base import Aspect, AspectStrategy, RenderOptions
from .logging_aspect import LoggingAspect
from .registry import AspectRegistry
from .tracing_aspect import TracingAspect

AspectRegistry.register(LoggingAspect)
AspectRegistry.register(TracingAspect)

__all__ = [
    "Aspect",
    "AspectStrategy",
    "AspectRegistry",
    "RenderOptions",
    "LoggingAspect",
    "TracingAspect",
]
