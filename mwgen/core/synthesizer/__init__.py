"""mwgen Synthesizer — turns reflected interfaces into wrapper source.

Public API:
    synthesize(interface, aspect, label, options) → GeneratedUnit
    generate(module_dir, interface_name, aspect, config) → GeneratedUnit
    write_unit(unit, output_dir) → Path
"""

from .models import GeneratedUnit
from .synthesizer import Synthesizer, generate, pick_receiver, render_options, synthesize
from .writer import write_unit

__all__ = [
    "GeneratedUnit",
    "Synthesizer",
    "generate",
    "pick_receiver",
    "render_options",
    "synthesize",
    "write_unit",
]
