"""
bowtie - Bow-tie risk diagrams from plain text

A Python library for rendering bow-tie diagrams: causes and their barriers
converging on a top event, and consequences with their own barriers
diverging from it.

Example:
    >>> from bowtie import SvgRenderer, generate
    >>> svg = generate('''
    ...     title Chemical spillage
    ...     event Spill
    ...     cause Valve failure
    ...     consequence Fire
    ...     barrier Inspection: Valve failure
    ... ''', SvgRenderer())

Debug Mode Example:
    >>> generator = BowtieGenerator()
    >>> svg = generator.generate(text, debug=True)
    >>> trace = generator.get_trace()
    >>> print(trace.summary())
"""

from .brush import Brush, LayoutConfig, LayoutContext, LayoutError, render_diagram
from .debug import NullRenderer, TracedRenderer
from .export import DiagramExporter
from .generator import BowtieGenerator, generate
from .graph import BarrierGraph
from .models import Component, ComponentKind, Diagram, Rectangle, Vector2
from .parser import Parser, parse_diagram
from .png_renderer import PNGRenderer
from .renderer import Alignment, Renderer, monospace_text_width
from .svg_renderer import SvgRenderer
from .tracer import DrawCall, PipelineStage, RenderTrace

__version__ = "0.1.0"

__all__ = [
    # Main API
    "BowtieGenerator",
    "generate",
    # Model
    "Diagram",
    "Component",
    "ComponentKind",
    "Vector2",
    "Rectangle",
    # Parser
    "Parser",
    "parse_diagram",
    # Layout
    "Brush",
    "LayoutConfig",
    "LayoutContext",
    "LayoutError",
    "BarrierGraph",
    "render_diagram",
    # Renderers
    "Renderer",
    "Alignment",
    "monospace_text_width",
    "SvgRenderer",
    "PNGRenderer",
    "DiagramExporter",
    # Debug/Tracing (for development and debugging)
    "RenderTrace",
    "DrawCall",
    "PipelineStage",
    "TracedRenderer",
    "NullRenderer",
]
