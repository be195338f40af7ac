"""
Main bow-tie generator module.

Combines parsing, layout, and rendering to produce bow-tie risk diagrams.
"""

import logging
from dataclasses import asdict, replace
from typing import Callable, Optional

from .brush import Brush, LayoutConfig
from .debug import TracedRenderer
from .export import DiagramExporter
from .parser import Parser
from .png_renderer import PNGRenderer
from .renderer import Renderer
from .svg_renderer import SvgRenderer
from .tracer import RenderTrace

logger = logging.getLogger(__name__)


class BowtieGenerator:
    """
    Generate bow-tie diagrams from the description language.

    Example:
        >>> generator = BowtieGenerator()
        >>> svg = generator.generate('''
        ...     title Chemical spillage
        ...     event Spill
        ...     cause Valve failure
        ...     consequence Fire
        ...     barrier Inspection: Valve failure
        ... ''')
    """

    def __init__(
        self,
        config: Optional[LayoutConfig] = None,
        text_width: Optional[Callable[[str], float]] = None,
    ):
        """
        Initialize the bow-tie generator.

        Args:
            config: Layout measurements (defaults to LayoutConfig())
            text_width: Optional callable measuring label widths, replacing
                the fixed-width heuristic (e.g. one backed by font metrics)
        """
        config = config or LayoutConfig()
        if text_width is not None:
            config = replace(config, text_width=text_width)
        self.config = config

        self.parser = Parser()
        self.exporter = DiagramExporter()
        self._trace: Optional[RenderTrace] = None

    def generate(
        self,
        input_text: str,
        renderer: Optional[Renderer] = None,
        debug: bool = False,
    ) -> bytes:
        """
        Generate a bow-tie diagram from input text.

        Args:
            input_text: Multi-line description-language text
            renderer: Drawing surface (defaults to a new SvgRenderer)
            debug: If True, record a RenderTrace available via get_trace()

        Returns:
            The renderer's output bytes

        Raises:
            LayoutError: If the parsed diagram cannot be laid out
        """
        if renderer is None:
            renderer = SvgRenderer()

        trace = None
        if debug:
            trace = RenderTrace(input_text=input_text)
            renderer = TracedRenderer(renderer, trace)
        self._trace = trace

        diagram = self.parser.parse(input_text)
        if trace is not None:
            trace.add_stage(
                "parse",
                {
                    "title": diagram.title,
                    "event": diagram.event,
                    "causes": [c.name for c in diagram.causes()],
                    "consequences": [c.name for c in diagram.consequences()],
                },
            )

        brush = Brush(diagram, self.config)
        output = brush.render(renderer)

        if trace is not None:
            trace.add_stage("layout", asdict(brush.context))
            trace.add_stage(
                "draw", {"calls": len(trace.draw_calls), "bytes": len(output)}
            )

        logger.debug("Rendered %r into %d bytes", diagram.title, len(output))
        return output

    def get_trace(self) -> Optional[RenderTrace]:
        """Return the trace of the last generate(debug=True) call."""
        return self._trace

    def save_svg(self, input_text: str, filename: str, **svg_kwargs) -> None:
        """
        Generate a bow-tie diagram and save it as an SVG file.

        Args:
            input_text: Multi-line description-language text
            filename: Output filename (should end in .svg)
            **svg_kwargs: Additional parameters for SvgRenderer
        """
        svg = self.generate(input_text, SvgRenderer(**svg_kwargs))
        self.exporter.save(svg, filename)

    def save_png(self, input_text: str, filename: str, **png_kwargs) -> None:
        """
        Generate a bow-tie diagram and save it as a PNG image.

        Args:
            input_text: Multi-line description-language text
            filename: Output filename (should end in .png)
            **png_kwargs: Additional parameters for PNGRenderer
                (font_size, font_path, scale, stroke_width)
        """
        png = self.generate(input_text, PNGRenderer(**png_kwargs))
        self.exporter.save(png, filename)

    def save(self, input_text: str, filename: str) -> None:
        """Generate a diagram and save it, picking the format from the suffix."""
        renderer = self.exporter.renderer_for(filename)
        self.exporter.save(self.generate(input_text, renderer), filename)


def generate(input_text: str, renderer: Renderer) -> bytes:
    """
    Generate a bow-tie diagram with default layout measurements.

    Args:
        input_text: Multi-line description-language text
        renderer: Drawing surface to drive

    Returns:
        The renderer's output bytes
    """
    return BowtieGenerator().generate(input_text, renderer)
