"""
Debug utilities for bowtie.

This module provides tools for understanding and troubleshooting diagram
rendering. The main component is TracedRenderer, which wraps any renderer
and logs every call made on it.

Key Components:
- TracedRenderer: Renderer wrapper that records all draw calls
- NullRenderer: Renderer that draws nothing, for layout-only runs

Usage:
    # TracedRenderer is used internally by BowtieGenerator when debug=True
    >>> generator = BowtieGenerator()
    >>> generator.generate(text, debug=True)
    >>> trace = generator.get_trace()

    # Recording draw calls without producing an image:
    >>> trace = RenderTrace()
    >>> generate(text, TracedRenderer(NullRenderer(), trace))
    >>> trace.get_calls("draw_line")
"""

from .models import Rectangle, Vector2
from .renderer import Alignment, Renderer
from .tracer import RenderTrace


class NullRenderer:
    """Renderer that accepts every call and produces empty output."""

    def initialize(self, width: float, height: float) -> "NullRenderer":
        return self

    def draw_line(self, start: Vector2, end: Vector2) -> "NullRenderer":
        return self

    def draw_circle(self, radius: float, centre: Vector2) -> "NullRenderer":
        return self

    def draw_text(
        self, text: str, rect: Rectangle, alignment: Alignment
    ) -> "NullRenderer":
        return self

    def draw_rectangle(self, rect: Rectangle) -> "NullRenderer":
        return self

    def draw_text_with_rectangle(
        self, text: str, rect: Rectangle, alignment: Alignment
    ) -> "NullRenderer":
        return self

    def finalize(self) -> bytes:
        return b""


class TracedRenderer:
    """
    Renderer wrapper that logs all draw calls to a RenderTrace.

    Calls are forwarded to the wrapped renderer. When the wrapped renderer
    returns a different object (a value-threaded renderer), later calls go
    to that object.

    Example:
        >>> from bowtie.svg_renderer import SvgRenderer
        >>> trace = RenderTrace()
        >>> traced = TracedRenderer(SvgRenderer(), trace)
        >>> svg = generate(text, traced)
        >>> print(trace.draw_calls[0])
    """

    def __init__(self, renderer: Renderer, trace: RenderTrace):
        """
        Initialize a TracedRenderer.

        Args:
            renderer: The underlying renderer to wrap
            trace: The RenderTrace to record calls to
        """
        self._renderer = renderer
        self._trace = trace

    @property
    def trace(self) -> RenderTrace:
        return self._trace

    def initialize(self, width: float, height: float) -> "TracedRenderer":
        self._trace.add_call("initialize", width, height)
        self._renderer = self._renderer.initialize(width, height)
        return self

    def draw_line(self, start: Vector2, end: Vector2) -> "TracedRenderer":
        self._trace.add_call("draw_line", start, end)
        self._renderer = self._renderer.draw_line(start, end)
        return self

    def draw_circle(self, radius: float, centre: Vector2) -> "TracedRenderer":
        self._trace.add_call("draw_circle", radius, centre)
        self._renderer = self._renderer.draw_circle(radius, centre)
        return self

    def draw_text(
        self, text: str, rect: Rectangle, alignment: Alignment
    ) -> "TracedRenderer":
        self._trace.add_call("draw_text", text, rect, alignment)
        self._renderer = self._renderer.draw_text(text, rect, alignment)
        return self

    def draw_rectangle(self, rect: Rectangle) -> "TracedRenderer":
        self._trace.add_call("draw_rectangle", rect)
        self._renderer = self._renderer.draw_rectangle(rect)
        return self

    def draw_text_with_rectangle(
        self, text: str, rect: Rectangle, alignment: Alignment
    ) -> "TracedRenderer":
        self._trace.add_call("draw_text_with_rectangle", text, rect, alignment)
        self._renderer = self._renderer.draw_text_with_rectangle(text, rect, alignment)
        return self

    def finalize(self) -> bytes:
        self._trace.add_call("finalize")
        return self._renderer.finalize()
