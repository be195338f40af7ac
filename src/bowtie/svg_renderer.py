"""
SVG renderer for bow-tie diagrams.

Implements the Renderer protocol on top of drawsvg. The drawing is kept in
memory until finalize() serializes it.
"""

from typing import Optional

import drawsvg as draw

from .models import Rectangle, Vector2
from .renderer import Alignment, aligned_x

FONT_FAMILY = "Courier, monospace"
FONT_SIZE = 18
DEFAULT_BG_FILL = "white"
STROKE_COLOR = "black"

_TEXT_ANCHORS = {
    Alignment.CENTER: "middle",
    Alignment.LEFT: "start",
    Alignment.RIGHT: "end",
}


class SvgRenderer:
    """
    Renders draw calls into an SVG document.

    Example:
        >>> renderer = SvgRenderer()
        >>> svg_bytes = generate(text, renderer)
    """

    def __init__(
        self,
        stroke_width: float = 3,
        font_size: int = FONT_SIZE,
        font_family: str = FONT_FAMILY,
        fill: str = DEFAULT_BG_FILL,
        stroke: str = STROKE_COLOR,
    ):
        self.stroke_width = stroke_width
        self.font_size = font_size
        self.font_family = font_family
        self.fill = fill
        self.stroke = stroke
        self.drawing: Optional[draw.Drawing] = None

    def initialize(self, width: float, height: float) -> "SvgRenderer":
        self.drawing = draw.Drawing(width, height)
        return self

    def _append(self, element) -> "SvgRenderer":
        if self.drawing is None:
            raise RuntimeError("initialize() must be called before drawing")
        self.drawing.append(element)
        return self

    def draw_line(self, start: Vector2, end: Vector2) -> "SvgRenderer":
        return self._append(
            draw.Line(
                start.x,
                start.y,
                end.x,
                end.y,
                fill="none",
                stroke=self.stroke,
                stroke_width=self.stroke_width,
            )
        )

    def draw_circle(self, radius: float, centre: Vector2) -> "SvgRenderer":
        return self._append(
            draw.Circle(
                centre.x,
                centre.y,
                radius,
                fill=self.fill,
                stroke=self.stroke,
                stroke_width=self.stroke_width,
            )
        )

    def draw_text(
        self, text: str, rect: Rectangle, alignment: Alignment
    ) -> "SvgRenderer":
        return self._append(
            draw.Text(
                text,
                self.font_size,
                aligned_x(rect, alignment),
                rect.centre.y,
                fill=self.stroke,
                font_family=self.font_family,
                text_anchor=_TEXT_ANCHORS[alignment],
                dominant_baseline="middle",
            )
        )

    def draw_rectangle(self, rect: Rectangle) -> "SvgRenderer":
        top_left = rect.top_left
        return self._append(
            draw.Rectangle(
                top_left.x,
                top_left.y,
                rect.width,
                rect.height,
                fill=self.fill,
                stroke=self.stroke,
                stroke_width=self.stroke_width,
            )
        )

    def draw_text_with_rectangle(
        self, text: str, rect: Rectangle, alignment: Alignment
    ) -> "SvgRenderer":
        self.draw_rectangle(rect.with_padding(2.0))
        return self.draw_text(text, rect, alignment)

    def finalize(self) -> bytes:
        if self.drawing is None:
            raise RuntimeError("initialize() must be called before finalize()")
        return self.drawing.as_svg().encode("utf-8")
