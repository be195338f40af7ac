"""
Rendering capability consumed by the layout engine.

The layout engine never produces image bytes itself. It drives any object
implementing the Renderer protocol below, one draw call at a time, and asks
it to finalize the result. Backends live in svg_renderer and png_renderer.
"""

from enum import Enum
from typing import Protocol, TypeVar

from .models import Rectangle, Vector2

# Width of one character for the fixed-width text heuristic
CHAR_WIDTH = 15.0

R = TypeVar("R", bound="Renderer")


class Alignment(Enum):
    """Horizontal placement of text inside its bounding rectangle."""

    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"


class Renderer(Protocol):
    """
    Protocol for drawing surfaces driven by the layout engine.

    Every draw method returns the renderer the next call must be made on.
    Mutable surfaces return ``self``; value-threaded ones may return a new
    object. Call order is significant since later shapes paint over
    earlier ones.
    """

    def initialize(self: R, width: float, height: float) -> R:
        """Start a new canvas of the given size."""
        ...

    def draw_line(self: R, start: Vector2, end: Vector2) -> R:
        """Draw a straight line between two points."""
        ...

    def draw_circle(self: R, radius: float, centre: Vector2) -> R:
        """Draw a circle."""
        ...

    def draw_text(self: R, text: str, rect: Rectangle, alignment: Alignment) -> R:
        """Draw text inside a bounding rectangle."""
        ...

    def draw_rectangle(self: R, rect: Rectangle) -> R:
        """Draw a rectangle outline."""
        ...

    def draw_text_with_rectangle(
        self: R, text: str, rect: Rectangle, alignment: Alignment
    ) -> R:
        """Draw a rectangle with a text label inside it."""
        ...

    def finalize(self) -> bytes:
        """Serialize everything drawn so far."""
        ...


def monospace_text_width(text: str, char_width: float = CHAR_WIDTH) -> float:
    """
    Estimate the rendered width of text assuming a fixed-width font.

    This is the default sizing heuristic of the layout engine. Backends with
    real font metrics can hand the engine their own callable instead.
    """
    return len(text) * char_width


def aligned_x(rect: Rectangle, alignment: Alignment) -> float:
    """Return the anchor x coordinate for text placed with ``alignment``."""
    if alignment == Alignment.LEFT:
        return rect.left
    if alignment == Alignment.RIGHT:
        return rect.right
    return rect.centre.x
