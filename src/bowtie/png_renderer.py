"""
PNG Renderer module for bow-tie generation.

Rasterises the layout engine's draw calls into a high-resolution PNG image
with Pillow.
"""

import io
import math
import os
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from .models import Rectangle, Vector2
from .renderer import Alignment


class PNGRenderer:
    """Renders bow-tie diagrams as PNG images."""

    def __init__(
        self,
        font_size: int = 14,
        font_path: Optional[str] = None,  # Custom font path
        scale: int = 2,  # For high-resolution output
        stroke_width: int = 3,
    ):
        self.font_size = font_size
        self.font_path = font_path
        self.scale = scale
        self.stroke_width = stroke_width

        # Colors
        self.bg_color = (255, 255, 255)
        self.box_fill = (255, 255, 255)
        self.outline_color = (0, 0, 0)
        self.text_color = (0, 0, 0)
        self.line_color = (0, 0, 0)

        self.image: Optional[Image.Image] = None
        self.draw: Optional[ImageDraw.ImageDraw] = None
        self.font = None

    def _get_font(self) -> ImageFont.ImageFont:
        """Get a font for rendering text."""
        if self.font is not None:
            return self.font

        font_size = self.font_size * self.scale

        # Use custom font if provided
        if self.font_path and os.path.exists(self.font_path):
            try:
                self.font = ImageFont.truetype(self.font_path, font_size)
                return self.font
            except OSError:
                pass  # Fall through to default fonts

        # Try to load a monospace font from system
        font_options = [
            "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
            "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
            "/usr/share/fonts/truetype/freefont/FreeMono.ttf",
            "/usr/share/fonts/truetype/ubuntu/UbuntuMono-R.ttf",
            "/System/Library/Fonts/Menlo.ttc",
            "C:/Windows/Fonts/consola.ttf",
        ]

        for path in font_options:
            if os.path.exists(path):
                try:
                    self.font = ImageFont.truetype(path, font_size)
                    return self.font
                except OSError:
                    continue

        # Fall back to Pillow's default font
        self.font = ImageFont.load_default(size=font_size)
        return self.font

    def _px(self, value: float) -> float:
        return value * self.scale

    def _point(self, point: Vector2) -> Tuple[float, float]:
        return (self._px(point.x), self._px(point.y))

    def _box(self, rect: Rectangle) -> Tuple[float, float, float, float]:
        return (
            self._px(rect.left),
            self._px(rect.top),
            self._px(rect.right),
            self._px(rect.bottom),
        )

    def _canvas(self) -> ImageDraw.ImageDraw:
        if self.draw is None:
            raise RuntimeError("initialize() must be called before drawing")
        return self.draw

    def initialize(self, width: float, height: float) -> "PNGRenderer":
        img_width = max(1, math.ceil(self._px(width)))
        img_height = max(1, math.ceil(self._px(height)))
        self.image = Image.new("RGB", (img_width, img_height), self.bg_color)
        self.draw = ImageDraw.Draw(self.image)
        return self

    def draw_line(self, start: Vector2, end: Vector2) -> "PNGRenderer":
        self._canvas().line(
            [self._point(start), self._point(end)],
            fill=self.line_color,
            width=self.stroke_width * self.scale,
        )
        return self

    def draw_circle(self, radius: float, centre: Vector2) -> "PNGRenderer":
        cx, cy = self._point(centre)
        r = self._px(radius)
        self._canvas().ellipse(
            [cx - r, cy - r, cx + r, cy + r],
            fill=self.box_fill,
            outline=self.outline_color,
            width=self.stroke_width * self.scale,
        )
        return self

    def draw_text(
        self, text: str, rect: Rectangle, alignment: Alignment
    ) -> "PNGRenderer":
        canvas = self._canvas()
        font = self._get_font()
        bbox = canvas.textbbox((0, 0), text, font=font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]

        left, top, right, bottom = self._box(rect)
        if alignment == Alignment.LEFT:
            x = left
        elif alignment == Alignment.RIGHT:
            x = right - text_width
        else:
            x = (left + right - text_width) / 2
        y = (top + bottom - text_height) / 2

        # textbbox offsets are relative to the drawing origin
        canvas.text((x - bbox[0], y - bbox[1]), text, font=font, fill=self.text_color)
        return self

    def draw_rectangle(self, rect: Rectangle) -> "PNGRenderer":
        self._canvas().rectangle(
            self._box(rect),
            fill=self.box_fill,
            outline=self.outline_color,
            width=self.stroke_width * self.scale,
        )
        return self

    def draw_text_with_rectangle(
        self, text: str, rect: Rectangle, alignment: Alignment
    ) -> "PNGRenderer":
        self.draw_rectangle(rect.with_padding(2.0))
        return self.draw_text(text, rect, alignment)

    def finalize(self) -> bytes:
        if self.image is None:
            raise RuntimeError("initialize() must be called before finalize()")
        buffer = io.BytesIO()
        self.image.save(buffer, "PNG")
        return buffer.getvalue()
