"""
File export functionality for bow-tie diagrams.

Writes rendered diagrams to disk and picks a renderer from a file suffix:
- SVG files (.svg) - Vector output for embedding in documents
- PNG images (.png) - Rasterized output
"""

from pathlib import Path

from .png_renderer import PNGRenderer
from .renderer import Renderer
from .svg_renderer import SvgRenderer

RENDERERS = {
    ".svg": SvgRenderer,
    ".png": PNGRenderer,
}


class DiagramExporter:
    """Writes rendered diagrams to files."""

    def renderer_for(self, filename: str, **kwargs) -> Renderer:
        """
        Create the renderer matching a filename's suffix.

        Args:
            filename: Output filename ending in .svg or .png.
            **kwargs: Parameters for the renderer constructor.

        Raises:
            ValueError: If the suffix is not supported.
        """
        suffix = Path(filename).suffix.lower()
        if suffix not in RENDERERS:
            supported = ", ".join(sorted(RENDERERS))
            raise ValueError(
                f"Unsupported output format '{suffix}' (expected one of: {supported})"
            )
        return RENDERERS[suffix](**kwargs)

    def save(self, data: bytes, filename: str) -> Path:
        """
        Save rendered bytes to a file.

        Args:
            data: Output of a renderer's finalize().
            filename: Output filename.

        Returns:
            The written path.
        """
        output_path = Path(filename)
        output_path.write_bytes(data)
        return output_path
