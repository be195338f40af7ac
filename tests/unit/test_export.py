"""Unit tests for the export module."""

import pytest

from bowtie.export import DiagramExporter
from bowtie.png_renderer import PNGRenderer
from bowtie.svg_renderer import SvgRenderer


class TestDiagramExporter:
    """Tests for DiagramExporter class."""

    def test_renderer_for_svg(self):
        """Test that .svg maps to the SVG renderer."""
        assert isinstance(DiagramExporter().renderer_for("out.svg"), SvgRenderer)

    def test_renderer_for_png_is_case_insensitive(self):
        """Test that suffix matching ignores case and passes options."""
        renderer = DiagramExporter().renderer_for("OUT.PNG", scale=3)
        assert isinstance(renderer, PNGRenderer)
        assert renderer.scale == 3

    def test_renderer_for_unknown_suffix(self):
        """Test that unsupported suffixes raise ValueError."""
        with pytest.raises(ValueError, match=r"\.png, \.svg"):
            DiagramExporter().renderer_for("out.pdf")

    def test_save(self, tmp_path):
        """Test that bytes are written unchanged."""
        path = DiagramExporter().save(b"<svg/>", str(tmp_path / "out.svg"))
        assert path.read_bytes() == b"<svg/>"
