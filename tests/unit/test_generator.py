"""Unit tests for the generator module."""

import xml.etree.ElementTree as ET

import pytest

from bowtie import BowtieGenerator, LayoutConfig, LayoutError, generate
from bowtie.debug import NullRenderer
from bowtie.png_renderer import PNGRenderer
from bowtie.svg_renderer import SvgRenderer


class TestBowtieGenerator:
    """Tests for BowtieGenerator class."""

    def test_default_renderer_is_svg(self, generator, leak_input):
        """Test that generate() produces SVG when no renderer is given."""
        root = ET.fromstring(generator.generate(leak_input))
        assert root.tag.endswith("svg")

    def test_uses_given_renderer(self, generator, leak_input):
        """Test that the output comes from the supplied renderer."""
        assert generator.generate(leak_input, NullRenderer()) == b""

    def test_text_width_override(self, leak_input):
        """Test that a text width callable replaces the heuristic."""
        default = BowtieGenerator()
        narrow = BowtieGenerator(text_width=lambda text: len(text) * 5.0)
        default.generate(leak_input, debug=True)
        narrow.generate(leak_input, debug=True)
        default_width = default.get_trace().get_stage("layout").data["canvas_width"]
        narrow_width = narrow.get_trace().get_stage("layout").data["canvas_width"]
        assert narrow_width < default_width

    def test_config_is_kept(self):
        """Test that a custom config is used as given."""
        config = LayoutConfig(component_height=30.0)
        assert BowtieGenerator(config=config).config is config

    def test_layout_error_propagates(self, generator):
        """Test that layout errors reach the caller."""
        with pytest.raises(LayoutError):
            generator.generate("title Empty\nevent Leak")

    def test_no_trace_without_debug(self, generator, leak_input):
        """Test that tracing is off by default."""
        generator.generate(leak_input)
        assert generator.get_trace() is None

    def test_debug_trace(self, generator, leak_input):
        """Test the stages and calls recorded in debug mode."""
        output = generator.generate(leak_input, debug=True)
        trace = generator.get_trace()

        assert [stage.name for stage in trace.stages] == ["parse", "layout", "draw"]
        assert trace.input_text == leak_input
        assert trace.get_stage("parse").data["causes"] == ["Valve failure"]
        assert trace.get_stage("layout").data["event_radius"] == 30
        assert trace.get_stage("draw").data["bytes"] == len(output)
        assert len(trace.get_calls("draw_line")) == 2

    def test_trace_reset_between_runs(self, generator, leak_input):
        """Test that a later non-debug run clears the previous trace."""
        generator.generate(leak_input, debug=True)
        generator.generate(leak_input)
        assert generator.get_trace() is None

    def test_save_svg(self, generator, leak_input, tmp_path):
        """Test saving an SVG file."""
        path = tmp_path / "leak.svg"
        generator.save_svg(leak_input, str(path))
        assert ET.parse(path).getroot().tag.endswith("svg")

    def test_save_png(self, generator, leak_input, tmp_path):
        """Test saving a PNG file with renderer options."""
        path = tmp_path / "leak.png"
        generator.save_png(leak_input, str(path), scale=1)
        assert path.read_bytes().startswith(b"\x89PNG")

    def test_save_picks_format_from_suffix(self, generator, leak_input, tmp_path):
        """Test that save() chooses the renderer by file suffix."""
        svg_path = tmp_path / "leak.svg"
        png_path = tmp_path / "leak.png"
        generator.save(leak_input, str(svg_path))
        generator.save(leak_input, str(png_path))
        assert b"<svg" in svg_path.read_bytes()
        assert png_path.read_bytes().startswith(b"\x89PNG")

    def test_save_unsupported_suffix(self, generator, leak_input, tmp_path):
        """Test that an unknown suffix is rejected before rendering."""
        with pytest.raises(ValueError, match="Unsupported output format"):
            generator.save(leak_input, str(tmp_path / "leak.txt"))


class TestGenerateFunction:
    """Tests for the generate convenience function."""

    def test_generate_svg(self, leak_input):
        """Test the public entry point with the SVG backend."""
        assert b"Valve failure" in generate(leak_input, SvgRenderer())

    def test_generate_png(self, leak_input):
        """Test the public entry point with the PNG backend."""
        assert generate(leak_input, PNGRenderer(scale=1)).startswith(b"\x89PNG")

    def test_generate_is_deterministic(self, spillage_input):
        """Test that identical input renders identical bytes."""
        first = generate(spillage_input, SvgRenderer())
        second = generate(spillage_input, SvgRenderer())
        assert first == second
