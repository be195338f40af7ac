"""Integration tests for complete bow-tie generation."""

import xml.etree.ElementTree as ET

import pytest

from bowtie import (
    BowtieGenerator,
    ComponentKind,
    PNGRenderer,
    SvgRenderer,
    generate,
)


def _on_line(point, start, end):
    """Check that point lies on the segment's line within float tolerance."""
    cross = (end.x - start.x) * (point.y - start.y) - (end.y - start.y) * (
        point.x - start.x
    )
    return cross == pytest.approx(0.0, abs=1e-6)


class TestLeakDiagram:
    """Tests for the smallest complete diagram."""

    def test_draw_sequence(self, render_trace, leak_input):
        """Test the exact order of draw calls."""
        trace, _ = render_trace(leak_input)
        assert trace.operations() == [
            "initialize",
            "draw_rectangle",
            "draw_text_with_rectangle",
            "draw_text_with_rectangle",
            "draw_circle",
            "draw_text",
            "draw_line",
            "draw_line",
            "draw_text",
            "draw_text",
            "draw_rectangle",
            "finalize",
        ]

    def test_labels(self, render_trace, leak_input):
        """Test the box labels, event label and barrier label."""
        trace, _ = render_trace(leak_input)
        assert trace.get_texts() == [
            "Valve failure",
            "Fire",
            "Leak",
            "1",
            "[1] Inspection",
        ]

    def test_title_is_not_drawn(self, render_trace, leak_input):
        """Test that the title never reaches the renderer."""
        trace, _ = render_trace(leak_input)
        assert "T" not in trace.get_texts()

    def test_interception_sits_on_connector(self, render_trace, leak_input):
        """Test that the interception rectangle is centred on the cause line."""
        trace, brush = render_trace(leak_input)
        cause_line = trace.get_calls("draw_line")[0]
        interception = trace.get_calls("draw_rectangle")[1].args[0]

        assert interception.centre.x == pytest.approx(
            brush.barrier_x_center(0, ComponentKind.CAUSE)
        )
        assert _on_line(interception.centre, *cause_line.args)


class TestLaneShapes:
    """Tests for diagrams with uneven lanes."""

    def test_causes_only(self, render_trace):
        """Test that a diagram with no consequences still renders."""
        trace, brush = render_trace("event Leak\ncause A\ncause B")
        assert len(trace.get_calls("draw_line")) == 2
        assert brush.context.consequences_container_height == 0

    def test_consequences_only(self, render_trace):
        """Test that a diagram with no causes still renders."""
        trace, _ = render_trace("event Leak\nconsequence Fire\nbarrier Alarm: Fire")
        assert "Alarm [1]" in trace.get_texts()

    def test_shared_barrier_intercepts_every_target(
        self, render_trace, two_cause_input
    ):
        """Test one interception per (barrier, component) pair."""
        trace, _ = render_trace(two_cause_input)
        lines = [call.args for call in trace.get_calls("draw_line")]
        interceptions = [
            call.args[0] for call in trace.get_calls("draw_rectangle")[1:]
        ]

        assert len(interceptions) == 2
        for rect in interceptions:
            assert any(_on_line(rect.centre, *line) for line in lines)

    def test_interceptions_are_inside_canvas(self, render_trace, spillage_input):
        """Test that every interception lies between the boxes and the circle."""
        trace, brush = render_trace(spillage_input)
        ctx = brush.context
        for call in trace.get_calls("draw_rectangle")[1:]:
            centre = call.args[0].centre
            assert ctx.max_component_box_width < centre.x
            assert centre.x < ctx.canvas_width - ctx.max_component_box_width
            assert 0 < centre.y < ctx.canvas_height


class TestSvgOutput:
    """Tests for complete SVG documents."""

    def test_svg_contains_labels(self, spillage_input):
        """Test that every label ends up as SVG text."""
        root = ET.fromstring(generate(spillage_input, SvgRenderer()))
        texts = [el.text for el in root.iter() if el.tag.endswith("text")]
        for label in [
            "Valve failure",
            "Toxic fumes",
            "Spill",
            "[1] Inspection",
            "Gas detection [3]",
        ]:
            assert label in texts

    def test_svg_shape_counts(self, leak_input):
        """Test the number of SVG shapes for the smallest diagram."""
        root = ET.fromstring(generate(leak_input, SvgRenderer()))
        tags = [el.tag.rsplit("}", 1)[-1] for el in root.iter()]
        assert tags.count("circle") == 1
        # drawsvg writes lines as paths
        assert tags.count("path") == 2
        # border, two component boxes, one interception
        assert tags.count("rect") == 4


class TestPngOutput:
    """Tests for complete PNG images."""

    def test_png_signature(self, spillage_input):
        """Test that the PNG backend produces a PNG file."""
        png = generate(spillage_input, PNGRenderer(scale=1))
        assert png.startswith(b"\x89PNG\r\n\x1a\n")


class TestExampleDiagrams:
    """Tests mirroring the bundled examples."""

    @pytest.mark.parametrize("suffix", [".svg", ".png"])
    def test_save_example(self, spillage_input, tmp_path, suffix):
        """Test saving a realistic diagram in each supported format."""
        path = tmp_path / f"spillage{suffix}"
        BowtieGenerator().save(spillage_input, str(path))
        assert path.stat().st_size > 0

    def test_debug_trace_counts(self, spillage_input):
        """Test the summary of a traced realistic render."""
        generator = BowtieGenerator()
        generator.generate(spillage_input, debug=True)
        summary = generator.get_trace().summary()
        # border plus one interception per barrier target
        assert "draw_rectangle: 8" in summary
        assert "draw_line: 5" in summary
