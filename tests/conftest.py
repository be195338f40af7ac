"""Pytest configuration and shared fixtures for bowtie tests."""

import pytest

from bowtie import BowtieGenerator, Brush, Parser, parse_diagram
from bowtie.debug import NullRenderer, TracedRenderer
from bowtie.tracer import RenderTrace


@pytest.fixture
def leak_input():
    """Smallest complete diagram: one cause, one consequence, one barrier."""
    return """
    title T
    event Leak
    cause Valve failure
    consequence Fire
    barrier Inspection: Valve failure
    """


@pytest.fixture
def two_cause_input():
    """Two causes sharing a barrier, so connectors are not horizontal."""
    return """
    title Two causes
    event Leak
    cause A
    cause B
    consequence Fire
    barrier Shared: A, B
    """


@pytest.fixture
def spillage_input():
    """Realistic diagram with barriers on both sides."""
    return """
    title Chemical spillage
    event Spill
    cause Valve failure
    cause Tank corrosion
    cause Operator error
    consequence Soil contamination
    consequence Toxic fumes
    barrier Inspection: Valve failure, Tank corrosion
    barrier Training: Operator error
    barrier Bunding: Soil contamination
    barrier Gas detection: Toxic fumes, Soil contamination
    barrier Evacuation: Toxic fumes
    """


@pytest.fixture
def parser():
    """Default Parser instance."""
    return Parser()


@pytest.fixture
def generator():
    """Default BowtieGenerator instance."""
    return BowtieGenerator()


@pytest.fixture
def render_trace():
    """
    Render input text without producing an image.

    Returns a function that yields (trace, brush) so tests can compare the
    recorded draw calls with the layout the brush computed.
    """

    def _render(input_text, config=None):
        trace = RenderTrace(input_text=input_text)
        brush = Brush(parse_diagram(input_text), config)
        brush.render(TracedRenderer(NullRenderer(), trace))
        return trace, brush

    return _render
