"""
Debug tracing infrastructure for bowtie.

This module provides data structures for capturing detailed traces of the
diagram generation pipeline. When debug mode is enabled, the generator
records each pipeline stage and every draw call sent to the renderer.

This is primarily useful for:
1. Debugging layout issues (seeing the exact coordinates of every shape)
2. Understanding the pipeline flow (parse, layout, draw)
3. Writing targeted tests (verifying specific drawing decisions)

Usage:
    >>> generator = BowtieGenerator()
    >>> svg = generator.generate(text, debug=True)
    >>> trace = generator.get_trace()
    >>> print(trace.summary())
    >>> trace.dump_to_file("debug_trace.txt")
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


@dataclass
class DrawCall:
    """
    Record of a single call made on a renderer.

    Attributes:
        index: Position of the call in the draw sequence (0-based).
        operation: Renderer method name (e.g., "draw_line").
        args: Positional arguments the method received.
    """

    index: int
    operation: str
    args: Tuple[Any, ...]

    def __str__(self) -> str:
        rendered = ", ".join(repr(arg) for arg in self.args)
        return f"#{self.index} {self.operation}({rendered})"


@dataclass
class PipelineStage:
    """
    Snapshot of state at a pipeline stage.

    The generation pipeline has three stages:
    1. parse - Convert input text to a Diagram
    2. layout - Compute canvas geometry
    3. draw - Drive the renderer and finalize

    Attributes:
        name: Name of this pipeline stage
        data: Dictionary of relevant data at this stage
    """

    name: str
    data: Dict[str, Any]

    def __str__(self) -> str:
        lines = [f"=== Stage: {self.name} ==="]
        for key, value in self.data.items():
            # Truncate long values
            str_val = str(value)
            if len(str_val) > 100:
                str_val = str_val[:100] + "..."
            lines.append(f"  {key}: {str_val}")
        return "\n".join(lines)


@dataclass
class RenderTrace:
    """
    Complete trace of a render operation.

    Attributes:
        stages: List of pipeline stages with their data
        draw_calls: Every renderer call, in order
        input_text: The original input text
    """

    stages: List[PipelineStage] = field(default_factory=list)
    draw_calls: List[DrawCall] = field(default_factory=list)
    input_text: str = ""

    def add_stage(self, name: str, data: Dict[str, Any]) -> None:
        """Add a pipeline stage snapshot."""
        self.stages.append(PipelineStage(name, data.copy()))

    def add_call(self, operation: str, *args: Any) -> None:
        """Record a renderer call."""
        self.draw_calls.append(DrawCall(len(self.draw_calls), operation, args))

    def get_stage(self, name: str) -> Optional[PipelineStage]:
        """Get a specific pipeline stage by name."""
        for stage in self.stages:
            if stage.name == name:
                return stage
        return None

    def get_calls(self, operation: str) -> List[DrawCall]:
        """Get all calls of one renderer method, in draw order."""
        return [call for call in self.draw_calls if call.operation == operation]

    def get_texts(self) -> List[str]:
        """Get every text label drawn, boxed or not, in draw order."""
        return [
            call.args[0]
            for call in self.draw_calls
            if call.operation in ("draw_text", "draw_text_with_rectangle")
        ]

    def operations(self) -> List[str]:
        """Get the sequence of renderer method names."""
        return [call.operation for call in self.draw_calls]

    def summary(self) -> str:
        """
        Generate a human-readable summary of the trace.

        Returns a string with the input text, the pipeline stages and the
        number of calls per renderer method.
        """
        lines = [
            "=" * 60,
            "RENDER TRACE SUMMARY",
            "=" * 60,
            "",
            f"Input: {repr(self.input_text[:100])}"
            f"{'...' if len(self.input_text) > 100 else ''}",
            "",
            f"Pipeline stages: {len(self.stages)}",
        ]

        for stage in self.stages:
            lines.append(f"  {stage.name}")

        lines.extend(["", f"Total draw calls: {len(self.draw_calls)}", ""])

        # Count by operation
        counts: Dict[str, int] = {}
        for call in self.draw_calls:
            counts[call.operation] = counts.get(call.operation, 0) + 1

        lines.append("Calls by operation:")
        for operation, count in sorted(counts.items(), key=lambda x: -x[1]):
            lines.append(f"  {operation}: {count}")

        return "\n".join(lines)

    def dump(self) -> str:
        """Generate a complete dump of the trace: stages and every call."""
        lines = [self.summary(), "", "=" * 60, "DETAILED TRACE", "=" * 60, ""]

        lines.append("PIPELINE STAGES:")
        lines.append("-" * 40)
        for stage in self.stages:
            lines.append(str(stage))
            lines.append("")

        lines.append("DRAW CALLS:")
        lines.append("-" * 40)
        for call in self.draw_calls:
            lines.append(str(call))

        return "\n".join(lines)

    def dump_to_file(self, filename: str) -> None:
        """Write the complete trace dump to a file."""
        with open(filename, "w", encoding="utf-8") as f:
            f.write(self.dump())
