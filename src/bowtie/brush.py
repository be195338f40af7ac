"""
Layout engine for bow-tie diagrams.

The Brush turns a Diagram into an ordered sequence of draw calls against a
Renderer in a single pass. Every coordinate comes from closed-form
arithmetic over three inputs: the event label width, the widest component
label and the number of distinct barriers in each lane.

Canvas anatomy (causes on the left, consequences mirrored on the right):

    [cause box] --|1|--|2|--\\                   /--|3|-- [consequence box]
    [cause box] --|1|--------(   top event   )-------------- [consequence box]
    [1] barrier name                                        barrier name [3]

Draw order is significant: border, component boxes, event circle,
connectors, then barrier labels and interception rectangles on top.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .graph import BarrierGraph
from .models import Component, ComponentKind, Diagram, Rectangle, Vector2
from .renderer import Alignment, Renderer, monospace_text_width

logger = logging.getLogger(__name__)


class LayoutError(ValueError):
    """Raised when a diagram cannot be laid out."""

    pass


@dataclass
class LayoutConfig:
    """
    Fixed measurements used by the layout engine.

    Attributes:
        component_height: Height of component boxes, barrier markers and
            label rows.
        component_margin: Vertical gap between stacked rows.
        component_padding_x: Gap between a component box and the canvas edge.
        barrier_width: Width of a barrier marker.
        barrier_spacing: Horizontal gap between barrier slots.
        barrier_margin: Per-barrier margin used to size the barrier container.
        barrier_container_padding: Outer padding on each side of the barrier
            container.
        height_scale: Multiplier applied to the stacked content height.
        height_slack: Constant added to the canvas height.
        text_width: Callable estimating the rendered width of a label.
    """

    component_height: float = 50.0
    component_margin: float = 20.0
    component_padding_x: float = 10.0
    barrier_width: float = 25.0
    barrier_spacing: float = 10.0
    barrier_margin: float = 50.0
    barrier_container_padding: float = 150.0
    height_scale: float = 1.1
    height_slack: float = 150.0
    text_width: Callable[[str], float] = field(default=monospace_text_width)

    def container_height(self, count: int) -> float:
        """Height of ``count`` stacked rows. Zero rows take no space."""
        gaps = max(count - 1, 0)
        return count * self.component_height + gaps * self.component_margin

    def barrier_container_width(self, count: int) -> float:
        """Width reserved between component boxes and the event circle."""
        gaps = max(count - 1, 0)
        return (
            count * self.barrier_width
            + gaps * self.barrier_margin
            + 2.0 * self.barrier_container_padding
        )


@dataclass
class LayoutContext:
    """
    Geometry computed for one render.

    A new context is built for every render call and never reused.
    """

    canvas_width: float
    canvas_height: float
    causes_container_height: float
    consequences_container_height: float
    max_component_box_width: float
    event_radius: float
    circle_left_point: Optional[Vector2] = None
    circle_right_point: Optional[Vector2] = None

    @property
    def centre(self) -> Vector2:
        return Vector2(self.canvas_width / 2.0, self.canvas_height / 2.0)

    def container_height(self, kind: ComponentKind) -> float:
        if kind == ComponentKind.CAUSE:
            return self.causes_container_height
        return self.consequences_container_height


class Brush:
    """
    Lays out a diagram and drives a renderer through the drawing.

    Example:
        >>> from bowtie.svg_renderer import SvgRenderer
        >>> brush = Brush(diagram)
        >>> svg_bytes = brush.render(SvgRenderer())
    """

    def __init__(self, diagram: Diagram, config: Optional[LayoutConfig] = None):
        self.diagram = diagram
        self.config = config or LayoutConfig()
        self.causes = diagram.causes()
        self.consequences = diagram.consequences()
        self.barrier_graphs: Dict[ComponentKind, BarrierGraph] = {
            ComponentKind.CAUSE: BarrierGraph.for_lane(
                self.causes, ComponentKind.CAUSE
            ),
            ComponentKind.CONSEQUENCE: BarrierGraph.for_lane(
                self.consequences, ComponentKind.CONSEQUENCE
            ),
        }
        # Context of the most recent render
        self.context: Optional[LayoutContext] = None

    def layout(self) -> LayoutContext:
        """
        Compute the canvas geometry without drawing anything.

        Raises:
            LayoutError: If the diagram has no components at all, or if the
                event label is empty.
        """
        if not self.causes and not self.consequences:
            raise LayoutError("Diagram has no causes and no consequences")
        if not self.diagram.event:
            raise LayoutError("Diagram has no event label")

        cfg = self.config
        event_radius = cfg.text_width(self.diagram.event) / 2.0
        if event_radius <= 0:
            raise LayoutError(
                f"Event label {self.diagram.event!r} has zero width"
            )

        cause_barriers = len(self.barrier_graphs[ComponentKind.CAUSE])
        consequence_barriers = len(self.barrier_graphs[ComponentKind.CONSEQUENCE])

        max_component_box_width = max(
            (cfg.text_width(c.name) for c in self.diagram.components), default=0.0
        )
        max_barrier_container_width = max(
            cfg.barrier_container_width(cause_barriers),
            cfg.barrier_container_width(consequence_barriers),
        )

        causes_container_height = cfg.container_height(len(self.causes))
        consequences_container_height = cfg.container_height(len(self.consequences))
        barriers_height = cfg.container_height(cause_barriers) + cfg.container_height(
            consequence_barriers
        )
        content_height = (
            max(causes_container_height, consequences_container_height)
            + barriers_height
        )

        canvas_width = (
            event_radius
            + 2.0 * max_component_box_width
            + 2.0 * max_barrier_container_width
        )
        canvas_height = content_height * cfg.height_scale + cfg.height_slack

        logger.debug(
            "Canvas %.1fx%.1f, box width %.1f, barriers %d/%d",
            canvas_width,
            canvas_height,
            max_component_box_width,
            cause_barriers,
            consequence_barriers,
        )

        return LayoutContext(
            canvas_width=canvas_width,
            canvas_height=canvas_height,
            causes_container_height=causes_container_height,
            consequences_container_height=consequences_container_height,
            max_component_box_width=max_component_box_width,
            event_radius=event_radius,
        )

    def render(self, renderer: Renderer) -> bytes:
        """
        Lay out the diagram, draw it on ``renderer`` and return its bytes.

        Raises:
            LayoutError: If the diagram cannot be laid out.
        """
        self.context = self.layout()
        ctx = self.context

        r = renderer.initialize(ctx.canvas_width, ctx.canvas_height)

        # Border around the whole canvas
        r = r.draw_rectangle(Rectangle(ctx.centre, ctx.canvas_width, ctx.canvas_height))

        r = self._render_components(r, ComponentKind.CAUSE)
        r = self._render_components(r, ComponentKind.CONSEQUENCE)
        r = self._render_event_circle(r)
        r = self._render_connectors(r, ComponentKind.CAUSE)
        r = self._render_connectors(r, ComponentKind.CONSEQUENCE)
        r = self._render_barriers(r, ComponentKind.CAUSE, 0)
        r = self._render_barriers(
            r,
            ComponentKind.CONSEQUENCE,
            len(self.barrier_graphs[ComponentKind.CAUSE]),
        )
        return r.finalize()

    def _render_components(self, r: Renderer, kind: ComponentKind) -> Renderer:
        x = self.component_x_center(kind)
        for i, component in enumerate(self.components(kind)):
            rect = Rectangle(
                Vector2(x, self.component_y_center(i, kind)),
                self.context.max_component_box_width,
                self.config.component_height,
            )
            r = r.draw_text_with_rectangle(component.name, rect, Alignment.CENTER)
        return r

    def _render_event_circle(self, r: Renderer) -> Renderer:
        ctx = self.context
        radius = ctx.event_radius
        centre = ctx.centre
        r = r.draw_circle(radius, centre)
        r = r.draw_text(
            self.diagram.event, Rectangle(centre, radius, radius), Alignment.CENTER
        )
        ctx.circle_left_point = Vector2(centre.x - radius, centre.y)
        ctx.circle_right_point = Vector2(centre.x + radius, centre.y)
        return r

    def _render_connectors(self, r: Renderer, kind: ComponentKind) -> Renderer:
        circle_point = self.circle_point(kind)
        for i in range(len(self.components(kind))):
            r = r.draw_line(self.component_edge(i, kind), circle_point)
        return r

    def _render_barriers(
        self, r: Renderer, kind: ComponentKind, id_offset: int
    ) -> Renderer:
        cfg = self.config
        graph = self.barrier_graphs[kind]
        circle_point = self.circle_point(kind)
        rows = len(self.components(kind))

        for i, (barrier, _) in enumerate(graph.frequencies()):
            x = self.barrier_x_center(i, kind)
            label_id = str(id_offset + i + 1)

            r = r.draw_text(
                label_id,
                Rectangle(
                    Vector2(x, self.component_y_center(-1, kind)),
                    cfg.barrier_width,
                    cfg.component_height,
                ),
                Alignment.CENTER,
            )
            r = r.draw_text(
                barrier_label(kind, label_id, barrier),
                Rectangle(
                    Vector2(
                        self.component_x_center(kind),
                        self.component_y_center(rows + i, kind),
                    ),
                    self.context.max_component_box_width,
                    cfg.component_height,
                ),
                barrier_label_alignment(kind),
            )
            for j in graph.components_with(barrier):
                point = slope_point(self.component_edge(j, kind), circle_point, x)
                r = r.draw_rectangle(
                    Rectangle(point, cfg.barrier_width, cfg.component_height)
                )
        return r

    def components(self, kind: ComponentKind) -> List[Component]:
        if kind == ComponentKind.CAUSE:
            return self.causes
        return self.consequences

    def circle_point(self, kind: ComponentKind) -> Vector2:
        """Point on the event circle that a lane's connectors run to."""
        if kind == ComponentKind.CAUSE:
            return self.context.circle_left_point
        return self.context.circle_right_point

    def component_x_center(self, kind: ComponentKind) -> float:
        ctx = self.context
        offset = ctx.max_component_box_width / 2.0 + self.config.component_padding_x
        if kind == ComponentKind.CAUSE:
            return offset
        return ctx.canvas_width - offset

    def component_y_center(self, i: float, kind: ComponentKind) -> float:
        """
        Centre y of row ``i`` in a lane's vertically centred container.

        Row -1 is the label row above the first component; rows past the
        last component hold barrier name labels.
        """
        cfg = self.config
        ctx = self.context
        top = ctx.canvas_height / 2.0 - ctx.container_height(kind) / 2.0
        return (
            top
            + i * (cfg.component_height + cfg.component_margin)
            + cfg.component_height / 2.0
        )

    def component_edge(self, i: int, kind: ComponentKind) -> Vector2:
        """Midpoint of the box edge facing the event circle."""
        return Vector2(self._inner_edge_x(kind), self.component_y_center(i, kind))

    def barrier_x_center(self, i: int, kind: ComponentKind) -> float:
        """Centre x of barrier slot ``i``, counted from the component boxes."""
        cfg = self.config
        offset = (
            i * (cfg.barrier_width + cfg.barrier_spacing)
            + (i + 1) * cfg.barrier_spacing
            + cfg.barrier_width / 2.0
        )
        return self._inner_edge_x(kind) + _direction(kind) * offset

    def _inner_edge_x(self, kind: ComponentKind) -> float:
        half_box = self.context.max_component_box_width / 2.0
        return self.component_x_center(kind) + _direction(kind) * half_box


def _direction(kind: ComponentKind) -> int:
    # +1 when moving towards the event circle means moving right
    return 1 if kind == ComponentKind.CAUSE else -1


def slope_point(start: Vector2, end: Vector2, x: float) -> Vector2:
    """
    Point on the line through ``start`` and ``end`` at the given x.

    Raises:
        LayoutError: If the line is vertical, which leaves y undefined.
    """
    run = end.x - start.x
    if run == 0:
        raise LayoutError(
            f"Cannot place a barrier at x={x}: connector at x={start.x} is vertical"
        )
    slope = (end.y - start.y) / run
    return Vector2(x, start.y + slope * (x - start.x))


def barrier_label(kind: ComponentKind, label_id: str, barrier: str) -> str:
    if kind == ComponentKind.CAUSE:
        return f"[{label_id}] {barrier}"
    return f"{barrier} [{label_id}]"


def barrier_label_alignment(kind: ComponentKind) -> Alignment:
    if kind == ComponentKind.CAUSE:
        return Alignment.LEFT
    return Alignment.RIGHT


def render_diagram(
    renderer: Renderer, diagram: Diagram, config: Optional[LayoutConfig] = None
) -> bytes:
    """
    Convenience function to lay out and render a diagram.

    Args:
        renderer: Drawing surface to drive.
        diagram: The parsed diagram.
        config: Optional layout measurements.

    Returns:
        The renderer's finalized bytes.
    """
    return Brush(diagram, config).render(renderer)
